"""Ledgerlens: ledger category summaries for monthly trend charts."""

__version__ = "0.1.0"
