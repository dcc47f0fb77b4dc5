"""Aggregation module for ledger summaries.

- Turns ledger rows into the monthly/category summary document
- Pure computation: no I/O, no shared state
"""
