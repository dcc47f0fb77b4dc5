"""Domain dataclasses and API models for Ledgerlens."""
