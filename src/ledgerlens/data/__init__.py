"""Built-in ledger data."""
