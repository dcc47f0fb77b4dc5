"""API module for Ledgerlens.

- Validates request bodies and query parameters
- Calls the aggregation layer and returns its document verbatim
"""
