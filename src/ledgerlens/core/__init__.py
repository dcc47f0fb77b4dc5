"""Core utilities shared by the aggregation layer."""
