"""
Contact data models and normalization.

Immutable data structures for contacts, gifts and query results.
"""
