"""
Trip and action item data layer.

Immutable record snapshots and the normalizer that builds them from raw
API records.
"""
