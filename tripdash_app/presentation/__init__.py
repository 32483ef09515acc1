"""
Presentation boundary.

Display metadata keyed by the priority and status values the aggregation
components pass through. Nothing here feeds back into derivation.
"""
