"""
Derived view-model module.

Immutable values produced by the aggregation components and handed to the
presentation layer.
"""
