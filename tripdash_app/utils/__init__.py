"""
Utility functions module.

Calendar date helpers shared by the aggregation components.

Time Semantics:
- The caller always supplies "now"; nothing in the package reads the clock
- Instants are reduced to calendar dates before any trip comparison
- Date ranges are inclusive at both ends
"""
