"""
Search core.

Responsibilities:
- Compute great-circle distances between coordinates.
- Decide whether a single business matches the location and text filters.
- Escalate the search radius along a fixed ladder until something matches.
"""
