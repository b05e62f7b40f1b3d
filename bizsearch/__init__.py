"""
Business search service.

Responsibilities:
- Load the static business catalog once at startup.
- Match businesses against state / coordinate filters and free text.
- Widen the search radius along a fixed ladder when nothing is found.
- Expose the search over HTTP.
"""
