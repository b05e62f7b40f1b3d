from __future__ import annotations

import numpy as np

EARTH_RADIUS_MILES = 3959.0


def haversine_miles(lat1, lng1, lat2, lng2):
    """
    Great-circle distance in miles between two points given in decimal degrees.

    Scalars in, float out. numpy arrays broadcast and return an array.
    """
    lat1_r = np.radians(lat1)
    lat2_r = np.radians(lat2)
    dlat = np.radians(np.subtract(lat2, lat1))
    dlng = np.radians(np.subtract(lng2, lng1))

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1_r) * np.cos(lat2_r) * np.sin(dlng / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    distance = EARTH_RADIUS_MILES * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    if np.ndim(distance) == 0:
        return float(distance)
    return distance
