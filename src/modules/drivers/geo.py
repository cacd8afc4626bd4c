"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math

from modules.drivers.constants import EARTH_RADIUS_KM


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometres between two (latitude, longitude) points.

    Uses the spherical law of cosines.  The cosine is clamped to
    ``[-1, 1]`` so floating-point drift on identical or antipodal points
    never reaches ``acos`` out of its domain.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)

    cosine = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(
        phi2
    ) * math.cos(delta_lambda)
    cosine = max(-1.0, min(1.0, cosine))
    return EARTH_RADIUS_KM * math.acos(cosine)
