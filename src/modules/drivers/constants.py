"""Driver matching constants."""

# Vehicle-type filter values meaning "no filter".
VEHICLE_TYPE_WILDCARDS = frozenset({"", "all", "any", "*"})

EARTH_RADIUS_KM = 6371.0
