"""Physical constants shared by the guidance code."""

EARTH_RADIUS_NM = 3440.1
SECONDS_PER_HOUR = 3600.0
