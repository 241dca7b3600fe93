"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6
METRIC_PRECISION = 2
