"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

# Overtime smaller than this is credited as regular time.
OVERTIME_TOLERANCE_MINUTES = 20

# A day counts as a full shift from this many worked hours, whatever hours_per_shift says.
FULL_SHIFT_HOURS = 8

# Force-overtime days start at 00:00; the first hour is still regular.
FORCED_OVERTIME_REGULAR_MINUTES = 60

DEFAULT_OVERTIME_TIER1_RATE = 1.5
DEFAULT_OVERTIME_TIER2_RATE = 2.0
DEFAULT_OVERTIME_TIER1_HOURS = 2
DEFAULT_HOURS_PER_SHIFT = 8
DEFAULT_BREAK_HOURS = 1
DEFAULT_MIN_HOURS_FOR_BREAK = 5
DEFAULT_CURRENCY = "MXN"

DAYS_PER_WEEK = 7
