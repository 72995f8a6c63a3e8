SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_CURRENCY = "MXN"

FORCED_OVERTIME_REGULAR_MINUTES = 60
