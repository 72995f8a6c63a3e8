import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "MXN")

# Regular minutes credited at the start of a force-overtime day (shift continuing past midnight)
FORCED_OVERTIME_REGULAR_MINUTES = int(os.getenv("FORCED_OVERTIME_REGULAR_MINUTES", "60"))
