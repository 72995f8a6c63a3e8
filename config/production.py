import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "MXN")

FORCED_OVERTIME_REGULAR_MINUTES = int(os.getenv("FORCED_OVERTIME_REGULAR_MINUTES", "60"))
