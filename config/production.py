import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_GRACE_PERIOD_MINUTES = os.getenv("DEFAULT_GRACE_PERIOD_MINUTES", "15")

THRESHOLD_PROFILE = os.getenv("THRESHOLD_PROFILE", "strict")
TARDY_THRESHOLD_MINUTES = os.getenv("TARDY_THRESHOLD_MINUTES")
UNDERTIME_THRESHOLD_MINUTES = os.getenv("UNDERTIME_THRESHOLD_MINUTES")
