import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Grace period used when a schedule does not carry one
DEFAULT_GRACE_PERIOD_MINUTES = os.getenv("DEFAULT_GRACE_PERIOD_MINUTES", "15")

# strict: tardy/undertime from 1 minute; lenient: tardy from 15, undertime from 60
THRESHOLD_PROFILE = os.getenv("THRESHOLD_PROFILE", "strict")
# Optional per-threshold overrides of the profile
TARDY_THRESHOLD_MINUTES = os.getenv("TARDY_THRESHOLD_MINUTES")
UNDERTIME_THRESHOLD_MINUTES = os.getenv("UNDERTIME_THRESHOLD_MINUTES")
