SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_GRACE_PERIOD_MINUTES = 15

THRESHOLD_PROFILE = "strict"
TARDY_THRESHOLD_MINUTES = None
UNDERTIME_THRESHOLD_MINUTES = None
