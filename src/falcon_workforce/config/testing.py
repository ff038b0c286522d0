from ..core.constants import DEFAULT_ROLE_PERMISSIONS

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ROLE_PERMISSIONS = DEFAULT_ROLE_PERMISSIONS
SUPER_ADMINS = ["root-uid"]

OVERTIME_THRESHOLD_HOURS = 8
