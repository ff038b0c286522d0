import os

from ..core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS, DEFAULT_ROLE_PERMISSIONS
from . import parse_super_admins

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

ROLE_PERMISSIONS = DEFAULT_ROLE_PERMISSIONS
SUPER_ADMINS = parse_super_admins(os.getenv("SUPER_ADMINS"))

OVERTIME_THRESHOLD_HOURS = float(os.getenv("OVERTIME_THRESHOLD_HOURS", str(DEFAULT_OVERTIME_THRESHOLD_HOURS)))
