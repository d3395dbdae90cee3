"""Settings for the pytest run: in-memory database and fast hashing."""

from .base import *  # noqa: F403
from .base import LOGGING
from .base import env

SECRET_KEY = env("DJANGO_SECRET_KEY", default="payroll-test-secret-key")

# DATABASES
# ------------------------------------------------------------------------------
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
        "ATOMIC_REQUESTS": True,
    },
}

# PASSWORDS
# ------------------------------------------------------------------------------
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# EMAIL
# ------------------------------------------------------------------------------
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# LOGGING
# ------------------------------------------------------------------------------
# caplog only sees records that reach the root logger.
LOGGING["loggers"]["workforce_payroll"]["propagate"] = True

# PAYROLL
# ------------------------------------------------------------------------------
PAYROLL_DEFAULT_ORG_ID = 1
