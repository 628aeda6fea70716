"""Test settings for FitKits project.

Runs against in-memory SQLite unless TEST_WITH_POSTGRES is set, in which
case the PostgreSQL configuration from base.py is used.
"""

import os

from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key-not-for-production"
DEBUG = False

if not os.environ.get("TEST_WITH_POSTGRES"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": ":memory:",
        }
    }

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
