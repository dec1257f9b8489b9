"""
Development settings for Bookwise project.

These settings override the base settings for local development environments.
"""

from decouple import config

from .base import *  # noqa: F401,F403

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config("SECRET_KEY", default="django-insecure-development-key-not-for-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config("DEBUG", default=True, cast=bool)

# Allow all hosts in development (for convenience)
ALLOWED_HOSTS = ["*"]

CORS_ALLOW_ALL_ORIGINS = True

LOGGING["handlers"]["console"]["level"] = "DEBUG"  # noqa: F405
for _logger in ("apps", "algorithms", "core", "bookwise"):
    LOGGING["loggers"][_logger]["level"] = "DEBUG"  # noqa: F405
