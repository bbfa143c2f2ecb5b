# config.py

import os
from datetime import timedelta
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# This line finds the .env file in your root directory and loads it.
load_dotenv(os.path.join(basedir, '..', '.env'))
# --------------------------------------

class Config:
    """
    Contains all the configuration variables for the application,
    including database, session cookie and image settings.
    """
    # --- Database Settings ---
    # Reads the database URL from the .env file.
    # Provides a default (e.g., for SQLite) if the variable isn't set.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'yelpcamp.db')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Secret Key ---
    # Signs the session cookie (and with it, the flash messages).
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'replacewithbettersecret'

    # --- Session Cookie ---
    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE') is not None
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=7)
    REMEMBER_COOKIE_HTTPONLY = True

    # --- Images ---
    # Thumbnails are derived from upload URLs by inserting a width
    # transformation right after this path segment.
    IMAGE_UPLOAD_MARKER = '/upload'
    THUMBNAIL_WIDTH = 200

    # --- CORS (map feed under /api) ---
    CORS_ORIGINS = [
        origin.strip()
        for origin in (os.environ.get('CORS_ORIGINS') or 'http://localhost:3000,http://127.0.0.1:3000').split(',')
        if origin.strip()
    ]

    # --- Logging ---
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestingConfig(Config):
    """Configuration used by the test suite."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'testing-secret'
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_ENABLED = False
