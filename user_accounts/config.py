"""Service configuration."""

import os

from dotenv import load_dotenv

load_dotenv()

#################### General config for app ####################
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', '3000'))
"""Port the server listens on."""

CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000')
"""Comma separated list of origins allowed to make credentialed requests."""

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')

#################### Account store ####################
DATABASE_URI = os.environ.get(
    'DATABASE_URI',
    os.environ.get('MONGODB_URI', 'sqlite:///./accounts.db')
)
"""SQLAlchemy URI of the account store.

``MONGODB_URI`` is honored for deployments that still carry the old variable
name, but it has to hold an SQLAlchemy URI."""

CREATE_DB = bool(int(os.environ.get('CREATE_DB', '1')))
"""If 1, create the users table at startup when it is missing."""

ALLOWED_EMAIL_DOMAIN = os.environ.get('ALLOWED_EMAIL_DOMAIN', 'gmail.com')
"""Registration only accepts addresses ending in ``@`` plus this domain."""

BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', '10'))
"""bcrypt cost factor for new password hashes."""

#################### Session cookie ####################
SESSION_COOKIE_NAME = os.environ.get('SESSION_COOKIE_NAME', 'user')
SESSION_COOKIE_MAX_AGE = int(os.environ.get('SESSION_COOKIE_MAX_AGE', '86400'))
"""Lifetime of the session cookie, in seconds."""

SESSION_COOKIE_SECURE = \
    bool(int(os.environ.get('SESSION_COOKIE_SECURE', '1')))
SESSION_COOKIE_SAMESITE = os.environ.get('SESSION_COOKIE_SAMESITE', 'none')
"""Front end and API live on different sites, so this is ``none`` by
default. Browsers drop SameSite=None cookies that are not also Secure."""

#################### Uploads ####################
UPLOAD_ROOT = os.environ.get('UPLOAD_ROOT', os.path.abspath('uploads'))
"""Directory under which uploaded files are stored and served."""

UPLOAD_URL_PREFIX = os.environ.get('UPLOAD_URL_PREFIX', '/uploads')
"""URL path under which ``UPLOAD_ROOT`` is served."""

PROFILE_IMAGE_DIR = 'profiles'
"""Sub-directory of ``UPLOAD_ROOT`` that holds profile images."""


def defaults() -> dict:
    """Get the configuration values that :func:`.create_app` accepts."""
    return {
        'HOST': HOST,
        'PORT': PORT,
        'CORS_ORIGINS': CORS_ORIGINS,
        'LOGLEVEL': LOGLEVEL,
        'DATABASE_URI': DATABASE_URI,
        'CREATE_DB': CREATE_DB,
        'ALLOWED_EMAIL_DOMAIN': ALLOWED_EMAIL_DOMAIN,
        'BCRYPT_ROUNDS': BCRYPT_ROUNDS,
        'SESSION_COOKIE_NAME': SESSION_COOKIE_NAME,
        'SESSION_COOKIE_MAX_AGE': SESSION_COOKIE_MAX_AGE,
        'SESSION_COOKIE_SECURE': SESSION_COOKIE_SECURE,
        'SESSION_COOKIE_SAMESITE': SESSION_COOKIE_SAMESITE,
        'UPLOAD_ROOT': UPLOAD_ROOT,
        'UPLOAD_URL_PREFIX': UPLOAD_URL_PREFIX,
        'PROFILE_IMAGE_DIR': PROFILE_IMAGE_DIR,
    }
