"""
Django settings for the VentureLink API.

Base settings for both development and production.
Env-vars decide behavior (DEBUG, DB, SECRET_KEY, record store backend, etc).
"""
from datetime import timedelta
from pathlib import Path
import os

import dj_database_url
from dotenv import load_dotenv

# -------------------------------------------------------------------
# PATHS
# -------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent


# -------------------------------------------------------------------
# CORE ENV FLAGS
# -------------------------------------------------------------------
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=True)
ENV = os.environ.get("ENV", "dev")

# SECURITY WARNING: keep the secret key used in production secret!
# In dev, this will fallback to this default. In prod, set SECRET_KEY env.
SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")

# Debug from env: DEBUG=0 or DEBUG=1
DEBUG = os.environ.get("DEBUG", "1") == "1"

# Allowed hosts from env; default for local/dev
ALLOWED_HOSTS = os.environ.get(
    "DJANGO_ALLOWED_HOSTS",
    "127.0.0.1,localhost,testserver"
).split(",")


# -------------------------------------------------------------------
# APPLICATIONS
# -------------------------------------------------------------------
INSTALLED_APPS = [
    # Django core (auth only for password hashers and AnonymousUser)
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # Third-party
    "rest_framework",
    "rest_framework_simplejwt",
    "corsheaders",

    # VentureLink apps
    "core.apps.CoreConfig",
    "users",
    "authx",
    "ideas",
    "investments",
    "chats",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# Routes are declared without trailing slashes
APPEND_SLASH = False

TEMPLATES = []


# -------------------------------------------------------------------
# CORS
# -------------------------------------------------------------------
CORS_ALLOW_ALL_ORIGINS = DEBUG
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]


# -------------------------------------------------------------------
# DATABASE
# -------------------------------------------------------------------
# Holds the `database` record store backend's documents
if os.environ.get("DATABASE_URL"):
    DATABASES = {
        "default": dj_database_url.config(
            default=os.environ.get("DATABASE_URL"),
            conn_max_age=600,
            conn_health_checks=True,
        )
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


# -------------------------------------------------------------------
# RECORD STORE
# -------------------------------------------------------------------
# BACKEND: memory | file | database | mongo
# A mongo backend that cannot be reached falls back to the file backend.
VENTURELINK_STORE = {
    "BACKEND": os.environ.get("VENTURELINK_STORE_BACKEND", "file"),
    "PATH": os.environ.get("VENTURELINK_STORE_PATH", str(BASE_DIR / "venturelink_data.json")),
    "MONGODB_URL": os.environ.get("MONGODB_URL", "mongodb://localhost:27017"),
    "MONGODB_DATABASE": os.environ.get("MONGODB_DATABASE", "venturelink"),
    "MONGODB_TIMEOUT_MS": int(os.environ.get("MONGODB_TIMEOUT_MS", "2000")),
}


# -------------------------------------------------------------------
# PASSWORD HASHING
# -------------------------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]


# -------------------------------------------------------------------
# INTERNATIONALIZATION
# -------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"

USE_I18N = True
# Timestamps on records are ISO-8601 with offset
USE_TZ = True


# -------------------------------------------------------------------
# STATIC
# -------------------------------------------------------------------
STATIC_URL = "/static/"


# -------------------------------------------------------------------
# DJANGO DEFAULTS
# -------------------------------------------------------------------
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# -------------------------------------------------------------------
# REST FRAMEWORK
# -------------------------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "authx.authentication.StoreTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.ScopedRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "auth": os.environ.get("THROTTLE_AUTH_RATE", "60/minute"),
        "chat-message": os.environ.get("THROTTLE_CHAT_MESSAGE_RATE", "120/minute"),
    },
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
}


SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(days=7),
    "ALGORITHM": "HS256",
    "SIGNING_KEY": SECRET_KEY,
    "AUTH_HEADER_TYPES": ("Bearer",),
    "USER_ID_CLAIM": "user_id",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[{levelname}] {asctime} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        # Django internals
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        # Our project-level logs (venturelink.store, .ideas, .investments, .chats, .auth)
        "venturelink": {
            "handlers": ["console"],
            "level": os.environ.get("VENTURELINK_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
        # DRF / API errors
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}

# -------------------------------------------------------------------
# SECURITY (mainly active when DEBUG=False)
# -------------------------------------------------------------------
if not DEBUG:
    SECURE_SSL_REDIRECT = os.environ.get("SECURE_SSL_REDIRECT", "1") == "1"

    SECURE_HSTS_SECONDS = 31536000  # 1 year
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

    SECURE_CONTENT_TYPE_NOSNIFF = True
