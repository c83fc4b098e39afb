import os
from pathlib import Path
from dotenv import load_dotenv

# =====================================================
# 🔹 PATHS
# =====================================================
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =====================================================
# 🔹 ENVIRONMENT
# =====================================================
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def env_flag(name, default="0"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# =====================================================
# 🔹 BASIC SETTINGS
# =====================================================
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-key")
DEBUG = env_flag("DJANGO_DEBUG", "1")

ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "127.0.0.1,localhost").split(",")
    if h.strip()
]

# =====================================================
# 🔹 APPLICATIONS
# =====================================================
INSTALLED_APPS = [
    "whitenoise.runserver_nostatic",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "requiressl.apps.RequireSSLConfig",
]

# =====================================================
# 🔹 MIDDLEWARE
# =====================================================
# WhiteNoise answers static files before RequireSSL sees them, so
# assets on an SSL page are not sent back to HTTP.
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "requiressl.middleware.RequireSSLMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "ssl_gateway.urls"

# =====================================================
# 🔹 TEMPLATES
# =====================================================
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
                "requiressl.context_processors.ssl_policy",
            ],
        },
    },
]

WSGI_APPLICATION = "ssl_gateway.wsgi.application"

# =====================================================
# 🔹 DATABASE (none, sessions live in signed cookies)
# =====================================================
DATABASES = {}

# =====================================================
# 🔹 STATIC
# =====================================================
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# =====================================================
# 🔹 SESSION + MESSAGES
# =====================================================
# The session must be readable on both schemes (and both hosts when
# REQUIRE_SSL_HTTPS_HOST differs), so the cookie is never marked secure.
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
SESSION_COOKIE_DOMAIN = os.getenv("SESSION_COOKIE_DOMAIN") or None
SESSION_COOKIE_SECURE = False
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

# =====================================================
# 🔒 REQUIRE SSL
# =====================================================
REQUIRE_SSL = {
    "https": os.getenv("REQUIRE_SSL_HTTPS_HOST") or None,
    "http": os.getenv("REQUIRE_SSL_HTTP_HOST") or None,
    "remain_in_ssl": env_flag("REQUIRE_SSL_REMAIN_IN_SSL"),
}
if os.getenv("REQUIRE_SSL_ENGINE"):
    REQUIRE_SSL["engine"] = os.getenv("REQUIRE_SSL_ENGINE")

# =====================================================
# 🔹 DEFAULT AUTO FIELD
# =====================================================
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# =====================================================
# 🔹 TIMEZONE
# =====================================================
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# =====================================================
# 🔹 LOGGING
# =====================================================
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{asctime}] {levelname} {name} | {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "requiressl": {"level": "DEBUG" if DEBUG else "INFO"},
    },
}
