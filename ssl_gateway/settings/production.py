"""
Production Settings
TLS terminated by the proxy in front of gunicorn
"""

from .base import *
import os


# =====================================================
# 🌐 1) PRODUCTION MODE
# =====================================================
DEBUG = False

ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",")
    if h.strip()
]

# Hosts used for redirects must be served by this project too
for host in (REQUIRE_SSL.get("https"), REQUIRE_SSL.get("http")):
    if host:
        host = host.split("/", 1)[0].split(":", 1)[0]
        if host not in ALLOWED_HOSTS:
            ALLOWED_HOSTS.append(host)

print("✅ ALLOWED_HOSTS:", ALLOWED_HOSTS)


# =====================================================
# 🔐 2) SECURITY / CSRF / SSL
# =====================================================
CSRF_TRUSTED_ORIGINS = [f"https://{h.lstrip('.')}" for h in ALLOWED_HOSTS]

# request.is_secure() follows the proxy
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# RequireSSL decides per page; a blanket redirect would fight it (requiressl.E003)
SECURE_SSL_REDIRECT = False

# No HSTS: browsers would refuse the HTTP pages RequireSSL sends them back to
SECURE_HSTS_SECONDS = 0

SECURE_CONTENT_TYPE_NOSNIFF = True
REFERRER_POLICY = "strict-origin-when-cross-origin"
X_FRAME_OPTIONS = "DENY"


# =====================================================
# 📁 3) STATIC FILES (Whitenoise)
# =====================================================
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}


# =====================================================
# 📝 4) LOGGING
# =====================================================
LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)

LOGGING["handlers"]["file"] = {
    "level": "INFO",
    "class": "logging.FileHandler",
    "filename": str(LOG_DIR / "requiressl.log"),
    "formatter": "verbose",
}
LOGGING["root"]["handlers"] = ["console", "file"]


print("✅ Loaded PRODUCTION settings (proxy TLS + RequireSSL)")
