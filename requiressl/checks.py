from django.conf import settings
from django.core.checks import Error, Tags, Warning, register

from .conf import SETTING_KEYS

MIDDLEWARE_PATHS = (
    "requiressl.middleware.RequireSSLMiddleware",
    "requiressl.middleware.require_ssl.RequireSSLMiddleware",
)


@register(Tags.security)
def check_setting(app_configs, **kwargs):
    conf = getattr(settings, "REQUIRE_SSL", {})
    if not isinstance(conf, dict):
        return [
            Error(
                "REQUIRE_SSL must be a dict.",
                hint="Use e.g. {'https': 'secure.example.com', 'remain_in_ssl': False}.",
                id="requiressl.E001",
            )
        ]

    errors = []
    unknown = sorted(set(conf) - SETTING_KEYS)
    if unknown:
        errors.append(
            Error(
                f"REQUIRE_SSL has unknown keys: {', '.join(unknown)}.",
                hint=f"Allowed keys are {', '.join(sorted(SETTING_KEYS))}.",
                id="requiressl.E002",
            )
        )

    if getattr(settings, "SECURE_SSL_REDIRECT", False) and not conf.get("remain_in_ssl"):
        errors.append(
            Error(
                "SECURE_SSL_REDIRECT sends every page to HTTPS while RequireSSL "
                "sends unmarked pages back to HTTP.",
                hint="Turn SECURE_SSL_REDIRECT off or set REQUIRE_SSL['remain_in_ssl'] = True.",
                id="requiressl.E003",
            )
        )
    return errors


@register(Tags.security)
def check_middleware(app_configs, **kwargs):
    if any(path in settings.MIDDLEWARE for path in MIDDLEWARE_PATHS):
        return []
    return [
        Warning(
            "RequireSSLMiddleware is not installed; pages will never leave SSL "
            "and redirects from require_ssl() only work when the view returns them.",
            hint="Add 'requiressl.middleware.RequireSSLMiddleware' to MIDDLEWARE.",
            id="requiressl.W001",
        )
    ]
