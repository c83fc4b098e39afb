import re
import threading

from django.apps import apps
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

SCHEMES = ("http", "https")
SETTING_KEYS = frozenset({"https", "http", "remain_in_ssl", "disabled", "engine"})

_SCHEME_PREFIX = re.compile(r"^https?://")


def get_setting():
    """Return ``settings.REQUIRE_SSL``, or an empty dict when it is unusable."""
    conf = getattr(settings, "REQUIRE_SSL", None)
    return conf if isinstance(conf, dict) else {}


def _with_slash(host):
    return host if host.endswith("/") else host + "/"


class SSLPolicy:
    """
    Process-wide redirect policy.

    ``https`` / ``http`` are the hosts used when building redirect URIs.
    A host that is not configured is derived from the base URL of the
    first request that needs it and kept for the life of the process,
    even if later requests arrive on a different host.
    """

    def __init__(self, https=None, http=None, remain_in_ssl=False, disabled=False):
        self.remain_in_ssl = bool(remain_in_ssl)
        self.disabled = bool(disabled)
        self._hosts = {
            "https": _with_slash(https) if https else None,
            "http": _with_slash(http) if http else None,
        }
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, disabled=False):
        conf = get_setting()
        return cls(
            https=conf.get("https"),
            http=conf.get("http"),
            remain_in_ssl=conf.get("remain_in_ssl", False),
            disabled=disabled or bool(conf.get("disabled", False)),
        )

    def host(self, scheme):
        """Current host for ``scheme``, or None while it is still unresolved."""
        self._check_scheme(scheme)
        return self._hosts[scheme]

    def resolve_host(self, scheme, base_url):
        self._check_scheme(scheme)
        host = self._hosts[scheme]
        if host is not None:
            return host

        with self._lock:
            # another request may have won the race while we waited
            host = self._hosts[scheme]
            if host is None:
                host = _with_slash(_SCHEME_PREFIX.sub("", base_url))
                self._hosts[scheme] = host
        return host

    @staticmethod
    def _check_scheme(scheme):
        if scheme not in SCHEMES:
            raise ValueError(f"Unsupported redirect scheme: {scheme!r}")

    def __repr__(self):
        return (
            f"<SSLPolicy https={self._hosts['https']!r} http={self._hosts['http']!r} "
            f"remain_in_ssl={self.remain_in_ssl} disabled={self.disabled}>"
        )


def get_policy():
    return apps.get_app_config("requiressl").policy


@receiver(setting_changed)
def reload_policy(*, setting, **kwargs):
    if setting == "REQUIRE_SSL" and apps.ready:
        apps.get_app_config("requiressl").load_policy()
