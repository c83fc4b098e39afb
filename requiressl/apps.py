import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class RequireSSLConfig(AppConfig):
    name = "requiressl"
    verbose_name = "Require SSL"

    engine = None
    engine_disabled = False
    policy = None

    def ready(self):
        super().ready()

        from . import checks  # noqa: F401
        from .engine import TLS_INCAPABLE_ENGINES, current_engine

        self.engine = current_engine()
        self.engine_disabled = self.engine in TLS_INCAPABLE_ENGINES
        if self.engine_disabled:
            logger.warning("RequireSSL: Disabling SSL redirection while running under %s", self.engine)

        self.load_policy()

    def load_policy(self):
        """(Re)build the process-wide policy; memoized hosts start empty again."""
        from .conf import SSLPolicy

        self.policy = SSLPolicy.from_settings(disabled=self.engine_disabled)
        return self.policy
