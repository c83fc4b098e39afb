from urllib.parse import urlsplit

from django.apps import apps
from django.core.exceptions import DisallowedHost
from django.core.management.base import BaseCommand, CommandError
from django.test import RequestFactory

from requiressl.utils import build_redirect_uri


class Command(BaseCommand):
    help = "🔒 Show the RequireSSL policy and where a URL would be redirected."

    def add_arguments(self, parser):
        parser.add_argument("--url", help="Absolute URL to run through both redirect rules.")

    def handle(self, *args, **options):
        config = apps.get_app_config("requiressl")
        policy = config.policy

        self.stdout.write(self.style.MIGRATE_HEADING("--- RequireSSL policy ---"))
        self.stdout.write(f"engine:        {config.engine}")
        self.stdout.write(f"https host:    {policy.host('https') or '(from first request)'}")
        self.stdout.write(f"http host:     {policy.host('http') or '(from first request)'}")
        self.stdout.write(f"remain_in_ssl: {policy.remain_in_ssl}")
        if policy.disabled:
            self.stdout.write(self.style.WARNING("disabled:      True (redirects are only logged)"))
        else:
            self.stdout.write("disabled:      False")

        if options["url"]:
            self._simulate(options["url"], policy)

    def _simulate(self, url, policy):
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise CommandError(f"Not an absolute http(s) URL: {url}")

        path = parts.path or "/"
        if parts.query:
            path += "?" + parts.query
        request = RequestFactory().get(path, secure=parts.scheme == "https", HTTP_HOST=parts.netloc)

        try:
            https_uri = build_redirect_uri(request, "https", policy)
            http_uri = build_redirect_uri(request, "http", policy)
        except DisallowedHost as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(self.style.MIGRATE_HEADING(f"\n--- {url} ---"))
        if parts.scheme == "https":
            self.stdout.write("require_ssl(): stays on HTTPS")
            if policy.remain_in_ssl:
                self.stdout.write("unmarked page: stays on HTTPS (remain_in_ssl)")
            else:
                self.stdout.write(f"unmarked page: {self._target(http_uri, policy)}")
        else:
            self.stdout.write(f"require_ssl(): {self._target(https_uri, policy)}")
            self.stdout.write("unmarked page: stays on HTTP")

    @staticmethod
    def _target(uri, policy):
        if policy.disabled:
            return f"would redirect to {uri} (disabled, only logged)"
        return uri
