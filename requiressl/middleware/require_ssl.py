import logging

from django.http import HttpResponseRedirect

from requiressl.conf import get_policy
from requiressl.utils import build_redirect_uri

logger = logging.getLogger(__name__)


class RequireSSLMiddleware:
    """
    Finish what ``require_ssl`` started and send everyone else back to HTTP.

    • A redirect set up by ``require_ssl`` during the view replaces the
      view's response.
    • Secure requests that never called ``require_ssl`` are redirected to
      the HTTP host, unless they are POSTs or ``remain_in_ssl`` is on.
    • Everything else passes through untouched.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # middleware ahead of this one may already have called require_ssl()
        if not hasattr(request, "_ssl_required"):
            request._ssl_required = False
        if not hasattr(request, "_ssl_redirect"):
            request._ssl_redirect = None

        response = self.get_response(request)

        if request._ssl_redirect is not None:
            return request._ssl_redirect

        policy = get_policy()
        if not self._should_downgrade(request, policy):
            return response

        uri = build_redirect_uri(request, "http", policy)
        if policy.disabled:
            logger.warning("RequireSSL: Would have redirected to %s", uri)
            return response

        logger.debug("RequireSSL: leaving SSL for %s", uri)
        return HttpResponseRedirect(uri)

    @staticmethod
    def _should_downgrade(request, policy):
        return (
            request.is_secure()
            and request.method != "POST"
            and not request._ssl_required
            and not policy.remain_in_ssl
        )
