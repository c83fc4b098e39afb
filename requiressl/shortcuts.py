import logging

from django.http import HttpResponseRedirect

from .conf import get_policy
from .utils import build_redirect_uri

logger = logging.getLogger(__name__)


def require_ssl(request):
    """
    Mark ``request`` as SSL-only.

    Insecure non-POST requests get a redirect to the same page on the
    HTTPS host. The redirect is returned and also remembered on the
    request, so ``RequireSSLMiddleware`` sends it even when the view
    goes on to return something else. POST requests are never
    redirected since the body would be lost.
    """
    request._ssl_required = True

    if request.is_secure() or request.method == "POST":
        return None

    policy = get_policy()
    uri = build_redirect_uri(request, "https", policy)
    if policy.disabled:
        logger.warning("RequireSSL: Would have redirected to %s", uri)
        return None

    logger.debug("RequireSSL: redirecting %s to %s", request.path, uri)
    response = HttpResponseRedirect(uri)
    request._ssl_redirect = response
    return response
