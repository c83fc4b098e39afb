# requiressl/context_processors.py
from .conf import get_policy


def ssl_policy(request):
    """
    Expose the SSL state of the page to templates.
    """
    return {
        "SSL_REQUIRED": getattr(request, "_ssl_required", False),
        "SSL_REDIRECTS_DISABLED": get_policy().disabled,
    }
