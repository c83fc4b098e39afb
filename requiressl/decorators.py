from functools import wraps

from .shortcuts import require_ssl


def ssl_required(view_func):
    """Run ``require_ssl`` before the view; skip the view when it redirects."""

    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        response = require_ssl(request)
        if response is not None:
            return response
        return view_func(request, *args, **kwargs)

    return _wrapped_view
