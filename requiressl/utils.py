from django.utils.datastructures import MultiValueDict
from django.utils.encoding import escape_uri_path
from django.utils.http import urlencode

from .conf import get_policy


def script_prefix(request):
    """Mount point of the project, honouring ``FORCE_SCRIPT_NAME``; no trailing ``/``."""
    prefix = request.path[: len(request.path) - len(request.path_info)]
    return escape_uri_path(prefix.rstrip("/"))


def base_url(request):
    """Absolute root of the site the request arrived on, always ending in ``/``."""
    return f"{request.scheme}://{request.get_host()}{script_prefix(request)}/"


def sorted_query(params):
    """
    Encode query parameters with keys in ascending order.

    Multi-valued keys keep their values in the order they were sent.
    """
    if not params:
        return ""
    pairs = []
    for key in sorted(params):
        if isinstance(params, MultiValueDict):
            values = params.getlist(key)
        else:
            values = [params[key]]
        pairs.extend((key, value) for value in values)
    return urlencode(pairs)


def build_redirect_uri(request, scheme, policy=None):
    """
    Rebuild the current request's URL on ``scheme``.

    The host comes from the policy (configured, or memoized from the
    first request that needed it), so the result may point at a
    different host than the one the request arrived on.
    """
    policy = policy or get_policy()
    host = policy.resolve_host(scheme, base_url(request))

    uri = f"{scheme}://{host}{escape_uri_path(request.path_info).lstrip('/')}"
    query = sorted_query(request.GET)
    if query:
        uri += "?" + query
    return uri
