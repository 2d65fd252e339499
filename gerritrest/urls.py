"""
Endpoint resolution against the configured server base URL.
"""

from urllib.parse import SplitResult, urlsplit

# scheme, netloc, path, query, fragment
ResolvedUrl = SplitResult


def resolve_url(base: str, endpoint: str) -> ResolvedUrl:
    """
    Join ``endpoint`` onto ``base``.

    The endpoint's path is appended to the base path with its leading
    slashes removed. Any other component the endpoint carries (scheme,
    host, query, fragment) replaces the base's; missing ones fall back
    to the base.

    >>> resolve_url("https://review.example.org/r/", "/changes/?q=is:open").geturl()
    'https://review.example.org/r/changes/?q=is:open'
    """
    base_parts = urlsplit(base)
    endpoint_parts = urlsplit(endpoint)

    path = base_parts.path
    if endpoint_parts.path:
        path += endpoint_parts.path.lstrip("/")

    return SplitResult(
        scheme=endpoint_parts.scheme or base_parts.scheme,
        netloc=endpoint_parts.netloc or base_parts.netloc,
        path=path,
        query=endpoint_parts.query or base_parts.query,
        fragment=endpoint_parts.fragment or base_parts.fragment,
    )
