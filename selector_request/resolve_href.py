"""Logic for resolving relative hrefs against a base URL."""

import re
from urllib.parse import urljoin, urlsplit

from selector_request.diagnostics import Diagnostics, default_diagnostics

ABSOLUTE_HTTP_RE = re.compile(r"^https?://")
RESOLVE_FAILED_MESSAGE = "Selector-Request: Failed to resolve URL"


def join_url(href: str, base: str) -> str:
    """Merge href onto base, raising ValueError when either cannot be used."""
    if not urlsplit(base).scheme:
        raise ValueError(f"Base URL is not absolute: {base!r}")
    # Unbalanced IPv6 brackets in either URL raise here
    urlsplit(href)
    # RFC 3986 merge: no path is added to an empty base path, host case and
    # backslashes are kept, and non-hierarchical bases return href as is
    return urljoin(base, href)


def resolve_href(
    href: str | None, base: str, diagnostics: Diagnostics | None = None
) -> str | None:
    """Resolve href against base, returning it unchanged if that fails."""
    if not href:
        return None

    if ABSOLUTE_HTTP_RE.match(href):
        return href

    try:
        return join_url(href, base)
    except (TypeError, ValueError) as e:
        default_diagnostics(diagnostics).error(
            RESOLVE_FAILED_MESSAGE, {"href": href, "base": base, "error": e}
        )
        return href
