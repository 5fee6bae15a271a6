"""Logic for splitting a target and resolving its href in one step."""

from selector_request.diagnostics import Diagnostics
from selector_request.parsed_target import ParsedTarget
from selector_request.resolve_href import resolve_href
from selector_request.split_target import split_target


def parse_and_resolve(
    target: str | None, base: str, diagnostics: Diagnostics | None = None
) -> ParsedTarget:
    """Split a target and make its href absolute.

    A selector with no href applies to the base page itself.
    """
    parsed = split_target(target, diagnostics)

    if not parsed.href and parsed.selector:
        return parsed.with_href(base)
    if parsed.href:
        return parsed.with_href(resolve_href(parsed.href, base, diagnostics))
    return parsed
