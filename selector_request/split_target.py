"""Logic for splitting a target into its href and embedded selector."""

from selector_request.diagnostics import Diagnostics, default_diagnostics
from selector_request.parsed_target import ParsedTarget

SELECTOR_MARKER = "#(selector="
MALFORMED_MESSAGE = "Selector-Request: Malformed selector syntax, unmatched parentheses"


def find_closing_paren(text: str, start: int) -> int:
    """Return the index of the paren closing an already opened one, or -1.

    Scanning begins at ``start`` with a depth of 1 so nested pairs inside the
    selector, e.g. ``tr:nth-child(15)``, are skipped over.
    """
    depth = 1
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def split_target(
    target: str | None, diagnostics: Diagnostics | None = None
) -> ParsedTarget:
    """Split a target like ``/path#(selector=p)`` into href and selector.

    Only the first marker is honoured. An unmatched opening paren makes the
    whole target the href.
    """
    if not target:
        return ParsedTarget(href=None, selector=None)

    marker_at = target.find(SELECTOR_MARKER)
    if marker_at == -1:
        return ParsedTarget(href=target, selector=None)

    selector_start = marker_at + len(SELECTOR_MARKER)
    close_at = find_closing_paren(target, selector_start)
    if close_at == -1:
        default_diagnostics(diagnostics).warn(MALFORMED_MESSAGE, {"target": target})
        return ParsedTarget(href=target, selector=None)

    return ParsedTarget(
        href=target[:marker_at] or None,
        selector=target[selector_start:close_at],
    )
