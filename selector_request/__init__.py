"""Parse targets that embed a CSS selector using the ``#(selector=...)`` syntax.

Examples:
- ``/path`` -> href ``/path``, no selector
- ``#(selector=p)`` -> no href, selector ``p``
- ``http://example.com/path#(selector=p)`` -> href ``http://example.com/path``,
  selector ``p``
- ``#(selector=tr:nth-child(15))`` -> no href, selector ``tr:nth-child(15)``
"""

from selector_request.diagnostics import (
    Diagnostics,
    LoggingDiagnostics,
    RecordingDiagnostics,
)
from selector_request.parse_and_resolve import parse_and_resolve
from selector_request.parsed_target import ParsedTarget
from selector_request.resolve_href import resolve_href
from selector_request.selector_request_parser import SelectorRequestParser
from selector_request.split_target import SELECTOR_MARKER, split_target

__all__ = [
    "SELECTOR_MARKER",
    "Diagnostics",
    "LoggingDiagnostics",
    "ParsedTarget",
    "RecordingDiagnostics",
    "SelectorRequestParser",
    "parse_and_resolve",
    "resolve_href",
    "split_target",
]
