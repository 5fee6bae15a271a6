"""Tests for combined splitting and resolution."""

from unittest.mock import MagicMock

from selector_request.parse_and_resolve import parse_and_resolve
from selector_request.parsed_target import ParsedTarget

BASE = "http://y.com/page"


def test_selector_only_defaults_to_base() -> None:
    """Verify that a selector without an href applies to the base page."""
    assert parse_and_resolve("#(selector=p)", BASE) == ParsedTarget(
        href=BASE, selector="p"
    )


def test_relative_href_is_resolved() -> None:
    """Verify that a relative href is made absolute and the selector kept."""
    parsed = parse_and_resolve("/docs/x#(selector=tr:nth-child(15))", BASE)
    assert parsed == ParsedTarget(
        href="http://y.com/docs/x", selector="tr:nth-child(15)"
    )


def test_absolute_href_is_kept() -> None:
    """Verify that an absolute href survives unchanged."""
    parsed = parse_and_resolve("https://x.com/a#(selector=li)", BASE)
    assert parsed == ParsedTarget(href="https://x.com/a", selector="li")


def test_plain_relative_href() -> None:
    """Verify that a target without a selector is resolved as a plain link."""
    assert parse_and_resolve("other", BASE) == ParsedTarget(
        href="http://y.com/other", selector=None
    )


def test_empty_target() -> None:
    """Verify that an empty target stays empty."""
    assert parse_and_resolve(None, BASE) == ParsedTarget(href=None, selector=None)
    assert parse_and_resolve("", BASE) == ParsedTarget(href=None, selector=None)


def test_empty_selector_does_not_default_to_base() -> None:
    """Verify that an empty selector with no href leaves href unset."""
    assert parse_and_resolve("#(selector=)", BASE) == ParsedTarget(
        href=None, selector=""
    )


def test_malformed_target_resolves_as_fragment() -> None:
    """Verify that a malformed selector is resolved as part of the href."""
    diagnostics = MagicMock()

    parsed = parse_and_resolve("#(selector=p", BASE, diagnostics)

    assert parsed == ParsedTarget(href=BASE + "#(selector=p", selector=None)
    diagnostics.warn.assert_called_once()
    diagnostics.error.assert_not_called()


def test_resolution_failure_keeps_href() -> None:
    """Verify that a failed resolution keeps the unresolved href."""
    diagnostics = MagicMock()

    parsed = parse_and_resolve("/a#(selector=p)", "nowhere", diagnostics)

    assert parsed == ParsedTarget(href="/a", selector="p")
    diagnostics.error.assert_called_once()
