"""Parser facade that supplies a default base URL to the core functions."""

from collections.abc import Mapping
from typing import Any

from selector_request.diagnostics import Diagnostics, default_diagnostics
from selector_request.parse_and_resolve import parse_and_resolve
from selector_request.parsed_target import ParsedTarget
from selector_request.resolve_href import resolve_href
from selector_request.split_target import split_target


class SelectorRequestParser:
    """Splits and resolves selector-request targets against a default base."""

    def __init__(
        self, base_url: str | None = None, diagnostics: Diagnostics | None = None
    ) -> None:
        """Initialize with the page URL relative targets are resolved against."""
        self.base_url = base_url
        self.diagnostics = default_diagnostics(diagnostics)

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], diagnostics: Diagnostics | None = None
    ) -> "SelectorRequestParser":
        """Build a parser from a loaded configuration mapping."""
        return cls(base_url=config.get("base_url"), diagnostics=diagnostics)

    def split(self, target: str | None) -> ParsedTarget:
        """Split a target into href and selector without resolving."""
        return split_target(target, self.diagnostics)

    def resolve(self, href: str | None, base: str | None = None) -> str | None:
        """Resolve href against base, or the default base URL."""
        return resolve_href(href, self._base(base), self.diagnostics)

    def parse_and_resolve(
        self, target: str | None, base: str | None = None
    ) -> ParsedTarget:
        """Split a target and resolve its href against base or the default."""
        return parse_and_resolve(target, self._base(base), self.diagnostics)

    def _base(self, base: str | None) -> str:
        base = base or self.base_url
        if not base:
            raise ValueError("No base URL given and none configured")
        return base
