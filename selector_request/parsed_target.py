"""Data models for representing a parsed selector-request target."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ParsedTarget:
    """Represents the href and embedded selector found in a target string."""

    href: str | None
    selector: str | None  # Raw text between the balanced parens

    def with_href(self, href: str | None) -> "ParsedTarget":
        """Return a copy with the href replaced."""
        return replace(self, href=href)

    def as_dict(self) -> dict[str, str | None]:
        """Return the target as a plain mapping."""
        return {"href": self.href, "selector": self.selector}
