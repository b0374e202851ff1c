"""Part kinds and combinators that make up a selector."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """Structural part of a compound selector, declared in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def marker(self) -> str:
        """Literal token identifying this kind inside a rendered selector."""
        return _MARKERS[self]

    @property
    def unique(self) -> bool:
        return self in _UNIQUE_KINDS

    def later_kinds(self) -> tuple[PartKind, ...]:
        """Kinds that must not already be present when appending this one."""
        order = list(PartKind)
        return tuple(order[order.index(self) + 1:])

    def render(self, fragment: str) -> str:
        if self is PartKind.ATTRIBUTE:
            return f"[{fragment}]"
        return f"{self.marker}{fragment}"


_MARKERS: dict[PartKind, str] = {
    PartKind.ELEMENT: "",
    PartKind.ID: "#",
    PartKind.CLASS: ".",
    PartKind.ATTRIBUTE: "[",
    PartKind.PSEUDO_CLASS: ":",
    PartKind.PSEUDO_ELEMENT: "::",
}

_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


class Combinator(Enum):
    """Tokens joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def is_valid(cls, token: str) -> bool:
        return token in {c.value for c in cls}
