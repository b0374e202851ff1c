"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.parts import PartKind


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(
        self,
        message: str,
        *,
        kind: PartKind | None = None,
        selector: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.selector = selector


class DuplicateUniquePartError(SelectorError):
    """An element, id or pseudo-element part was appended a second time."""

    def __init__(self, message: str | None = None, **kwargs) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one time inside the selector",
            **kwargs,
        )


class OutOfOrderError(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, message: str | None = None, **kwargs) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            **kwargs,
        )


class InvalidCombinatorError(SelectorError):
    """Strict combine received a token that is not a CSS combinator."""

    def __init__(self, combinator: str, **kwargs) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}", **kwargs)
        self.combinator = combinator
