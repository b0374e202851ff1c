"""Immutable, chainable CSS selector builder.

Usage:
    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        -> 'a[href$=".png"]:focus'

    combine(
        css_selector_builder.element("div").id("main"),
        "+",
        css_selector_builder.element("table").id("data"),
    ).stringify()
        -> 'div#main + table#data'

Every appending call returns a new builder; existing instances are never
modified, so a failed call leaves all references valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateUniquePartError,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorError,
)
from selector_builder.parts import Combinator, PartKind

__all__ = ["SelectorBuilder", "css_selector_builder", "combine"]

logger = logging.getLogger("selector_builder")


@dataclass(frozen=True)
class SelectorBuilder:
    """Accumulated selector string plus the element-part count of its lineage.

    Ordering and uniqueness are checked by scanning ``value`` for part
    markers, so a fragment that itself contains a marker character (``.``
    inside an element name, for instance) takes part in the scan.
    """

    value: str = ""
    element_count: int = 0
    config: BuilderConfig = field(default_factory=BuilderConfig, compare=False, repr=False)

    # --- validation -----------------------------------------------------------

    def _check(self, kind: PartKind) -> None:
        if kind is PartKind.ELEMENT and self.element_count > 0:
            self._reject(DuplicateUniquePartError, kind)
        if kind.unique and kind is not PartKind.ELEMENT and kind.marker in self.value:
            self._reject(DuplicateUniquePartError, kind)

        for later in kind.later_kinds():
            if later.marker in self.value:
                self._reject(OutOfOrderError, kind)

    def _reject(self, error_cls: type[SelectorError], kind: PartKind) -> None:
        logger.debug(
            "Rejected %s part: selector=%r error=%s", kind.value, self.value, error_cls.__name__
        )
        raise error_cls(kind=kind, selector=self.value)

    def _append(self, kind: PartKind, fragment: str) -> SelectorBuilder:
        self._check(kind)
        count = self.element_count + 1 if kind is PartKind.ELEMENT else self.element_count
        result = replace(self, value=self.value + kind.render(fragment), element_count=count)
        logger.debug("Appended %s part: selector=%r", kind.value, result.value)
        return result

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class part."""
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute part; *value* is wrapped in square brackets."""
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    # --- combination and rendering ----------------------------------------------

    def combine(
        self,
        selector_a: SelectorBuilder,
        combinator: Combinator | str,
        selector_b: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* into a new, opaque builder.

        The token is reproduced verbatim with one space on each side. Unless
        ``config.strict_combinators`` is set, any string is accepted.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        if self.config.strict_combinators and not Combinator.is_valid(token):
            logger.debug("Rejected combinator %r", token)
            raise InvalidCombinatorError(token, selector=self.value)

        value = f"{selector_a.stringify()} {token} {selector_b.stringify()}"
        logger.debug("Combined selectors: selector=%r", value)
        return SelectorBuilder(value=value, element_count=0, config=self.config)

    def stringify(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.stringify()


css_selector_builder = SelectorBuilder()


def combine(
    selector_a: SelectorBuilder,
    combinator: Combinator | str,
    selector_b: SelectorBuilder,
    *,
    config: BuilderConfig | None = None,
) -> SelectorBuilder:
    """Module-level shortcut for ``css_selector_builder.combine(...)``."""
    root = css_selector_builder if config is None else SelectorBuilder(config=config)
    return root.combine(selector_a, combinator, selector_b)
