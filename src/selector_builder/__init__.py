"""selector_builder: immutable, chainable CSS selector construction."""

from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import SelectorBuilder, combine, css_selector_builder
from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateUniquePartError,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorError,
)
from selector_builder.parts import Combinator, PartKind

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    # parts
    "PartKind",
    "Combinator",
    # config
    "BuilderConfig",
    # errors
    "SelectorError",
    "DuplicateUniquePartError",
    "OutOfOrderError",
    "InvalidCombinatorError",
]
