"""cssbuilder: chainable CSS selector builder with ordering validation."""

from __future__ import annotations

from cssbuilder.builder import Selector
from cssbuilder.combinator import (
    ADJACENT_SIBLING,
    CHILD,
    COMBINATORS,
    DESCENDANT,
    GENERAL_SIBLING,
    CombinedSelector,
    combine,
)
from cssbuilder.config import DEFAULT_RULES, SelectorRules
from cssbuilder.errors import DuplicateSingleton, OrderViolation, SelectorError, UnknownKind
from cssbuilder.facade import (
    attr,
    class_,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.model import Fragment, Kind

__version__ = "0.1.0"

__all__ = [
    # builder
    "Selector",
    "Fragment",
    "Kind",
    # factories
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "css_selector_builder",
    # combinator
    "combine",
    "CombinedSelector",
    "DESCENDANT",
    "CHILD",
    "ADJACENT_SIBLING",
    "GENERAL_SIBLING",
    "COMBINATORS",
    # config
    "SelectorRules",
    "DEFAULT_RULES",
    # errors
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    "UnknownKind",
]
