"""CSS selector builder, errors and declarative assembly."""

from css.assemble import assemble
from css.builder import SelectorBuilder, css_selector_builder
from css.errors import DuplicateSlotError, OrderViolationError, SelectorError
from css.selector import Selector, Stage

__all__ = [
    # Builder
    "Selector",
    "SelectorBuilder",
    "Stage",
    "css_selector_builder",
    "assemble",
    # Errors
    "SelectorError",
    "DuplicateSlotError",
    "OrderViolationError",
]
