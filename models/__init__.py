"""Public re-exports of all model types."""

from models.rectangle import Rectangle, make_rectangle
from models.render import RenderRequest, RenderResponse
from models.selector_spec import (
    CombinedSelectorSpec,
    CompoundSelectorSpec,
    SelectorPart,
    SelectorSpec,
    combination,
    compound,
)

__all__ = [
    # Selector descriptions
    "SelectorPart",
    "CompoundSelectorSpec",
    "CombinedSelectorSpec",
    "SelectorSpec",
    # Selector description factories
    "compound",
    "combination",
    # Rectangle
    "Rectangle",
    "make_rectangle",
    # Request/Response
    "RenderRequest",
    "RenderResponse",
]
