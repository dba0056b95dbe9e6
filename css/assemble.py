"""Build a ``Selector`` from a declarative ``SelectorSpec``.

Parts go through the same fluent methods as hand-written chains, so
ordering and duplicate-slot violations raise the usual ``SelectorError``.
"""

from __future__ import annotations

from css.builder import css_selector_builder
from css.selector import Selector
from models.selector_spec import CombinedSelectorSpec, CompoundSelectorSpec

# Part kind -> Selector method name.
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudo_element": "pseudo_element",
}


def assemble(spec: CompoundSelectorSpec | CombinedSelectorSpec) -> Selector:
    """Return the selector described by ``spec``.

    Raises:
        DuplicateSlotError: A one-shot part occurs twice in a compound.
        OrderViolationError: Parts of a compound are out of order.
    """
    if isinstance(spec, CombinedSelectorSpec):
        return css_selector_builder.combine(
            assemble(spec.left), spec.combinator, assemble(spec.right)
        )

    selector = Selector()
    for part in spec.parts:
        selector = getattr(selector, _PART_METHODS[part.kind])(part.value)
    return selector
