"""Validation errors raised while building a selector."""


class SelectorError(ValueError):
    """Base class for selector building failures."""


class DuplicateSlotError(SelectorError):
    """A one-shot fragment (element, id, pseudo-element) was set twice."""

    def __init__(self) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector."
        )


class OrderViolationError(SelectorError):
    """A fragment was appended after a later-stage fragment."""

    def __init__(self) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element."
        )
