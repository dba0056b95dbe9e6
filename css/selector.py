"""Immutable compound selector value with fluent append operations.

Fragments must follow the CSS order::

    element#id.class[attr]:pseudoClass::pseudoElement

Every append returns a new ``Selector``; the receiver is left untouched, so
two chains branched from the same value never see each other's fragments.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from css.errors import DuplicateSlotError, OrderViolationError


class Stage(IntEnum):
    """Ordinal of the last ordering-relevant fragment appended."""

    NONE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class Selector(BaseModel):
    """A (possibly partial) selector and the slots it has filled so far."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = ""
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False
    stage: Stage = Stage.NONE

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------

    def element(self, value: str) -> Selector:
        if self.has_element:
            raise DuplicateSlotError()
        if self.stage != Stage.NONE:
            raise OrderViolationError()
        return self._append(value, has_element=True)

    def id(self, value: str) -> Selector:
        if self.has_id:
            raise DuplicateSlotError()
        self._require_stage(Stage.ID)
        return self._append(f"#{value}", has_id=True, stage=Stage.ID)

    def class_(self, value: str) -> Selector:
        self._require_stage(Stage.CLASS)
        return self._append(f".{value}", stage=Stage.CLASS)

    def attr(self, value: str) -> Selector:
        self._require_stage(Stage.ATTRIBUTE)
        return self._append(f"[{value}]", stage=Stage.ATTRIBUTE)

    def pseudo_class(self, value: str) -> Selector:
        self._require_stage(Stage.PSEUDO_CLASS)
        return self._append(f":{value}", stage=Stage.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> Selector:
        # Only the slot is checked; no fragment kind ranks after it.
        if self.has_pseudo_element:
            raise DuplicateSlotError()
        return self._append(
            f"::{value}", has_pseudo_element=True, stage=Stage.PSEUDO_ELEMENT
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def stringify(self) -> str:
        """Return the accumulated selector text."""
        return self.text

    def __str__(self) -> str:
        return self.stringify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_stage(self, ceiling: Stage) -> None:
        """Reject the append when a later-stage fragment is already present.

        Equal stages pass, which is what allows ``.a.b`` and ``[x][y]``.
        """
        if self.stage > ceiling:
            raise OrderViolationError()

    def _append(self, fragment: str, **update) -> Selector:
        return self.model_copy(update={"text": self.text + fragment, **update})
