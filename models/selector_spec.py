"""Declarative selector descriptions as Pydantic v2 models with discriminated union."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

PartKind = Literal[
    "element", "id", "class", "attr", "pseudo_class", "pseudo_element"
]


class SelectorPart(BaseModel):
    """One fragment of a compound selector, e.g. ``{"kind": "id", "value": "main"}``."""

    model_config = ConfigDict(extra="forbid")

    kind: PartKind
    value: str


class CompoundSelectorSpec(BaseModel):
    """Fragments applied in order to an empty selector."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["compound"]
    parts: list[SelectorPart] = Field(min_length=1)


class CombinedSelectorSpec(BaseModel):
    """Two selectors joined by a combinator token (passed through verbatim)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["combination"]
    left: "SelectorSpec"
    combinator: str
    right: "SelectorSpec"


SelectorSpec = Annotated[
    Union[CompoundSelectorSpec, CombinedSelectorSpec],
    Field(discriminator="type"),
]

CombinedSelectorSpec.model_rebuild()


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------


def compound(*parts: tuple[str, str]) -> CompoundSelectorSpec:
    """Create a compound spec from ``(kind, value)`` pairs."""
    return CompoundSelectorSpec(
        type="compound",
        parts=[SelectorPart(kind=kind, value=value) for kind, value in parts],
    )


def combination(
    left: CompoundSelectorSpec | CombinedSelectorSpec,
    combinator: str,
    right: CompoundSelectorSpec | CombinedSelectorSpec,
) -> CombinedSelectorSpec:
    """Create a combination spec."""
    return CombinedSelectorSpec(
        type="combination",
        left=left,
        combinator=combinator,
        right=right,
    )
