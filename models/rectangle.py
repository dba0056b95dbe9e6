"""Rectangle record with an area accessor."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    """Axis-aligned rectangle. Integer sides stay integers when dumped."""

    model_config = ConfigDict(extra="forbid")

    width: Union[int, float]
    height: Union[int, float]

    def get_area(self) -> Union[int, float]:
        """Return ``width * height``."""
        return self.width * self.height


def make_rectangle(width: Union[int, float], height: Union[int, float]) -> Rectangle:
    """Create a rectangle from positional ``width`` and ``height``."""
    return Rectangle(width=width, height=height)
