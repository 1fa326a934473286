"""Screen rectangles to be read and translated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AreaData:
    """A rectangle on screen together with the text found in it."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    text: str = ""

    def to_dict(self) -> dict[str, int]:
        """Return the stored form; the text is not saved."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AreaData:
        """Build an area from its stored form."""
        try:
            return cls(
                x=int(data["x"]),
                y=int(data["y"]),
                width=int(data["width"]),
                height=int(data["height"]),
                text=str(data.get("text", "")),
            )
        except (KeyError, TypeError) as err:
            raise ValueError(f"invalid area: {err}") from err