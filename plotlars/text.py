"""Styled text used for titles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from plotlars.color import Rgb


@dataclass(frozen=True)
class Text:
    """Text content together with its font, size, colour and position."""

    content: str = ""
    font: str = ""
    size: int = 0
    color: Rgb = field(default_factory=Rgb)
    x: float = 0.5
    y: float = 0.9

    @classmethod
    def coerce(cls, value: Text | str) -> Text:
        """Return value as a Text, wrapping a plain string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"cannot use {type(value).__name__} as text")

    def to_plotly(self) -> dict[str, Any]:
        """Return the text as a plotly title object."""
        return {
            "text": self.content,
            "font": {
                "family": self.font,
                "size": self.size,
                "color": self.color.to_plotly(),
            },
            "x": self.x,
            "y": self.y,
        }