"""Legend placement and styling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plotlars.color import Rgb
from plotlars.enums import Orientation
from plotlars.text import Text


@dataclass(frozen=True)
class Legend:
    """Styling of a plot legend; options left as None keep plotly's defaults."""

    background_color: Rgb | None = None
    border_color: Rgb | None = None
    border_width: int | None = None
    font: str | None = None
    orientation: Orientation | None = None
    x: float | None = None
    y: float | None = None

    def __post_init__(self) -> None:
        if self.border_width is not None and self.border_width < 0:
            raise ValueError(f"border_width must not be negative, got {self.border_width}")

    def to_plotly(self, title: Text | str | None = None) -> dict[str, Any]:
        """Return the plotly legend object, with an optional title."""
        legend: dict[str, Any] = {}
        if title is not None:
            legend["title"] = Text.coerce(title).to_plotly()
        if self.background_color is not None:
            legend["bgcolor"] = self.background_color.to_plotly()
        if self.border_color is not None:
            legend["bordercolor"] = self.border_color.to_plotly()
        if self.border_width is not None:
            legend["borderwidth"] = self.border_width
        if self.font is not None:
            legend["font"] = {"family": self.font}
        if self.orientation is not None:
            legend["orientation"] = self.orientation.to_plotly()
        if self.x is not None:
            legend["x"] = self.x
        if self.y is not None:
            legend["y"] = self.y
        return legend


def build_legend(title: Text | str | None, legend: Legend | None) -> dict[str, Any]:
    """Return the plotly legend object for an optional title and styling."""
    return (legend or Legend()).to_plotly(title)