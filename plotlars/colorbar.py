"""Colour bar placement, ticks and styling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plotlars.color import Rgb
from plotlars.enums import Orientation, TickDirection, ValueExponent
from plotlars.text import Text

_NON_NEGATIVE = (
    "border_width",
    "length",
    "n_ticks",
    "outline_width",
    "width",
    "tick_length",
    "tick_width",
)


@dataclass(frozen=True)
class ColorBar:
    """Styling of a colour bar; options left as None keep plotly's defaults.

    ``length`` and ``width`` are measured in pixels.
    """

    background_color: Rgb | None = None
    border_color: Rgb | None = None
    border_width: int | None = None
    tick_step: float | None = None
    value_exponent: ValueExponent | None = None
    length: int | None = None
    n_ticks: int | None = None
    orientation: Orientation | None = None
    outline_color: Rgb | None = None
    outline_width: int | None = None
    separate_thousands: bool | None = None
    width: int | None = None
    tick_angle: float | None = None
    tick_color: Rgb | None = None
    tick_font: str | None = None
    tick_length: int | None = None
    tick_labels: tuple[str, ...] | None = None
    tick_values: tuple[float, ...] | None = None
    tick_width: int | None = None
    tick_direction: TickDirection | None = None
    title: Text | str | None = None
    x: float | None = None
    y: float | None = None

    def __post_init__(self) -> None:
        if self.title is not None:
            object.__setattr__(self, "title", Text.coerce(self.title))
        if self.tick_labels is not None:
            if isinstance(self.tick_labels, str):
                raise TypeError("tick_labels must be a sequence of strings, not a string")
            object.__setattr__(
                self, "tick_labels", tuple(str(label) for label in self.tick_labels)
            )
        if self.tick_values is not None:
            object.__setattr__(
                self, "tick_values", tuple(float(value) for value in self.tick_values)
            )
        for name in _NON_NEGATIVE:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def to_plotly(self) -> dict[str, Any]:
        """Return the plotly colour bar object."""
        bar: dict[str, Any] = {}

        def put(key: str, value: Any) -> None:
            if value is not None:
                bar[key] = value

        put("bgcolor", self.background_color and self.background_color.to_plotly())
        put("bordercolor", self.border_color and self.border_color.to_plotly())
        put("borderwidth", self.border_width)
        put("dtick", self.tick_step)
        put("exponentformat", self.value_exponent and self.value_exponent.to_plotly())
        if self.length is not None:
            bar["lenmode"] = "pixels"
            bar["len"] = self.length
        put("nticks", self.n_ticks)
        put("orientation", self.orientation and self.orientation.to_plotly())
        put("outlinecolor", self.outline_color and self.outline_color.to_plotly())
        put("outlinewidth", self.outline_width)
        put("separatethousands", self.separate_thousands)
        if self.width is not None:
            bar["thicknessmode"] = "pixels"
            bar["thickness"] = self.width
        put("tickangle", self.tick_angle)
        put("tickcolor", self.tick_color and self.tick_color.to_plotly())
        put("tickfont", None if self.tick_font is None else {"family": self.tick_font})
        put("ticklen", self.tick_length)
        put("ticktext", None if self.tick_labels is None else list(self.tick_labels))
        put("tickvals", None if self.tick_values is None else list(self.tick_values))
        put("tickwidth", self.tick_width)
        put("ticks", self.tick_direction and self.tick_direction.to_plotly_ticks())
        if self.title is not None:
            bar["title"] = Text.coerce(self.title).to_plotly()
        put("x", self.x)
        put("y", self.y)
        return bar