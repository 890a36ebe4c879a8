"""Axis placement, scaling, ticks, lines and grid styling."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from plotlars.color import Rgb
from plotlars.enums import TickDirection, ValueExponent
from plotlars.text import Text


class AxisSide(Enum):
    """Side of the plot on which an axis is drawn."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    def to_plotly(self) -> str:
        """Return the plotly side name."""
        return self.value


class AxisType(Enum):
    """Scale type of an axis."""

    DEFAULT = "-"
    LINEAR = "linear"
    LOG = "log"
    DATE = "date"
    CATEGORY = "category"
    MULTI_CATEGORY = "multicategory"

    def to_plotly(self) -> str:
        """Return the plotly axis type."""
        return self.value


_NON_NEGATIVE = ("tick_length", "tick_width", "line_width", "grid_width", "zero_line_width")


@dataclass(frozen=True)
class Axis:
    """Styling of a plot axis; options left as None keep plotly's defaults."""

    show_axis: bool | None = None
    axis_side: AxisSide | None = None
    axis_position: float | None = None
    axis_type: AxisType | None = None
    value_color: Rgb | None = None
    value_range: tuple[float, ...] | None = None
    value_thousands: bool | None = None
    value_exponent: ValueExponent | None = None
    tick_values: tuple[float, ...] | None = None
    tick_labels: tuple[str, ...] | None = None
    tick_direction: TickDirection | None = None
    tick_length: int | None = None
    tick_width: int | None = None
    tick_color: Rgb | None = None
    tick_angle: float | None = None
    tick_font: str | None = None
    show_line: bool | None = None
    line_color: Rgb | None = None
    line_width: int | None = None
    show_grid: bool | None = None
    grid_color: Rgb | None = None
    grid_width: int | None = None
    show_zero_line: bool | None = None
    zero_line_color: Rgb | None = None
    zero_line_width: int | None = None

    def __post_init__(self) -> None:
        for name in ("value_range", "tick_values"):
            values = getattr(self, name)
            if values is not None:
                object.__setattr__(self, name, tuple(float(v) for v in values))
        if self.tick_labels is not None:
            labels: Iterable[Any] = self.tick_labels
            if isinstance(labels, str):
                raise TypeError("tick_labels must be a sequence of strings, not a string")
            object.__setattr__(self, "tick_labels", tuple(str(label) for label in labels))
        for name in _NON_NEGATIVE:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def to_plotly(
        self, title: Text | str | None = None, overlaying: str | None = None
    ) -> dict[str, Any]:
        """Return the plotly axis object, with an optional title and overlaid axis."""
        axis: dict[str, Any] = {}
        if title is not None:
            axis["title"] = Text.coerce(title).to_plotly()
        if overlaying is not None:
            axis["overlaying"] = overlaying

        options: list[tuple[str, Any]] = [
            ("visible", self.show_axis),
            ("side", self.axis_side and self.axis_side.to_plotly()),
            ("type", self.axis_type and self.axis_type.to_plotly()),
            ("color", self.value_color and self.value_color.to_plotly()),
            ("range", self.value_range and list(self.value_range)),
            ("separatethousands", self.value_thousands),
            ("exponentformat", self.value_exponent and self.value_exponent.to_plotly()),
            ("tickvals", None if self.tick_values is None else list(self.tick_values)),
            ("ticktext", None if self.tick_labels is None else list(self.tick_labels)),
            ("ticks", self.tick_direction and self.tick_direction.to_plotly_tickdirection()),
            ("ticklen", self.tick_length),
            ("tickwidth", self.tick_width),
            ("tickcolor", self.tick_color and self.tick_color.to_plotly()),
            ("tickangle", self.tick_angle),
            ("tickfont", None if self.tick_font is None else {"family": self.tick_font}),
            ("showline", self.show_line),
            ("linecolor", self.line_color and self.line_color.to_plotly()),
            ("linewidth", self.line_width),
            ("showgrid", self.show_grid),
            ("gridcolor", self.grid_color and self.grid_color.to_plotly()),
            ("gridwidth", self.grid_width),
            ("zeroline", self.show_zero_line),
            ("zerolinecolor", self.zero_line_color and self.zero_line_color.to_plotly()),
            ("zerolinewidth", self.zero_line_width),
            ("position", self.axis_position),
        ]
        axis.update((key, value) for key, value in options if value is not None)
        return axis