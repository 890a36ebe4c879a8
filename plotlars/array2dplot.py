"""Plot of a two-dimensional array of RGB pixels."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from plotlars.axis import Axis
from plotlars.color import Rgb
from plotlars.layout import create_layout
from plotlars.plot import Plot
from plotlars.text import Text


def _pixel(value: Sequence[int]) -> list[int]:
    channels = tuple(value)
    if len(channels) != 3:
        raise ValueError(f"a pixel needs three channels, got {len(channels)}")
    colour = Rgb(*channels)
    return [colour.red, colour.green, colour.blue]


class Array2dPlot(Plot):
    """An image drawn from rows of ``(red, green, blue)`` pixels."""

    def __init__(
        self,
        data: Sequence[Sequence[Sequence[int]]],
        *,
        plot_title: Text | str | None = None,
        x_title: Text | str | None = None,
        y_title: Text | str | None = None,
        x_axis: Axis | None = None,
        y_axis: Axis | None = None,
    ) -> None:
        layout = create_layout(
            plot_title=plot_title,
            x_title=x_title,
            y_title=y_title,
            x_axis=x_axis,
            y_axis=y_axis,
        )
        trace: dict[str, Any] = {
            "type": "image",
            "z": [[_pixel(pixel) for pixel in row] for row in data],
            "colormodel": "rgb",
        }
        super().__init__([trace], layout)