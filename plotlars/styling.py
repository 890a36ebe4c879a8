"""Line and marker styles chosen per trace."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from plotlars.color import Rgb
from plotlars.enums import Line
from plotlars.shape import Shape

_T = TypeVar("_T")


def _pick(single: _T | None, many: Sequence[_T] | None, index: int) -> _T | None:
    """Return the single value if given, else the index-th of many, else None."""
    if single is not None:
        return single
    if many is not None and 0 <= index < len(many):
        return many[index]
    return None


def create_line(
    index: int,
    width: float | None = None,
    style: Line | None = None,
    styles: Sequence[Line] | None = None,
) -> dict[str, Any]:
    """Return the plotly line object for the trace at ``index``.

    A single ``style`` wins over the per-trace ``styles``; an index past the
    end of ``styles`` leaves the dash unset.
    """
    line: dict[str, Any] = {}
    if width is not None:
        line["width"] = width
    dash = _pick(style, styles, index)
    if dash is not None:
        line["dash"] = dash.to_plotly()
    return line


def create_marker(
    index: int,
    opacity: float | None = None,
    size: int | None = None,
    color: Rgb | None = None,
    colors: Sequence[Rgb] | None = None,
    shape: Shape | None = None,
    shapes: Sequence[Shape] | None = None,
) -> dict[str, Any]:
    """Return the plotly marker object for the trace at ``index``.

    A single ``color`` or ``shape`` wins over the per-trace lists; an index
    past the end of a list leaves that option unset.
    """
    marker: dict[str, Any] = {}
    if opacity is not None:
        marker["opacity"] = opacity
    if size is not None:
        marker["size"] = size
    chosen_color = _pick(color, colors, index)
    if chosen_color is not None:
        marker["color"] = chosen_color.to_plotly()
    chosen_shape = _pick(shape, shapes, index)
    if chosen_shape is not None:
        marker["symbol"] = chosen_shape.to_plotly()
    return marker