"""Bar plots, optionally grouped and with error bars."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from plotlars.axis import Axis
from plotlars.color import Rgb
from plotlars.enums import Orientation
from plotlars.frame import filter_by_group, numeric_column, string_column, unique_groups
from plotlars.layout import create_layout
from plotlars.legend import Legend
from plotlars.plot import Plot
from plotlars.styling import create_marker
from plotlars.text import Text


def _errors(data: pd.DataFrame, column: str) -> list[float]:
    values = numeric_column(data, column)
    if any(value is None for value in values):
        raise ValueError(f"error column {column!r} holds missing or non-numeric values")
    return values  # type: ignore[return-value]


def _bar_trace(
    data: pd.DataFrame,
    labels: str,
    values: str,
    orientation: Orientation,
    group: str | None,
    error: str | None,
    marker: dict[str, Any],
) -> dict[str, Any]:
    value_list = numeric_column(data, values)
    label_list = string_column(data, labels)
    vertical = orientation is Orientation.VERTICAL
    trace: dict[str, Any] = {
        "type": "bar",
        "x": label_list if vertical else value_list,
        "y": value_list if vertical else label_list,
        "orientation": orientation.to_plotly(),
    }
    if error is not None:
        error_key = "error_y" if vertical else "error_x"
        trace[error_key] = {"type": "data", "array": _errors(data, error)}
    trace["marker"] = marker
    if group is not None:
        trace["name"] = group
    return trace


class BarPlot(Plot):
    """Bars of ``values`` per ``labels``, one trace per group when grouped."""

    def __init__(
        self,
        data: pd.DataFrame,
        labels: str,
        values: str,
        *,
        orientation: Orientation | None = None,
        group: str | None = None,
        error: str | None = None,
        color: Rgb | None = None,
        colors: Sequence[Rgb] | None = None,
        plot_title: Text | str | None = None,
        x_title: Text | str | None = None,
        y_title: Text | str | None = None,
        legend_title: Text | str | None = None,
        x_axis: Axis | None = None,
        y_axis: Axis | None = None,
        legend: Legend | None = None,
    ) -> None:
        layout = create_layout(
            plot_title=plot_title,
            x_title=x_title,
            y_title=y_title,
            legend_title=legend_title,
            x_axis=x_axis,
            y_axis=y_axis,
            legend=legend,
        )
        layout["barmode"] = "group"

        direction = orientation or Orientation.VERTICAL
        if group is None:
            traces = [
                _bar_trace(
                    data,
                    labels,
                    values,
                    direction,
                    None,
                    error,
                    create_marker(0, color=color, colors=colors),
                )
            ]
        else:
            traces = [
                _bar_trace(
                    filter_by_group(data, group, name),
                    labels,
                    values,
                    direction,
                    name,
                    error,
                    create_marker(index, color=color, colors=colors),
                )
                for index, name in enumerate(unique_groups(data, group))
            ]
        super().__init__(traces, layout)