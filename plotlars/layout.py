"""Assembly of the plotly layout shared by all plots."""

from __future__ import annotations

from typing import Any

from plotlars.axis import Axis
from plotlars.legend import Legend, build_legend
from plotlars.text import Text


def create_layout(
    plot_title: Text | str | None = None,
    x_title: Text | str | None = None,
    y_title: Text | str | None = None,
    y2_title: Text | str | None = None,
    z_title: Text | str | None = None,
    legend_title: Text | str | None = None,
    x_axis: Axis | None = None,
    y_axis: Axis | None = None,
    y2_axis: Axis | None = None,
    z_axis: Axis | None = None,
    legend: Legend | None = None,
) -> dict[str, Any]:
    """Return the plotly layout object.

    An axis title only appears when its axis is given; the secondary y axis
    overlays the primary one. The legend entry is always present.
    """
    layout: dict[str, Any] = {}
    if plot_title is not None:
        layout["title"] = Text.coerce(plot_title).to_plotly()
    if x_axis is not None:
        layout["xaxis"] = x_axis.to_plotly(x_title)
    if y_axis is not None:
        layout["yaxis"] = y_axis.to_plotly(y_title)
    if y2_axis is not None:
        layout["yaxis2"] = y2_axis.to_plotly(y2_title, "y")
    if z_axis is not None:
        layout["zaxis"] = z_axis.to_plotly(z_title)
    layout["legend"] = build_legend(legend_title, legend)
    return layout