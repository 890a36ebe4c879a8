"""Base class of all plots: serialisation and HTML output."""

from __future__ import annotations

import copy
import html
import json
import os
import uuid
from typing import Any


class Plot:
    """A set of plotly traces together with a plotly layout."""

    #: Location of the plotly.js script referenced by standalone HTML pages.
    plotly_js: str = "plotly.min.js"

    def __init__(self, traces: list[dict[str, Any]], layout: dict[str, Any]) -> None:
        self.traces = list(traces)
        self.layout = dict(layout)

    def to_dict(self) -> dict[str, Any]:
        """Return the traces and the layout as plain data."""
        return {"traces": copy.deepcopy(self.traces), "layout": copy.deepcopy(self.layout)}

    def to_json(self) -> str:
        """Return the traces and the layout as a JSON document."""
        return json.dumps(self.to_dict())

    def _script_json(self, value: Any) -> str:
        return json.dumps(value).replace("</", "<\\/")

    def to_inline_html(self, plot_div_id: str | None = None) -> str:
        """Return a div and the script that draws the plot into it.

        The page must load plotly.js itself. Without an id a random one is used.
        """
        div_id = plot_div_id or uuid.uuid4().hex
        return (
            f'<div id="{html.escape(div_id)}" class="plotly-graph-div" '
            'style="height:100%; width:100%;"></div>\n'
            '<script type="text/javascript">\n'
            f"  Plotly.newPlot({self._script_json(div_id)}, "
            f"{self._script_json(self.traces)}, "
            f"{self._script_json(self.layout)}, {{}});\n"
            "</script>"
        )

    def to_html(self) -> str:
        """Return a standalone HTML page showing the plot."""
        return (
            "<!doctype html>\n"
            "<html>\n"
            "<head>\n"
            '  <meta charset="utf-8" />\n'
            f'  <script src="{html.escape(self.plotly_js)}"></script>\n'
            "</head>\n"
            "<body>\n"
            f"{self.to_inline_html('plotly-html-element')}\n"
            "</body>\n"
            "</html>\n"
        )

    def write_html(self, path: str | os.PathLike[str]) -> None:
        """Write the standalone HTML page to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_html())