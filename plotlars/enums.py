"""Enumerations for plot options, each mapped to its plotly value."""

from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    """Orientation of legends, bars and colour bars."""

    HORIZONTAL = "h"
    VERTICAL = "v"

    def to_plotly(self) -> str:
        """Return the value plotly expects for this orientation."""
        return self.value


class Line(Enum):
    """Dash style of a line."""

    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    LONG_DASH = "longdash"
    DASH_DOT = "dashdot"
    LONG_DASH_DOT = "longdashdot"

    def to_plotly(self) -> str:
        """Return the plotly dash type."""
        return self.value


class ValueExponent(Enum):
    """Format of exponents in axis values."""

    NONE = "none"
    SMALL_E = "e"
    CAPITAL_E = "E"
    POWER = "power"
    SI = "SI"
    B = "B"

    def to_plotly(self) -> str:
        """Return the plotly exponent format."""
        return self.value


class TickDirection(Enum):
    """Direction in which axis ticks are drawn."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    NONE = "none"

    def to_plotly_tickdirection(self) -> str:
        """Return the layout-axis tick direction; NONE falls back to outside."""
        if self is TickDirection.INSIDE:
            return "inside"
        return "outside"

    def to_plotly_ticks(self) -> str:
        """Return the colour-bar tick setting; NONE hides the ticks."""
        if self is TickDirection.NONE:
            return ""
        return self.value


class Coloring(Enum):
    """Colouring strategy applied to contour levels."""

    FILL = "fill"
    HEAT_MAP = "heatmap"
    LINES = "lines"
    NONE = "none"

    def to_plotly(self) -> str:
        """Return the plotly contour colouring."""
        return self.value


class Arrangement(Enum):
    """Node arrangement strategy of Sankey diagrams."""

    SNAP = "snap"
    PERPENDICULAR = "perpendicular"
    FREEFORM = "freeform"
    FIXED = "fixed"

    def to_plotly(self) -> str:
        """Return the plotly Sankey arrangement."""
        return self.value


class Palette(Enum):
    """Named colour scales."""

    GREYS = "Greys"
    YL_GN_BU = "YlGnBu"
    GREENS = "Greens"
    YL_OR_RD = "YlOrRd"
    BLUERED = "Bluered"
    RD_BU = "RdBu"
    REDS = "Reds"
    BLUES = "Blues"
    PICNIC = "Picnic"
    RAINBOW = "Rainbow"
    PORTLAND = "Portland"
    JET = "Jet"
    HOT = "Hot"
    BLACKBODY = "Blackbody"
    EARTH = "Earth"
    ELECTRIC = "Electric"
    VIRIDIS = "Viridis"
    CIVIDIS = "Cividis"

    def to_plotly(self) -> str:
        """Return the plotly colour-scale name."""
        return self.value