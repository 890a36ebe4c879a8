"""Marker shapes, each mapped to its plotly symbol name."""

from __future__ import annotations

from enum import Enum


class Shape(Enum):
    """Shape of the markers drawn for data points."""

    CIRCLE = "circle"
    CIRCLE_OPEN = "circle-open"
    CIRCLE_DOT = "circle-dot"
    CIRCLE_OPEN_DOT = "circle-open-dot"
    SQUARE = "square"
    SQUARE_OPEN = "square-open"
    SQUARE_DOT = "square-dot"
    SQUARE_OPEN_DOT = "square-open-dot"
    DIAMOND = "diamond"
    DIAMOND_OPEN = "diamond-open"
    DIAMOND_DOT = "diamond-dot"
    DIAMOND_OPEN_DOT = "diamond-open-dot"
    CROSS = "cross"
    CROSS_OPEN = "cross-open"
    CROSS_DOT = "cross-dot"
    CROSS_OPEN_DOT = "cross-open-dot"
    X = "x"
    X_OPEN = "x-open"
    X_DOT = "x-dot"
    X_OPEN_DOT = "x-open-dot"
    TRIANGLE_UP = "triangle-up"
    TRIANGLE_UP_OPEN = "triangle-up-open"
    TRIANGLE_UP_DOT = "triangle-up-dot"
    TRIANGLE_UP_OPEN_DOT = "triangle-up-open-dot"
    TRIANGLE_DOWN = "triangle-down"
    TRIANGLE_DOWN_OPEN = "triangle-down-open"
    TRIANGLE_DOWN_DOT = "triangle-down-dot"
    TRIANGLE_DOWN_OPEN_DOT = "triangle-down-open-dot"
    TRIANGLE_LEFT = "triangle-left"
    TRIANGLE_LEFT_OPEN = "triangle-left-open"
    TRIANGLE_LEFT_DOT = "triangle-left-dot"
    TRIANGLE_LEFT_OPEN_DOT = "triangle-left-open-dot"
    TRIANGLE_RIGHT = "triangle-right"
    TRIANGLE_RIGHT_OPEN = "triangle-right-open"
    TRIANGLE_RIGHT_DOT = "triangle-right-dot"
    TRIANGLE_RIGHT_OPEN_DOT = "triangle-right-open-dot"
    TRIANGLE_NE = "triangle-ne"
    TRIANGLE_NE_OPEN = "triangle-ne-open"
    TRIANGLE_NE_DOT = "triangle-ne-dot"
    TRIANGLE_NE_OPEN_DOT = "triangle-ne-open-dot"
    TRIANGLE_SE = "triangle-se"
    TRIANGLE_SE_OPEN = "triangle-se-open"
    TRIANGLE_SE_DOT = "triangle-se-dot"
    TRIANGLE_SE_OPEN_DOT = "triangle-se-open-dot"
    TRIANGLE_SW = "triangle-sw"
    TRIANGLE_SW_OPEN = "triangle-sw-open"
    TRIANGLE_SW_DOT = "triangle-sw-dot"
    TRIANGLE_SW_OPEN_DOT = "triangle-sw-open-dot"
    TRIANGLE_NW = "triangle-nw"
    TRIANGLE_NW_OPEN = "triangle-nw-open"
    TRIANGLE_NW_DOT = "triangle-nw-dot"
    TRIANGLE_NW_OPEN_DOT = "triangle-nw-open-dot"
    PENTAGON = "pentagon"
    PENTAGON_OPEN = "pentagon-open"
    PENTAGON_DOT = "pentagon-dot"
    PENTAGON_OPEN_DOT = "pentagon-open-dot"
    HEXAGON = "hexagon"
    HEXAGON_OPEN = "hexagon-open"
    HEXAGON_DOT = "hexagon-dot"
    HEXAGON_OPEN_DOT = "hexagon-open-dot"
    HEXAGON2 = "hexagon2"
    HEXAGON2_OPEN = "hexagon2-open"
    HEXAGON2_DOT = "hexagon2-dot"
    HEXAGON2_OPEN_DOT = "hexagon2-open-dot"
    OCTAGON = "octagon"
    OCTAGON_OPEN = "octagon-open"
    OCTAGON_DOT = "octagon-dot"
    OCTAGON_OPEN_DOT = "octagon-open-dot"
    STAR = "star"
    STAR_OPEN = "star-open"
    STAR_DOT = "star-dot"
    STAR_OPEN_DOT = "star-open-dot"
    HEXAGRAM = "hexagram"
    HEXAGRAM_OPEN = "hexagram-open"
    HEXAGRAM_DOT = "hexagram-dot"
    HEXAGRAM_OPEN_DOT = "hexagram-open-dot"
    STAR_TRIANGLE_UP = "star-triangle-up"
    STAR_TRIANGLE_UP_OPEN = "star-triangle-up-open"
    STAR_TRIANGLE_UP_DOT = "star-triangle-up-dot"
    STAR_TRIANGLE_UP_OPEN_DOT = "star-triangle-up-open-dot"
    STAR_TRIANGLE_DOWN = "star-triangle-down"
    STAR_TRIANGLE_DOWN_OPEN = "star-triangle-down-open"
    STAR_TRIANGLE_DOWN_DOT = "star-triangle-down-dot"
    STAR_TRIANGLE_DOWN_OPEN_DOT = "star-triangle-down-open-dot"
    STAR_SQUARE = "star-square"
    STAR_SQUARE_OPEN = "star-square-open"
    STAR_SQUARE_DOT = "star-square-dot"
    STAR_SQUARE_OPEN_DOT = "star-square-open-dot"
    STAR_DIAMOND = "star-diamond"
    STAR_DIAMOND_OPEN = "star-diamond-open"
    STAR_DIAMOND_DOT = "star-diamond-dot"
    STAR_DIAMOND_OPEN_DOT = "star-diamond-open-dot"
    DIAMOND_TALL = "diamond-tall"
    DIAMOND_TALL_OPEN = "diamond-tall-open"
    DIAMOND_TALL_DOT = "diamond-tall-dot"
    DIAMOND_TALL_OPEN_DOT = "diamond-tall-open-dot"
    DIAMOND_WIDE = "diamond-wide"
    DIAMOND_WIDE_OPEN = "diamond-wide-open"
    DIAMOND_WIDE_DOT = "diamond-wide-dot"
    DIAMOND_WIDE_OPEN_DOT = "diamond-wide-open-dot"
    HOURGLASS = "hourglass"
    HOURGLASS_OPEN = "hourglass-open"
    BOW_TIE = "bowtie"
    BOW_TIE_OPEN = "bowtie-open"
    CIRCLE_CROSS = "circle-cross"
    CIRCLE_CROSS_OPEN = "circle-cross-open"
    CIRCLE_X = "circle-x"
    CIRCLE_X_OPEN = "circle-x-open"
    SQUARE_CROSS = "square-cross"
    SQUARE_CROSS_OPEN = "square-cross-open"
    SQUARE_X = "square-x"
    SQUARE_X_OPEN = "square-x-open"
    DIAMOND_CROSS = "diamond-cross"
    DIAMOND_CROSS_OPEN = "diamond-cross-open"
    DIAMOND_X = "diamond-x"
    DIAMOND_X_OPEN = "diamond-x-open"
    CROSS_THIN = "cross-thin"
    CROSS_THIN_OPEN = "cross-thin-open"
    X_THIN = "x-thin"
    X_THIN_OPEN = "x-thin-open"
    ASTERISK = "asterisk"
    ASTERISK_OPEN = "asterisk-open"
    HASH = "hash"
    HASH_OPEN = "hash-open"
    HASH_DOT = "hash-dot"
    HASH_OPEN_DOT = "hash-open-dot"
    Y_UP = "y-up"
    Y_UP_OPEN = "y-up-open"
    Y_DOWN = "y-down"
    Y_DOWN_OPEN = "y-down-open"
    Y_LEFT = "y-left"
    Y_LEFT_OPEN = "y-left-open"
    Y_RIGHT = "y-right"
    Y_RIGHT_OPEN = "y-right-open"
    LINE_EW = "line-ew"
    LINE_EW_OPEN = "line-ew-open"
    LINE_NS = "line-ns"
    LINE_NS_OPEN = "line-ns-open"
    LINE_NE = "line-ne"
    LINE_NE_OPEN = "line-ne-open"
    LINE_NW = "line-nw"
    LINE_NW_OPEN = "line-nw-open"

    def to_plotly(self) -> str:
        """Return the plotly marker symbol name."""
        return self.value