import pytest

from plotlars.color import Rgb
from plotlars.enums import Line
from plotlars.shape import Shape
from plotlars.styling import create_line, create_marker

RED = Rgb(255, 0, 0)
GREEN = Rgb(0, 255, 0)


def test_empty_line():
    assert create_line(0) == {}


def test_line_width_only():
    assert create_line(0, width=3.0) == {"width": 3.0}


def test_single_style_wins_over_styles():
    line = create_line(1, style=Line.DASH, styles=[Line.SOLID, Line.DOT])
    assert line["dash"] == Line.DASH.to_plotly()


@pytest.mark.parametrize("index", [0, 1])
def test_styles_indexed(index):
    styles = [Line.SOLID, Line.DOT]
    assert create_line(index, styles=styles)["dash"] == styles[index].to_plotly()


def test_styles_index_out_of_range_leaves_dash_unset():
    assert create_line(5, width=1.0, styles=[Line.SOLID]) == {"width": 1.0}


def test_empty_marker():
    assert create_marker(0) == {}


def test_marker_opacity_and_size():
    assert create_marker(0, opacity=0.5, size=12) == {"opacity": 0.5, "size": 12}


def test_single_color_wins_over_colors():
    marker = create_marker(1, color=RED, colors=[GREEN, GREEN])
    assert marker["color"] == RED.to_plotly()


@pytest.mark.parametrize("index", [0, 1])
def test_colors_indexed(index):
    colors = [RED, GREEN]
    assert create_marker(index, colors=colors)["color"] == colors[index].to_plotly()


def test_colors_out_of_range_leaves_color_unset():
    assert "color" not in create_marker(2, colors=[RED, GREEN])


def test_single_shape_wins_over_shapes():
    marker = create_marker(0, shape=Shape.DIAMOND, shapes=[Shape.CIRCLE])
    assert marker["symbol"] == Shape.DIAMOND.to_plotly()


@pytest.mark.parametrize("index", [0, 1, 2])
def test_shapes_indexed(index):
    shapes = [Shape.CIRCLE, Shape.SQUARE, Shape.DIAMOND]
    assert create_marker(index, shapes=shapes)["symbol"] == shapes[index].to_plotly()


def test_shapes_out_of_range_leaves_symbol_unset():
    marker = create_marker(3, size=8, shapes=[Shape.CIRCLE])
    assert marker == {"size": 8}


def test_full_marker():
    marker = create_marker(1, opacity=0.25, size=8, colors=[RED, GREEN], shapes=[Shape.CIRCLE, Shape.SQUARE])
    assert marker == {
        "opacity": 0.25,
        "size": 8,
        "color": GREEN.to_plotly(),
        "symbol": Shape.SQUARE.to_plotly(),
    }