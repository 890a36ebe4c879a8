import pytest

from plotlars.color import Rgb
from plotlars.colorbar import ColorBar
from plotlars.enums import Orientation, TickDirection, ValueExponent
from plotlars.text import Text


def test_default_colorbar_is_empty():
    assert ColorBar().to_plotly() == {}


def test_length_uses_pixel_mode():
    bar = ColorBar(length=290).to_plotly()
    assert bar == {"lenmode": "pixels", "len": 290}


def test_width_uses_pixel_thickness():
    bar = ColorBar(width=20).to_plotly()
    assert bar == {"thicknessmode": "pixels", "thickness": 20}


def test_heatmap_example_options():
    bar = ColorBar(
        length=290,
        value_exponent=ValueExponent.NONE,
        separate_thousands=True,
        tick_length=5,
        tick_step=2500.0,
    ).to_plotly()
    assert bar["exponentformat"] == ValueExponent.NONE.to_plotly()
    assert bar["separatethousands"] is True
    assert bar["ticklen"] == 5
    assert bar["dtick"] == 2500.0
    assert bar["len"] == 290


def test_colors_are_converted():
    red = Rgb(255, 0, 0)
    blue = Rgb(0, 0, 255)
    bar = ColorBar(
        background_color=red, border_color=blue, outline_color=red, tick_color=blue
    ).to_plotly()
    assert bar["bgcolor"] == red.to_plotly()
    assert bar["bordercolor"] == blue.to_plotly()
    assert bar["outlinecolor"] == red.to_plotly()
    assert bar["tickcolor"] == blue.to_plotly()


def test_ticks_and_labels():
    bar = ColorBar(
        tick_labels=["a", "b"],
        tick_values=[1, 2],
        tick_font="Arial",
        tick_angle=90.0,
        tick_width=2,
        n_ticks=4,
    ).to_plotly()
    assert bar["ticktext"] == ["a", "b"]
    assert bar["tickvals"] == [1.0, 2.0]
    assert bar["tickfont"] == {"family": "Arial"}
    assert bar["tickangle"] == 90.0
    assert bar["tickwidth"] == 2
    assert bar["nticks"] == 4


@pytest.mark.parametrize("direction", list(TickDirection))
def test_tick_direction_uses_ticks_mapping(direction):
    bar = ColorBar(tick_direction=direction).to_plotly()
    assert bar["ticks"] == direction.to_plotly_ticks()


def test_orientation_and_position():
    bar = ColorBar(orientation=Orientation.HORIZONTAL, x=0.2, y=-0.6).to_plotly()
    assert bar["orientation"] == Orientation.HORIZONTAL.to_plotly()
    assert bar["x"] == 0.2
    assert bar["y"] == -0.6


def test_string_title_is_wrapped():
    bar = ColorBar(title="scale")
    assert bar.title == Text("scale")
    assert bar.to_plotly()["title"] == Text("scale").to_plotly()


def test_border_and_outline_widths():
    bar = ColorBar(border_width=1, outline_width=3).to_plotly()
    assert bar["borderwidth"] == 1
    assert bar["outlinewidth"] == 3


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        ColorBar(border_width=-1)


def test_string_tick_labels_rejected():
    with pytest.raises(TypeError):
        ColorBar(tick_labels="abc")