import dataclasses

import pytest

from plotlars.color import Rgb
from plotlars.enums import Orientation
from plotlars.legend import Legend, build_legend
from plotlars.text import Text


def test_empty_legend_has_no_options():
    assert build_legend(None, None) == {}


def test_title_from_string():
    result = build_legend("species", None)
    assert result == {"title": Text("species").to_plotly()}


def test_title_from_text_keeps_styling():
    title = Text("gender", font="Arial", size=15)
    result = build_legend(title, None)
    assert result["title"] == title.to_plotly()


def test_position_and_orientation():
    legend = Legend(orientation=Orientation.HORIZONTAL, x=0.4, y=1.0)
    result = build_legend(None, legend)
    assert result["orientation"] == Orientation.HORIZONTAL.to_plotly()
    assert result["x"] == 0.4
    assert result["y"] == 1.0


def test_colours_and_border():
    background = Rgb(255, 127, 80)
    border = Rgb(64, 224, 208)
    result = Legend(background_color=background, border_color=border, border_width=1).to_plotly()
    assert result["bgcolor"] == background.to_plotly()
    assert result["bordercolor"] == border.to_plotly()
    assert result["borderwidth"] == 1


def test_font_family():
    result = Legend(font="Arial").to_plotly()
    assert result["font"] == {"family": "Arial"}


def test_only_set_options_appear():
    result = Legend(x=0.9).to_plotly()
    assert set(result) == {"x"}


def test_build_legend_matches_method():
    legend = Legend(x=0.85, y=0.15, border_width=2)
    assert build_legend("species", legend) == legend.to_plotly("species")


def test_negative_border_width_rejected():
    with pytest.raises(ValueError):
        Legend(border_width=-1)


def test_legend_is_immutable():
    legend = Legend(x=0.1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        legend.x = 0.2  # type: ignore[misc]
    assert legend.to_plotly() == {"x": 0.1}


def test_invalid_title_type_rejected():
    with pytest.raises(TypeError):
        build_legend(42, None)