import pytest

from plotlars.shape import Shape


def test_circle_symbol():
    assert Shape.CIRCLE.to_plotly() == "circle"


def test_diamond_symbol():
    assert Shape.DIAMOND.to_plotly() == "diamond"


def test_symbols_are_unique():
    symbols = [shape.to_plotly() for shape in Shape]
    assert [Shape(symbol) for symbol in symbols] == list(Shape)
    assert len(symbols) == len(set(symbols))


@pytest.mark.parametrize("shape", list(Shape))
def test_round_trip_through_symbol(shape):
    assert Shape(shape.to_plotly()) is shape


@pytest.mark.parametrize("shape", [s for s in Shape if s.name.endswith("_OPEN")])
def test_open_variants_extend_base(shape):
    base = Shape[shape.name[: -len("_OPEN")]]
    assert Shape(base.to_plotly() + "-open") is shape


@pytest.mark.parametrize("shape", [s for s in Shape if s.name.endswith("_OPEN_DOT")])
def test_open_dot_variants_extend_open(shape):
    open_variant = Shape[shape.name[: -len("_DOT")]]
    assert Shape(open_variant.to_plotly() + "-dot") is shape


def test_unknown_symbol_rejected():
    with pytest.raises(ValueError):
        Shape("no-such-symbol")