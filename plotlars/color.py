"""RGB colours used throughout the plot components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rgb:
    """An RGB colour whose red, green and blue parts each lie in 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} component must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component must be within 0..255, got {value}")

    def to_plotly(self) -> str:
        """Return the colour as a plotly colour string."""
        return f"rgb({self.red}, {self.green}, {self.blue})"