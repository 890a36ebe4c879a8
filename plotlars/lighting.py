"""Lighting model of surface plots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Lighting:
    """Light source position and material response of a surface.

    ``position`` holds the x, y and z coordinates of the light; the other
    components are strengths in the range 0.0 to 1.0.
    """

    position: tuple[int, int, int] | None = None
    ambient: float | None = None
    diffuse: float | None = None
    fresnel: float | None = None
    roughness: float | None = None
    specular: float | None = None

    def __post_init__(self) -> None:
        if self.position is not None:
            coords = tuple(self.position)
            if len(coords) != 3:
                raise ValueError(f"position needs three coordinates, got {len(coords)}")
            for coord in coords:
                if isinstance(coord, bool) or not isinstance(coord, int):
                    raise TypeError(f"position coordinates must be ints, got {coord!r}")
            object.__setattr__(self, "position", coords)

    def to_plotly(self) -> dict[str, Any]:
        """Return the plotly lighting object."""
        components = {
            "ambient": self.ambient,
            "diffuse": self.diffuse,
            "fresnel": self.fresnel,
            "roughness": self.roughness,
            "specular": self.specular,
        }
        return {key: value for key, value in components.items() if value is not None}


def build_lighting(lighting: Lighting | None) -> dict[str, Any]:
    """Return the plotly lighting object for optional lighting settings."""
    return (lighting or Lighting()).to_plotly()