"""Structured attribute values and their canonical DOT strings.

None of these are attribute text themselves; ``dotcraft.formatters`` decides
which escaping contract each one is wrapped in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from dotcraft.enums import CompassPoint


class EmptySplinePathError(ValueError):
    """Raised when a spline is rendered without any path points."""


def format_number(value: float) -> str:
    """Default numeric formatting: shortest round-trip text, no trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_coordinate(value: float) -> str:
    """Coordinates always carry exactly one decimal digit."""
    return f"{value:.1f}"


@dataclass(frozen=True)
class RGB:
    red: int
    green: int
    blue: int

    def dot_string(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class RGBA:
    red: int
    green: int
    blue: int
    alpha: int

    def dot_string(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"


@dataclass(frozen=True)
class HSV:
    """Hue-saturation-value color, each channel nominally in [0, 1]."""

    hue: float
    saturation: float
    value: float

    def dot_string(self) -> str:
        return " ".join(format_number(v) for v in (self.hue, self.saturation, self.value))


@dataclass(frozen=True)
class NamedColor:
    """A color given by name, e.g. ``red`` or ``/bugn9/7``."""

    name: str

    def dot_string(self) -> str:
        return self.name


Color = Union[RGB, RGBA, HSV, NamedColor]


@dataclass(frozen=True)
class WeightedColor:
    """A color with an optional blend fraction in [0, 1]."""

    color: Color
    weight: float | None = None

    def dot_string(self) -> str:
        text = self.color.dot_string()
        if self.weight is not None:
            text += f";{format_number(self.weight)}"
        return text


@dataclass(frozen=True)
class ColorList:
    """Colon-separated weighted colors, e.g. ``yellow;0.3:blue``.

    Present weights are expected to sum to at most 1. That is not checked
    here; see ``dotcraft.validation.validate_value``.
    """

    colors: tuple[WeightedColor, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Color, float | None]]) -> ColorList:
        return cls(tuple(WeightedColor(color, weight) for color, weight in pairs))

    def dot_string(self) -> str:
        return ":".join(c.dot_string() for c in self.colors)


@dataclass(frozen=True)
class Point:
    """A 2D or 3D point; ``force_pos`` pins the node position with ``!``."""

    x: float
    y: float
    z: float | None = None
    force_pos: bool = False

    def dot_string(self) -> str:
        text = f"{format_coordinate(self.x)},{format_coordinate(self.y)}"
        if self.z is not None:
            text += f",{format_coordinate(self.z)}"
        if self.force_pos:
            text += "!"
        return text


@dataclass(frozen=True)
class Rectangle:
    lower_left: Point
    upper_right: Point

    def dot_string(self) -> str:
        return ",".join(
            format_coordinate(v)
            for v in (
                self.lower_left.x,
                self.lower_left.y,
                self.upper_right.x,
                self.upper_right.y,
            )
        )


@dataclass(frozen=True)
class PortPosition:
    """Where on a node an edge is aimed.

    Either a named port with an optional compass point (``port0:sw``), or a
    bare compass point (``ne``).
    """

    port_name: str | None = None
    compass_point: CompassPoint | None = None

    def __post_init__(self) -> None:
        if self.port_name is None and self.compass_point is None:
            raise ValueError("Port position needs a port name or a compass point")

    @classmethod
    def port(cls, name: str, compass_point: CompassPoint | None = None) -> PortPosition:
        return cls(port_name=name, compass_point=compass_point)

    @classmethod
    def compass(cls, compass_point: CompassPoint) -> PortPosition:
        return cls(compass_point=compass_point)

    def dot_string(self) -> str:
        if self.port_name is None:
            return self.compass_point.dot_string()  # type: ignore[union-attr]
        if self.compass_point is None:
            return self.port_name
        return f"{self.port_name}:{self.compass_point.dot_string()}"


@dataclass(frozen=True)
class SplineType:
    """A spline path with optional start and end arrow points.

    The path should hold 3n+1 points; this is documented, not enforced.
    """

    points: tuple[Point, ...]
    start: Point | None = None
    end: Point | None = None

    def dot_string(self) -> str:
        if not self.points:
            raise EmptySplinePathError("empty spline path")
        parts: list[str] = []
        # End is written before start.
        if self.end is not None:
            parts.append(f"e,{format_coordinate(self.end.x)},{format_coordinate(self.end.y)}")
        if self.start is not None:
            parts.append(f"s,{format_coordinate(self.start.x)},{format_coordinate(self.start.y)}")
        parts.extend(p.dot_string() for p in self.points)
        return " ".join(parts)


@dataclass(frozen=True)
class ViewPort:
    """Clipping window on the final drawing.

    ``focus`` is either a point or the name of a node to center on.
    """

    width: float
    height: float
    zoom: float = 1.0
    focus: Point | str | None = field(default=None)

    def dot_string(self) -> str:
        text = ",".join(format_coordinate(v) for v in (self.width, self.height, self.zoom))
        if isinstance(self.focus, Point):
            text += f",{self.focus.dot_string()}"
        elif self.focus is not None:
            text += f",'{self.focus}'"
        return text


@dataclass(frozen=True)
class AspectRatio:
    """Numeric form of the ``ratio`` attribute."""

    value: float

    def dot_string(self) -> str:
        return format_number(self.value)
