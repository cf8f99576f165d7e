"""Conversion of typed values into attribute text.

The wrapping variant follows the attribute's semantics, not the value's
shape: a numeric aspect ratio is a raw token while ``ratio="fill"`` is
quoted, shapes are raw while compass points are quoted, and so on.
"""

from __future__ import annotations

from typing import Any

from dotcraft.enums import (
    ArrowType,
    ClusterMode,
    CompassPoint,
    Direction,
    DotToken,
    EdgeStyle,
    GraphStyle,
    ImagePosition,
    ImageScale,
    LabelJustification,
    LabelLocation,
    NodeStyle,
    Ordering,
    OutputMode,
    PackMode,
    PageDirection,
    RankDir,
    RatioMode,
    Shape,
    Splines,
)
from dotcraft.text import AttributeText
from dotcraft.values import (
    HSV,
    RGB,
    RGBA,
    AspectRatio,
    ColorList,
    NamedColor,
    Point,
    PortPosition,
    Rectangle,
    SplineType,
    ViewPort,
    WeightedColor,
    format_number,
)

RAW_TOKENS: frozenset[type[DotToken]] = frozenset({
    ArrowType,
    Direction,
    EdgeStyle,
    GraphStyle,
    LabelJustification,
    LabelLocation,
    NodeStyle,
    PageDirection,
    RankDir,
    Shape,
})

QUOTED_TOKENS: frozenset[type[DotToken]] = frozenset({
    ClusterMode,
    CompassPoint,
    ImagePosition,
    ImageScale,
    Ordering,
    OutputMode,
    PackMode,
    RatioMode,
    Splines,
})

QUOTED_VALUES: tuple[type, ...] = (
    RGB,
    RGBA,
    HSV,
    NamedColor,
    WeightedColor,
    ColorList,
    Point,
    Rectangle,
    PortPosition,
    SplineType,
    ViewPort,
)


def to_attribute_text(value: Any) -> AttributeText:
    """Convert ``value`` into its canonical attribute text.

    Attribute text passes through unchanged. Raises TypeError for values
    that have no DOT form.
    """
    if isinstance(value, AttributeText):
        return value
    if isinstance(value, bool):
        return AttributeText.raw("true" if value else "false")
    if isinstance(value, int):
        return AttributeText.raw(str(value))
    if isinstance(value, float):
        return AttributeText.raw(format_number(value))
    if isinstance(value, str):
        return AttributeText.quoted(value)
    if isinstance(value, DotToken):
        if type(value) in RAW_TOKENS:
            return AttributeText.raw(value.dot_string())
        if type(value) in QUOTED_TOKENS:
            return AttributeText.quoted(value.dot_string())
    if isinstance(value, AspectRatio):
        return AttributeText.raw(value.dot_string())
    if isinstance(value, QUOTED_VALUES):
        return AttributeText.quoted(value.dot_string())
    raise TypeError(f"Cannot convert {type(value).__name__} to attribute text")
