"""Conversion of zone sets into triangle-list visualization markers."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import ClassVar

POLYGON_TYPES = ("safety", "warn", "muting")


@dataclass(frozen=True)
class Point:
    """A point in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class ColorRGBA:
    """A colour with red, green, blue and alpha channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass
class Polygon:
    """An ordered list of polygon corner points."""

    points: list[Point] = field(default_factory=list)


@dataclass
class ZoneSet:
    """The safety, warning and muting fields of one zone set."""

    frame_id: str = ""
    speed_lower: float = 0.0
    speed_upper: float = 0.0
    safety1: Polygon = field(default_factory=Polygon)
    safety2: Polygon = field(default_factory=Polygon)
    safety3: Polygon = field(default_factory=Polygon)
    warn1: Polygon = field(default_factory=Polygon)
    warn2: Polygon = field(default_factory=Polygon)
    muting1: Polygon = field(default_factory=Polygon)
    muting2: Polygon = field(default_factory=Polygon)


@dataclass
class Marker:
    """A triangle-list marker for visualization."""

    TRIANGLE_LIST: ClassVar[int] = 11
    ADD: ClassVar[int] = 0

    frame_id: str = ""
    ns: str = ""
    id: int = 0
    type: int = 11
    action: int = 0
    scale: Point = field(default_factory=lambda: Point(1.0, 1.0, 1.0))
    color: ColorRGBA = field(default_factory=lambda: ColorRGBA(0.0, 0.0, 0.0, 0.4))
    position: Point = field(default_factory=Point)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    points: list[Point] = field(default_factory=list)
    colors: list[ColorRGBA] = field(default_factory=list)


def create_point(x: float, y: float, z: float) -> Point:
    """Create a point."""
    return Point(float(x), float(y), float(z))


def create_rgba(r: float, g: float, b: float, a: float) -> ColorRGBA:
    """Create a colour."""
    return ColorRGBA(float(r), float(g), float(b), float(a))


def create_marker(
    ns: str,
    color: ColorRGBA,
    frame_id: str,
    points: list[Point],
    z_offset: float = 0.0,
) -> Marker:
    """Build a marker fanning triangles from the origin over consecutive points."""
    triangles: list[Point] = []
    colors: list[ColorRGBA] = []
    for previous, current in pairwise(points):
        triangles.append(create_point(0.0, 0.0, 0.0))
        triangles.append(create_point(previous.x, previous.y, 0.0))
        triangles.append(create_point(current.x, current.y, 0.0))
        colors.append(color)
    return Marker(
        frame_id=frame_id,
        ns=ns,
        position=create_point(0.0, 0.0, z_offset),
        points=triangles,
        colors=colors,
    )


def _signed(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text if text.startswith("-") else "+" + text


def get_range_info(zoneset: ZoneSet) -> str:
    """Describe the speed range of a zone set, or return an empty string."""
    if zoneset.speed_lower != 0 or zoneset.speed_upper != 0:
        return f"min:{_signed(zoneset.speed_lower)} max:{_signed(zoneset.speed_upper)}"
    return ""


def _polygon_marker(zoneset: ZoneSet, polygon_type: str, index: int) -> Marker:
    polygon: Polygon = getattr(zoneset, f"{polygon_type}{index}")
    is_warn = polygon_type == "warn"
    is_muting = polygon_type == "muting"
    return create_marker(
        f"active zoneset {polygon_type}{index} {get_range_info(zoneset)}",
        create_rgba(not is_muting, is_warn, is_muting, 1),
        zoneset.frame_id,
        polygon.points,
        0.01 * is_warn + 0.02 * is_muting,
    )


_POLYGONS = (
    ("safety", 1),
    ("safety", 2),
    ("safety", 3),
    ("warn", 1),
    ("warn", 2),
    ("muting", 1),
    ("muting", 2),
)


def to_markers(zoneset: ZoneSet) -> list[Marker]:
    """Return one marker for every non-empty polygon of the zone set."""
    return [
        _polygon_marker(zoneset, polygon_type, index)
        for polygon_type, index in _POLYGONS
        if getattr(zoneset, f"{polygon_type}{index}").points
    ]