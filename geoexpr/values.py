"""Geometric values and the double-dispatch intersection handlers.

Intersection is resolved in two polymorphic steps: ``a.intersect(b)`` asks
``b`` to ``intersect_with_<kind of a>(a)``. Every kind implements the five
``intersect_with_*`` handlers, so all 25 ordered pairs are covered without
inspecting runtime types.

A segment pairing is reduced to the intersection with the segment's
supporting line (:func:`line_through`), whose result is then clipped back
to the segment with ``clip_to_segment``. The clipping step assumes segments
in canonical form (see :meth:`Segment.preprocess`).
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .logging_utils import apply_debug_logging
from .numbers import close_to, in_between, point_close

logger = logging.getLogger(__name__)


class GeometryValue:
    """Common behaviour of the five geometric value kinds."""

    kind: ClassVar[str] = ""

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    @property
    def fields(self) -> Tuple[float, ...]:
        """Defining coordinates in declaration order; empty for :class:`Empty`."""

        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    def preprocess(self) -> "GeometryValue":
        return self

    def shift(self, dx: float, dy: float) -> "GeometryValue":
        raise NotImplementedError

    def intersect(self, other: "GeometryValue") -> "GeometryValue":
        raise NotImplementedError

    def intersect_with_empty(self, empty: "Empty") -> "GeometryValue":
        return empty

    def intersect_with_point(self, point: "Point") -> "GeometryValue":
        raise NotImplementedError

    def intersect_with_line(self, line: "Line") -> "GeometryValue":
        raise NotImplementedError

    def intersect_with_vertical_line(self, vline: "VerticalLine") -> "GeometryValue":
        raise NotImplementedError

    def intersect_with_segment(self, seg: "Segment") -> "GeometryValue":
        line_result = self.intersect(line_through(seg))
        return line_result.clip_to_segment(seg)

    def clip_to_segment(self, seg: "Segment") -> "GeometryValue":
        """Restrict ``self``, known to lie on ``seg``'s supporting line, to ``seg``."""

        raise NotImplementedError


@dataclass(frozen=True)
class Empty(GeometryValue):
    kind: ClassVar[str] = "empty"

    def shift(self, dx: float, dy: float) -> GeometryValue:
        return self

    def intersect(self, other: GeometryValue) -> GeometryValue:
        return other.intersect_with_empty(self)

    def intersect_with_point(self, point: "Point") -> GeometryValue:
        return self

    def intersect_with_line(self, line: "Line") -> GeometryValue:
        return self

    def intersect_with_vertical_line(self, vline: "VerticalLine") -> GeometryValue:
        return self

    def intersect_with_segment(self, seg: "Segment") -> GeometryValue:
        return self

    def clip_to_segment(self, seg: "Segment") -> GeometryValue:
        return self


EMPTY = Empty()


@dataclass(frozen=True)
class Point(GeometryValue):
    kind: ClassVar[str] = "point"

    x: float
    y: float

    def shift(self, dx: float, dy: float) -> GeometryValue:
        return Point(self.x + dx, self.y + dy)

    def intersect(self, other: GeometryValue) -> GeometryValue:
        return other.intersect_with_point(self)

    def intersect_with_point(self, point: "Point") -> GeometryValue:
        if point_close(self.x, self.y, point.x, point.y):
            return self
        return EMPTY

    def intersect_with_line(self, line: "Line") -> GeometryValue:
        if close_to(self.y, line.m * self.x + line.b):
            return self
        return EMPTY

    def intersect_with_vertical_line(self, vline: "VerticalLine") -> GeometryValue:
        if close_to(self.x, vline.x):
            return self
        return EMPTY

    def clip_to_segment(self, seg: "Segment") -> GeometryValue:
        if in_between(self.x, seg.x1, seg.x2) and in_between(self.y, seg.y1, seg.y2):
            return self
        return EMPTY


@dataclass(frozen=True)
class Line(GeometryValue):
    """Non-vertical infinite line ``y = m * x + b``."""

    kind: ClassVar[str] = "line"

    m: float
    b: float

    def shift(self, dx: float, dy: float) -> GeometryValue:
        return Line(self.m, self.b + dy - self.m * dx)

    def intersect(self, other: GeometryValue) -> GeometryValue:
        return other.intersect_with_line(self)

    def intersect_with_point(self, point: Point) -> GeometryValue:
        return point.intersect_with_line(self)

    def intersect_with_line(self, line: "Line") -> GeometryValue:
        if close_to(self.m, line.m):
            if close_to(self.b, line.b):
                return self
            return EMPTY
        x = (line.b - self.b) / (self.m - line.m)
        return Point(x, self.m * x + self.b)

    def intersect_with_vertical_line(self, vline: "VerticalLine") -> GeometryValue:
        return Point(vline.x, self.m * vline.x + self.b)

    def clip_to_segment(self, seg: "Segment") -> GeometryValue:
        # the segment lies on this line
        return seg


@dataclass(frozen=True)
class VerticalLine(GeometryValue):
    kind: ClassVar[str] = "vline"

    x: float

    def shift(self, dx: float, dy: float) -> GeometryValue:
        return VerticalLine(self.x + dx)

    def intersect(self, other: GeometryValue) -> GeometryValue:
        return other.intersect_with_vertical_line(self)

    def intersect_with_point(self, point: Point) -> GeometryValue:
        return point.intersect_with_vertical_line(self)

    def intersect_with_line(self, line: Line) -> GeometryValue:
        return line.intersect_with_vertical_line(self)

    def intersect_with_vertical_line(self, vline: "VerticalLine") -> GeometryValue:
        if close_to(self.x, vline.x):
            return self
        return EMPTY

    def clip_to_segment(self, seg: "Segment") -> GeometryValue:
        return seg


@dataclass(frozen=True)
class Segment(GeometryValue):
    """Finite segment between ``(x1, y1)`` and ``(x2, y2)``.

    Canonical form: the endpoints are distinct and ``(x1, y1)`` comes first
    when ordering by x, then by y. Literal segments are brought into this form
    by :meth:`preprocess` before they reach the intersection handlers.
    """

    kind: ClassVar[str] = "segment"

    x1: float
    y1: float
    x2: float
    y2: float

    def preprocess(self) -> GeometryValue:
        if point_close(self.x1, self.y1, self.x2, self.y2):
            return Point(self.x1, self.y1)
        if close_to(self.x1, self.x2):
            if self.y1 < self.y2:
                return self
            return Segment(self.x2, self.y2, self.x1, self.y1)
        if self.x2 < self.x1:
            return Segment(self.x2, self.y2, self.x1, self.y1)
        return self

    def shift(self, dx: float, dy: float) -> GeometryValue:
        return Segment(self.x1 + dx, self.y1 + dy, self.x2 + dx, self.y2 + dy)

    def is_vertical(self) -> bool:
        return close_to(self.x1, self.x2)

    def intersect(self, other: GeometryValue) -> GeometryValue:
        return other.intersect_with_segment(self)

    def intersect_with_point(self, point: Point) -> GeometryValue:
        return point.intersect_with_segment(self)

    def intersect_with_line(self, line: Line) -> GeometryValue:
        return line.intersect_with_segment(self)

    def intersect_with_vertical_line(self, vline: VerticalLine) -> GeometryValue:
        return vline.intersect_with_segment(self)

    def clip_to_segment(self, seg: "Segment") -> GeometryValue:
        # Both segments are colinear. Order them by start along the axis that
        # varies, then compare the first one's end with the second one's span.
        if self.is_vertical():
            first, second = (self, seg) if self.y1 < seg.y1 else (seg, self)
            first_end, second_start, second_end = first.y2, second.y1, second.y2
        else:
            first, second = (self, seg) if self.x1 < seg.x1 else (seg, self)
            first_end, second_start, second_end = first.x2, second.x1, second.x2

        if close_to(first_end, second_start):
            return Point(first.x2, first.y2)
        if first_end < second_start:
            return EMPTY
        if first_end > second_end:
            return second
        return Segment(second.x1, second.y1, first.x2, first.y2)


def line_through(seg: Segment) -> GeometryValue:
    """Infinite line through both endpoints of ``seg``."""

    if seg.is_vertical():
        return VerticalLine(seg.x1)
    m = (seg.y2 - seg.y1) / (seg.x2 - seg.x1)
    return Line(m, seg.y1 - m * seg.x1)

def values_close(a: GeometryValue, b: GeometryValue) -> bool:
    """Equality of the value model: same kind and pairwise ``close_to`` fields."""

    fa, fb = a.fields, b.fields
    if a.kind != b.kind or len(fa) != len(fb):
        return False
    return all(close_to(u, v) for u, v in zip(fa, fb))


apply_debug_logging(globals(), logger=logger, skip={"values_close"})
