"""Public entry points of the intersection engine."""

from __future__ import annotations

import logging

from .logging_utils import apply_debug_logging
from .values import GeometryValue, Segment, line_through

__all__ = ["intersect", "clip_to_segment", "line_through"]

logger = logging.getLogger(__name__)


def intersect(v1: GeometryValue, v2: GeometryValue) -> GeometryValue:
    """Intersection of two values; the result does not depend on argument order.

    Segments must already be in canonical form (see :func:`geoexpr.normalize.normalize`).
    """

    return v1.intersect(v2)


def clip_to_segment(result: GeometryValue, seg: Segment) -> GeometryValue:
    """Clip ``result``, computed against ``seg``'s supporting line, to ``seg`` itself."""

    return result.clip_to_segment(seg)


apply_debug_logging(globals(), logger=logger)
