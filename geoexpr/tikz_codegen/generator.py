"""TikZ renderer for geometry values."""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..ast import Expression
from ..config import RenderConfig, Window, get_render_config
from ..intersection import intersect
from ..logging_utils import apply_debug_logging
from ..numbers import point_close
from ..values import GeometryValue, Segment
from .utils import latex_escape_keep_math

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  gs/dot radius/.store in=\gsDotR,  gs/dot radius=1.4pt,
  ptlabel/.style={font=\footnotesize, inner sep=1pt},
  aux/.style={line width=0.6pt, gray, dash pattern=on 3pt off 2pt},
  result/.style={line width=1.2pt, blue},
}
\begin{document}
%s
%s
\end{document}
"""

# Points that pin a value to the plane; lines contribute where they cross the axes.
_ANCHORS: Dict[str, Callable[[Sequence[float]], List[Point2D]]] = {
    "empty": lambda f: [],
    "point": lambda f: [(f[0], f[1])],
    "line": lambda f: [(0.0, f[1])] + ([(-f[1] / f[0], 0.0)] if f[0] != 0.0 else []),
    "vline": lambda f: [(f[0], 0.0)],
    "segment": lambda f: [(f[0], f[1]), (f[2], f[3])],
}


def _anchors(value: GeometryValue) -> List[Point2D]:
    return _ANCHORS[value.kind](value.fields)


def _format_float(value: float, decimals: int) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.{decimals}f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def compute_viewport(values: Iterable[GeometryValue], config: Optional[RenderConfig] = None) -> Window:
    """Padded bounding box of every anchor of ``values``."""

    config = config or get_render_config()
    anchors = [pt for value in values for pt in _anchors(value)]
    if not anchors:
        return config.fallback_window
    arr = np.asarray(anchors, dtype=float).reshape(-1, 2)
    lo = arr.min(axis=0) - config.padding
    hi = arr.max(axis=0) + config.padding
    center = 0.5 * (lo + hi)
    half = np.maximum(0.5 * (hi - lo), 0.5 * config.min_extent)
    lo, hi = center - half, center + half
    return (float(lo[0]), float(hi[0]), float(lo[1]), float(hi[1]))


def _window_border(window: Window) -> List[Segment]:
    xmin, xmax, ymin, ymax = window
    return [
        Segment(xmin, ymin, xmax, ymin),
        Segment(xmin, ymax, xmax, ymax),
        Segment(xmin, ymin, xmin, ymax),
        Segment(xmax, ymin, xmax, ymax),
    ]


def clip_to_window(value: GeometryValue, window: Window) -> Optional[Tuple[Point2D, Point2D]]:
    """Visible part of an infinite line as its two extreme border crossings."""

    hits: List[Point2D] = []
    for border in _window_border(window):
        for pt in _anchors(intersect(value, border)):
            if not any(point_close(pt[0], pt[1], q[0], q[1]) for q in hits):
                hits.append(pt)
    if len(hits) < 2:
        return None
    hits.sort()
    return hits[0], hits[-1]


def _coord(pt: Point2D, decimals: int) -> str:
    return f"({_format_float(pt[0], decimals)},{_format_float(pt[1], decimals)})"


def _emit_value(
    label: str, value: GeometryValue, style: str, window: Window, decimals: int
) -> List[str]:
    text = latex_escape_keep_math(label)
    kind = value.kind
    if kind == "empty":
        return [f"% {label}: empty"]
    if kind == "point":
        (pt,) = _anchors(value)
        return [
            f"\\fill[{style}] {_coord(pt, decimals)} circle (\\gsDotR);",
            f"\\node[ptlabel,above right] at {_coord(pt, decimals)} {{{text}}};",
        ]
    if kind == "segment":
        a, b = _anchors(value)
        return [
            f"\\draw[{style}] {_coord(a, decimals)} -- {_coord(b, decimals)};",
            f"\\node[ptlabel,above] at {_coord(b, decimals)} {{{text}}};",
        ]
    clipped = clip_to_window(value, window)
    if clipped is None:
        logger.warning("%s does not cross the viewport; skipped", label)
        return [f"% {label}: outside viewport"]
    a, b = clipped
    return [
        f"\\draw[{style}] {_coord(a, decimals)} -- {_coord(b, decimals)};",
        f"\\node[ptlabel,above left] at {_coord(b, decimals)} {{{text}}};",
    ]


def generate_tikz_code(
    values: Mapping[str, GeometryValue],
    *,
    highlight: Iterable[str] = (),
    config: Optional[RenderConfig] = None,
) -> str:
    """Draw every labelled value; labels in ``highlight`` use the ``result`` style."""

    config = config or get_render_config()
    highlighted = set(highlight)
    window = compute_viewport(values.values(), config)
    xmin, xmax, ymin, ymax = window
    d = config.decimals
    lines = [
        f"\\begin{{tikzpicture}}[scale={_format_float(config.scale, d)}]",
        f"\\clip {_coord((xmin, ymin), d)} rectangle {_coord((xmax, ymax), d)};",
    ]
    for label, value in values.items():
        style = "result" if label in highlighted else "aux"
        lines.extend("  " + line for line in _emit_value(label, value, style, window, d))
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(
    values: Mapping[str, GeometryValue],
    *,
    highlight: Iterable[str] = (),
    title: Optional[str] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a standalone LaTeX document around :func:`generate_tikz_code`."""

    header = ""
    if title:
        header = "\\textbf{" + latex_escape_keep_math(title.strip()) + "}\\par"
    tikz_code = generate_tikz_code(values, highlight=highlight, config=config)
    return standalone_tpl % (header, tikz_code)


def collect_literals(expr: Expression) -> List[GeometryValue]:
    """Literal values of ``expr`` in source order."""

    k = expr.kind
    if k == "literal":
        return [expr.value]
    if k == "var":
        return []
    if k == "shift":
        return collect_literals(expr.e)
    if k in ("intersect", "let"):
        return collect_literals(expr.e1) + collect_literals(expr.e2)
    raise ValueError(f"unknown expression kind {k!r}")


apply_debug_logging(globals(), logger=logger)
