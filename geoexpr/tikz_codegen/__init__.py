"""GeoExpr → TikZ code generation helpers."""

from .generator import (
    clip_to_window,
    collect_literals,
    compute_viewport,
    generate_tikz_code,
    generate_tikz_document,
)
from .utils import latex_escape_keep_math

__all__ = [
    "clip_to_window",
    "collect_literals",
    "compute_viewport",
    "generate_tikz_code",
    "generate_tikz_document",
    "latex_escape_keep_math",
]
