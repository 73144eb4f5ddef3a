"""Configuration helpers for rendering."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple

Window = Tuple[float, float, float, float]  # (xmin, xmax, ymin, ymax)


@dataclass
class RenderConfig:
    """Viewport and number formatting used by the TikZ renderer."""

    padding: float = 1.0
    fallback_window: Window = (-5.0, 5.0, -5.0, 5.0)
    min_extent: float = 2.0
    scale: float = 1.0
    decimals: int = 4


_RENDER_CONFIG = RenderConfig()


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)
