"""Preprocessing pass run once before evaluation.

Every literal segment is rewritten into canonical form: a point when its
endpoints coincide within tolerance, otherwise ordered so the first endpoint
is the leftmost one (the lower one for vertical segments).
"""

from __future__ import annotations

import logging

from .ast import Expression
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def normalize(expr: Expression) -> Expression:
    return expr.preprocess()


apply_debug_logging(globals(), logger=logger)
