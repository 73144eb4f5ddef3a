from __future__ import annotations

import logging
from typing import Optional

from .ast import Expression
from .environment import EMPTY_ENVIRONMENT, Environment
from .logging_utils import apply_debug_logging
from .normalize import normalize
from .values import GeometryValue

logger = logging.getLogger(__name__)


def eval_expr(expr: Expression, env: Optional[Environment] = None) -> GeometryValue:
    """Evaluate an already normalized ``expr`` in ``env`` (empty by default)."""

    return expr.evaluate(EMPTY_ENVIRONMENT if env is None else env)


def evaluate(expr: Expression) -> GeometryValue:
    """Normalize ``expr`` and evaluate it in the empty environment.

    Raises :class:`geoexpr.environment.UnboundVariableError` when a variable is
    used outside the scope of a matching ``let``.
    """

    return eval_expr(normalize(expr), EMPTY_ENVIRONMENT)


apply_debug_logging(globals(), logger=logger)
