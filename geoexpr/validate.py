import math
from typing import FrozenSet, Iterable, Optional, Set

from .ast import Expression, Span
from .parser import KEYWORDS


class ValidationError(Exception):
    pass


def _where(sp: Optional[Span]) -> str:
    return f'[line {sp.line}, col {sp.col}] ' if sp is not None else ''


def _ensure_finite(numbers: Iterable[float], sp: Optional[Span], what: str) -> None:
    for value in numbers:
        if not math.isfinite(value):
            raise ValidationError(f'{_where(sp)}{what} must be finite (got {value!r})')


def free_variables(expr: Expression) -> Set[str]:
    """Names referenced by ``expr`` that no enclosing ``let`` binds."""

    k = expr.kind
    if k == 'var':
        return {expr.name}
    if k == 'literal':
        return set()
    if k == 'shift':
        return free_variables(expr.e)
    if k == 'intersect':
        return free_variables(expr.e1) | free_variables(expr.e2)
    if k == 'let':
        return free_variables(expr.e1) | (free_variables(expr.e2) - {expr.name})
    raise ValidationError(f'{_where(getattr(expr, "span", None))}unknown expression kind {k!r}')


def _check(expr: Expression, bound: FrozenSet[str]) -> None:
    k = expr.kind
    if k == 'literal':
        _ensure_finite(expr.value.fields, expr.span, f'{expr.value.kind} coordinates')
    elif k == 'var':
        if expr.name not in bound:
            raise ValidationError(f'{_where(expr.span)}variable {expr.name!r} is not bound by any let')
    elif k == 'shift':
        _ensure_finite((expr.dx, expr.dy), expr.span, 'shift offsets')
        _check(expr.e, bound)
    elif k == 'intersect':
        _check(expr.e1, bound)
        _check(expr.e2, bound)
    elif k == 'let':
        if not expr.name or expr.name.lower() in KEYWORDS:
            raise ValidationError(f'{_where(expr.span)}invalid binding name {expr.name!r}')
        _check(expr.e1, bound)
        _check(expr.e2, bound | {expr.name})
    else:
        raise ValidationError(f'{_where(getattr(expr, "span", None))}unknown expression kind {k!r}')


def validate(expr: Expression) -> None:
    _check(expr, frozenset())
