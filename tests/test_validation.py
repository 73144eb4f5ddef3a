import math

import pytest

from geoexpr import (
    EMPTY,
    Intersect,
    Let,
    Literal,
    Point,
    Segment,
    Shift,
    Span,
    ValidationError,
    Var,
    parse_program,
    validate,
)
from geoexpr.validate import free_variables


def test_valid_program_passes():
    validate(parse_program('let a = point(0, 0) in let b = shift(1, 1, a) in intersect(a, b)'))


def test_unbound_variable_is_reported_with_location():
    with pytest.raises(ValidationError) as excinfo:
        validate(parse_program('let a = empty in b'))
    assert str(excinfo.value) == "[line 1, col 18] variable 'b' is not bound by any let"


def test_binding_is_not_visible_in_its_own_value():
    with pytest.raises(ValidationError, match="variable 'a'"):
        validate(parse_program('let a = shift(1, 0, a) in a'))


def test_binding_does_not_leak_out_of_let_body():
    expr = Intersect(Let('a', Literal(EMPTY), Var('a')), Var('a', span=Span(3, 4)))
    with pytest.raises(ValidationError, match=r'\[line 3, col 4\]'):
        validate(expr)


@pytest.mark.parametrize(
    'expr, message',
    [
        (Literal(Point(math.nan, 0), span=Span(1, 1)), '[line 1, col 1] point coordinates must be finite'),
        (Literal(Segment(0, 0, math.inf, 1)), 'segment coordinates must be finite'),
        (Shift(0, -math.inf, Literal(EMPTY)), 'shift offsets must be finite'),
        (Let('let', Literal(EMPTY), Literal(EMPTY)), "invalid binding name 'let'"),
        (Let('', Literal(EMPTY), Literal(EMPTY)), "invalid binding name ''"),
    ],
)
def test_invalid_trees(expr, message):
    with pytest.raises(ValidationError) as excinfo:
        validate(expr)
    assert message in str(excinfo.value)


def test_free_variables():
    expr = parse_program('let a = b in intersect(a, shift(1, 1, c))')
    assert free_variables(expr) == {'b', 'c'}
    assert free_variables(parse_program('let a = empty in a')) == set()
