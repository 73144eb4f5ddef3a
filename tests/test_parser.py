import pytest

from geoexpr import (
    EMPTY,
    Intersect,
    Let,
    Line,
    Literal,
    Point,
    Segment,
    Shift,
    Span,
    Var,
    VerticalLine,
    parse_program,
)
from geoexpr.lexer import tokenize


@pytest.mark.parametrize(
    'text, value',
    [
        ('empty', EMPTY),
        ('point(1, 2)', Point(1, 2)),
        ('point(-1.5, .25)', Point(-1.5, 0.25)),
        ('line(2, -3)', Line(2, -3)),
        ('vline(1e-3)', VerticalLine(0.001)),
        ('segment(0, 0, 4, 4)', Segment(0, 0, 4, 4)),
        ('POINT(1, 2)', Point(1, 2)),
    ],
)
def test_value_literals(text, value):
    assert parse_program(text) == Literal(value)


def test_segments_are_parsed_as_written():
    assert parse_program('segment(5, 0, 1, 0)') == Literal(Segment(5, 0, 1, 0))


def test_nested_program_with_comments():
    text = '''
# shifted origin
let p = point(1, 1) in   # bind p
  intersect(p, shift(1, 1, point(0, 0)))
'''
    expected = Let(
        'p',
        Literal(Point(1, 1)),
        Intersect(Var('p'), Shift(1, 1, Literal(Point(0, 0)))),
    )
    assert parse_program(text) == expected


def test_spans_point_at_first_token():
    expr = parse_program('let a = empty in\n  shift(-1, 2, a)')
    assert expr.span == Span(1, 1)
    assert expr.e1.span == Span(1, 9)
    assert expr.e2.span == Span(2, 3)
    assert expr.e2.e.span == Span(2, 16)
    assert (expr.e2.dx, expr.e2.dy) == (-1.0, 2.0)


def test_names_are_case_sensitive():
    expr = parse_program('let P = point(0, 0) in p')
    assert expr.name == 'P'
    assert expr.e2 == Var('p')


def test_tokenize_reports_positions():
    assert tokenize('vline(-2)') == [
        ('ID', 'vline', 1, 1),
        ('LPAREN', '(', 1, 6),
        ('DASH', '-', 1, 7),
        ('NUMBER', '2', 1, 8),
        ('RPAREN', ')', 1, 9),
    ]


def test_unexpected_character():
    with pytest.raises(SyntaxError) as excinfo:
        parse_program('point(1; 2)')
    assert '[line 1, col 8] unexpected character' in str(excinfo.value)


def test_error_reports_column_pointer():
    text = 'intersect(point(1, 2) point(3, 4))'
    with pytest.raises(SyntaxError) as excinfo:
        parse_program(text)
    message = str(excinfo.value)
    assert '[line 1, col 23] expected COMMA, got ID' in message
    lines = message.splitlines()
    assert lines[-2].strip() == text
    assert lines[-1].rstrip().endswith('^')
    assert len(lines[-1]) - len(lines[-1].lstrip()) == 4 + 22


@pytest.mark.parametrize(
    'text, message_part',
    [
        ('', 'empty program'),
        ('# only a comment', 'empty program'),
        ('point(1, 2) point(3, 4)', "unexpected token 'point'"),
        ('point(1)', 'expected COMMA'),
        ('segment(1, 2, 3)', 'expected COMMA'),
        ('let in = empty in in', "reserved word 'in'"),
        ('let a = empty a', "expected keyword 'in'"),
        ('in', "unexpected keyword 'in'"),
        ('intersect(empty', 'Unexpected end of input'),
        ('shift(1, x, empty)', 'expected NUMBER'),
        ('point(1e400, 0)', "[line 1, col 7] number '1e400' is out of range"),
        ('vline(-1e999)', "[line 1, col 8] number '1e999' is out of range"),
    ],
)
def test_syntax_errors(text, message_part):
    with pytest.raises(SyntaxError) as excinfo:
        parse_program(text)
    assert message_part in str(excinfo.value)
