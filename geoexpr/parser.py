import math
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .ast import Expression, Intersect, Let, Literal, Shift, Span, Var
from .lexer import Token, tokenize
from .values import EMPTY, GeometryValue, Line, Point, Segment, VerticalLine

_ERROR_LOC_RE = re.compile(r"\[line (\d+), col (\d+)\]")

# keyword -> (number of coordinates, constructor)
VALUE_KEYWORDS: Dict[str, Tuple[int, Callable[..., GeometryValue]]] = {
    'empty': (0, lambda: EMPTY),
    'point': (2, Point),
    'line': (2, Line),
    'vline': (1, VerticalLine),
    'segment': (4, Segment),
}

KEYWORDS = frozenset(VALUE_KEYWORDS) | {'intersect', 'shift', 'let', 'in'}


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self):
        return self.toks[self.i] if self.i < len(self.toks) else None

    def peek_keyword(self) -> Optional[str]:
        t = self.peek()
        if not t or t[0] != 'ID':
            return None
        kw = t[1].lower()
        return kw if kw in KEYWORDS else None

    def consume_keyword(self, keyword: str):
        tok = self.expect('ID')
        if tok[1].lower() != keyword:
            raise SyntaxError(
                f"[line {tok[2]}, col {tok[3]}] expected keyword '{keyword}', got '{tok[1]}'"
            )
        return tok

    def match(self, *types: str):
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str):
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'Unexpected end of input: expected {want}')


def parse_number(cur: Cursor) -> float:
    negative = cur.match('DASH') is not None
    tok = cur.expect('NUMBER')
    value = float(tok[1])
    if not math.isfinite(value):
        raise SyntaxError(f'[line {tok[2]}, col {tok[3]}] number {tok[1]!r} is out of range')
    return -value if negative else value


def parse_number_args(cur: Cursor, count: int) -> List[float]:
    cur.expect('LPAREN')
    values: List[float] = []
    for idx in range(count):
        if idx:
            cur.expect('COMMA')
        values.append(parse_number(cur))
    cur.expect('RPAREN')
    return values


def parse_name(cur: Cursor) -> Tuple[str, Span]:
    t = cur.expect('ID')
    if t[1].lower() in KEYWORDS:
        raise SyntaxError(f"[line {t[2]}, col {t[3]}] reserved word '{t[1]}' cannot be used as a name")
    return t[1], Span(t[2], t[3])


def parse_expr(cur: Cursor) -> Expression:
    t = cur.peek()
    if not t:
        raise SyntaxError('Unexpected end of input: expected expression')
    if t[0] != 'ID':
        raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected expression, got {t[0]}')
    sp = Span(t[2], t[3])
    kw = cur.peek_keyword()

    if kw in VALUE_KEYWORDS:
        cur.consume_keyword(kw)
        arity, make = VALUE_KEYWORDS[kw]
        args = parse_number_args(cur, arity) if arity else []
        return Literal(make(*args), span=sp)
    if kw == 'intersect':
        cur.consume_keyword('intersect')
        cur.expect('LPAREN')
        e1 = parse_expr(cur)
        cur.expect('COMMA')
        e2 = parse_expr(cur)
        cur.expect('RPAREN')
        return Intersect(e1, e2, span=sp)
    if kw == 'shift':
        cur.consume_keyword('shift')
        cur.expect('LPAREN')
        dx = parse_number(cur)
        cur.expect('COMMA')
        dy = parse_number(cur)
        cur.expect('COMMA')
        e = parse_expr(cur)
        cur.expect('RPAREN')
        return Shift(dx, dy, e, span=sp)
    if kw == 'let':
        cur.consume_keyword('let')
        name, _ = parse_name(cur)
        cur.expect('EQUAL')
        e1 = parse_expr(cur)
        cur.consume_keyword('in')
        e2 = parse_expr(cur)
        return Let(name, e1, e2, span=sp)
    if kw is not None:
        raise SyntaxError(f"[line {t[2]}, col {t[3]}] unexpected keyword '{t[1]}'")
    name, sp = parse_name(cur)
    return Var(name, span=sp)


def _augment_syntax_error(err: SyntaxError, lines: Sequence[str]) -> Optional[SyntaxError]:
    message = str(err)
    if "\n" in message:
        return None
    match = _ERROR_LOC_RE.search(message)
    if not match:
        return None
    line_no = int(match.group(1))
    if not 1 <= line_no <= len(lines):
        return None
    line_text = lines[line_no - 1]
    col = max(int(match.group(2)), 1)
    caret_line = " " * (col - 1) + "^"
    snippet = f"    {line_text.rstrip()}\n    {caret_line}"
    return SyntaxError(f"{message}\n{snippet}")


def parse_program(text: str) -> Expression:
    """Parse a whole program, which is exactly one expression."""

    lines = text.splitlines()
    try:
        cur = Cursor(tokenize(text))
        if cur.peek() is None:
            raise SyntaxError('empty program: expected expression')
        expr = parse_expr(cur)
        trailing = cur.peek()
        if trailing:
            raise SyntaxError(f"[line {trailing[2]}, col {trailing[3]}] unexpected token {trailing[1]!r}")
    except SyntaxError as err:
        augmented = _augment_syntax_error(err, lines)
        if augmented is None:
            raise
        raise augmented from None
    return expr
