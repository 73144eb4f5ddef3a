"""Reference text for the geometry expression language."""

from textwrap import dedent

BNF = dedent(
"""
```
Program  := Expr
Expr     := Value
          | 'intersect' '(' Expr ',' Expr ')'
          | 'shift' '(' Number ',' Number ',' Expr ')'
          | 'let' ID '=' Expr 'in' Expr
          | ID
Value    := 'empty'
          | 'point' '(' Number ',' Number ')'
          | 'line' '(' Number ',' Number ')'
          | 'vline' '(' Number ')'
          | 'segment' '(' Number ',' Number ',' Number ',' Number ')'
Number   := ['-'] NUMBER
Comment  := '#' { any character } end-of-line
```
"""
).strip()

SEMANTICS = dedent(
"""
- point(x, y) is a single point; line(m, b) is y = m*x + b; vline(x) is the vertical line at x.
- segment(x1, y1, x2, y2) is closed; endpoints closer than 0.00001 make it a point.
- intersect(a, b) is the set of shared points; 'empty' when there are none.
- shift(dx, dy, e) translates e by (dx, dy).
- let name = e1 in e2 evaluates e2 with name bound to e1; inner bindings shadow outer ones.
- Keywords are case-insensitive and reserved; names are case-sensitive.
"""
).strip()


def get_reference(include_bnf: bool = True) -> str:
    """Return the user-facing language reference."""

    parts = ["GEOEXPR LANGUAGE", "", SEMANTICS]
    if include_bnf:
        parts += ["", "SYNTAX REFERENCE (BNF)", BNF]
    return "\n".join(parts)
