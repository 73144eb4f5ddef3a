from geoexpr import Segment, evaluate, parse_program, print_program, validate
from geoexpr.demo import run
from geoexpr.normalize import normalize


def test_demo_output(capsys):
    run()
    out = capsys.readouterr().out

    assert out.startswith("Parsed prog: Let(")
    assert (
        "Normalized prog:\n"
        "let d = segment(0, 0, 1, 1) in\n"
        "  let axis = line(0, 0) in\n"
        "    intersect(d, shift(0, 0.5, axis))\n"
    ) in out
    assert out.rstrip().endswith("Result: point(0.5, 0.5)")


def test_full_pipeline():
    text = """
let base = segment(0, 0, 10, 0) in
let other = segment(15, 0, 5, 0) in
intersect(base, other)
"""
    prog = parse_program(text)
    validate(prog)
    assert "segment(5, 0, 15, 0)" in print_program(normalize(prog))
    assert evaluate(prog) == Segment(5, 0, 10, 0)
