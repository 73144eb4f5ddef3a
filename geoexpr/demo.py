from . import evaluate, format_value, normalize, parse_program, print_program, validate

DEMO = """
# the diagonal of the unit square, drawn backwards, against the x axis shifted up
let d = segment(1, 1, 0, 0) in
let axis = line(0, 0) in
intersect(d, shift(0, 0.5, axis))
"""


def run():
    prog = parse_program(DEMO)
    print(f"Parsed prog: {prog}\n")
    validate(prog)
    nz = normalize(prog)
    print(f"Normalized prog:\n{print_program(nz)}")
    print(f"Result: {format_value(evaluate(prog))}")


if __name__ == "__main__":
    run()
