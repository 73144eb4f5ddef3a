import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from geoexpr import (
    GeometryValue,
    UnboundVariableError,
    ValidationError,
    collect_literals,
    eval_expr,
    format_value,
    generate_tikz_document,
    get_render_config,
    normalize,
    parse_program,
    print_program,
    validate,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate GeoExpr programs")
    parser.add_argument("path", help="Path to the GeoExpr source file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip static validation; unbound variables then fail during evaluation",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document with the literals and the result to the given path",
    )
    parser.add_argument(
        "--padding",
        type=float,
        help="Viewport padding around drawn values (default from RenderConfig)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path) as fin:
        text = fin.read()

    logger.info("Parsing program from %s", args.path)
    try:
        expr = parse_program(text)
        if not args.no_validate:
            validate(expr)
            logger.info("Validation succeeded")
        normalized = normalize(expr)
        result = eval_expr(normalized)
        listing = print_program(normalized)
        result_text = format_value(result)
    except (SyntaxError, ValidationError, UnboundVariableError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print(f"Normalized:\n{listing}", end="")
    print(f"Result: {result_text}")

    if args.tikz_output_path:
        config = get_render_config()
        if args.padding is not None:
            config.padding = args.padding
        values: Dict[str, GeometryValue] = {
            f"L{idx}": value for idx, value in enumerate(collect_literals(normalized), start=1)
        }
        values["result"] = result
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            document = generate_tikz_document(
                values,
                highlight=["result"],
                title=Path(args.path).name,
                config=config,
            )
        except ValueError as exc:
            logger.error("%s", exc)
            raise SystemExit(1)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
