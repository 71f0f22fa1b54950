"""Command line entry point.

    stepwise "(+ 1 (- 1 1))"
    stepwise --mode explain "(+ 1 (- 1 1))"
    stepwise --mode trace -d "(define (C x y) (cond ...))" "(C 1 10)"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from stepwise.config import get_log_level
from stepwise.errors import StepwiseError
from stepwise.interpreter import Interpreter
from stepwise.types.numeric import format_value

logger = logging.getLogger(__name__)

MODES = ("eval", "explain", "expand", "trace")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepwise",
        description="Evaluate S-expressions and show substitution-model steps.",
    )
    parser.add_argument("expressions", nargs="+", help="expressions to process, in order")
    parser.add_argument(
        "-m", "--mode", choices=MODES, default="eval",
        help="eval: value; explain: level-by-level reduction; "
             "expand: one substitution step; trace: substitution steps to the end",
    )
    parser.add_argument(
        "-d", "--define", action="append", default=[], metavar="FORM",
        help="definition to load before processing (repeatable)",
    )
    parser.add_argument("-p", "--prelude", type=Path, help="file of definitions to load first")
    parser.add_argument("--max-expansions", type=int, help="iteration cap for trace mode")
    parser.add_argument("--log-level", default=None, help="logging level (default from STEPWISE_LOG_LEVEL)")
    return parser


def run(args: argparse.Namespace) -> list[str]:
    interp = Interpreter(max_expansions=args.max_expansions)
    if args.prelude is not None:
        interp.eval_prelude(args.prelude.read_text())
    for form in args.define:
        interp.define(form)

    lines: list[str] = []
    for expr in args.expressions:
        match args.mode:
            case "eval":
                lines.append(format_value(interp.evaluate(expr)))
            case "explain":
                lines.extend(interp.explain_step_by_step(expr))
            case "expand":
                lines.append(format_value(interp.expand(expr)))
            case "trace":
                lines.append(expr)
                lines.extend(format_value(step) for step in interp.expand_to_end(expr))
    return lines


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or get_log_level()).upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        lines = run(args)
    except (StepwiseError, OSError) as e:
        logger.debug("failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
