import argparse
import logging
import sys
from typing import Iterable, Optional

from parsemaths import __version__
from parsemaths.parser import ParserError, parse
from parsemaths.runtime import CalcRuntimeError, evaluate
from parsemaths.tokenizer import TokenizerError, strip_whitespace

logger = logging.getLogger("parsemaths.repl")

BANNER = [
    "Hello! Welcome to Arithmetic Expression Evaluator!",
    "You can calculate the value of expressions such as: 2*3+4*(4-5)+2^3/4.",
    "Allowed numbers: positive, negative and decimals.",
    "Supported operations: Add, Subtract, Multiply, Divide, PowerOf(^).",
    "Enter your arithmetic expression below (q to quit):",
]
GOODBYE = "Thanks for using the Arithmetic Expression Evaluator!"


def run_line(line: str) -> bool:
    code = strip_whitespace(line)
    try:
        result = evaluate(parse(code))
    except (TokenizerError, ParserError, CalcRuntimeError) as e:
        logger.debug("Failed to evaluate %r", code, exc_info=True)
        print(e)
        print("Error in evaluating expression. Please enter valid expression\n")
        return False
    except RecursionError:
        logger.debug("Failed to evaluate %r", code, exc_info=True)
        print("Expression is nested too deeply\n")
        return False
    print(f"The computed number is {result}\n")
    return True


def run_session(lines: Iterable[str]) -> None:
    for line in lines:
        if "q" in line:
            print(GOODBYE)
            return
        run_line(line)


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return


def main(argv: Optional[list[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(prog="parsemaths", description="arithmetic expression evaluator")
    arg_parser.add_argument("expressions", nargs="*", help="evaluate these and exit instead of starting the REPL")
    arg_parser.add_argument("-q", "--quiet", action="store_true", help="don't print initial banner")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="log generated syntax trees")
    arg_parser.add_argument("--version", action="version", version=f"parsemaths {__version__}")
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.expressions:
        results = [run_line(code) for code in args.expressions]
        return 0 if all(results) else 1

    if not args.quiet:
        print("\n".join(BANNER))
    run_session(_stdin_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())
