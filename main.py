"""主程序入口 - 单个表达式求值、批量求值和示例"""
import argparse
import logging
import sys

import pandas as pd

from config.config import CLI_CONFIG, DEMO_EXPRESSIONS, validate_config
from core import ExpressionError, format_tokens
from data.data_loader import load_bindings
from engine import ExpressionEvaluator

logger = logging.getLogger(__name__)


def parse_variable(text):
    """'name=value' -> (name, float)"""
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {text!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid value for {name}: {value!r}") from None


def run_demo(evaluator):
    for expression, variables in DEMO_EXPRESSIONS:
        try:
            result = evaluator.evaluate(expression, variables)
            print(f"{expression} {variables} = {result}")
        except ExpressionError as e:
            print(f"{expression} {variables} -> {type(e).__name__}: {e}")


def run_single(evaluator, args):
    variables = dict(args.var or [])
    if args.show_postfix:
        print(format_tokens(evaluator.to_postfix(args.expression, variables)))
    print(evaluator.evaluate(args.expression, variables))


def run_batch(evaluator, args):
    frame = load_bindings(args.data_path)
    results = evaluator.evaluate_frame(args.expression, frame, errors=args.errors)
    logger.info(f"Evaluated {len(results)} rows, {int(results.isna().sum())} NaN")
    if args.output_path:
        results.to_frame('result').to_csv(args.output_path)
        logger.info(f"Results saved to {args.output_path}")
    else:
        print(results.to_string())


def main(args):
    validate_config()
    evaluator = ExpressionEvaluator()

    if args.demo:
        run_demo(evaluator)
        return 0

    try:
        if args.data_path:
            run_batch(evaluator, args)
        else:
            run_single(evaluator, args)
    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except (FileNotFoundError, pd.errors.EmptyDataError) as e:
        logger.error(str(e))
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate infix arithmetic expressions")
    parser.add_argument(
        "--expression",
        type=str,
        help="Infix expression; use --expression=EXPR when it starts with '-', e.g. --expression='-10+x^2-5*x+(12/2)'"
    )
    parser.add_argument(
        "--var",
        type=parse_variable,
        action="append",
        metavar="NAME=VALUE",
        help="Variable binding, repeatable; substituted in the given order"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) sequence before the result"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="CSV of variable bindings; evaluates the expression once per row"
    )
    parser.add_argument(
        "--errors",
        choices=["raise", "coerce"],
        default=CLI_CONFIG["errors"],
        help="Batch mode: stop at the first failing row or record it as NaN"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Batch mode: save results to this CSV instead of printing them"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Evaluate the built-in sample expressions"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG["log_level"],
        help="Logging level (default: %(default)s)"
    )
    return parser


if __name__ == "__main__":
    parser = build_parser()
    args = parser.parse_args()
    if not args.demo and not args.expression:
        parser.error("--expression is required unless --demo is given")

    logging.basicConfig(
        level=args.log_level.upper(),
        format=CLI_CONFIG["log_format"]
    )
    sys.exit(main(args))
