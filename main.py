"""命令行入口 - 对一个表达式求值并打印结果"""
import argparse
import logging
import math
import sys

from config.config import CLI_CONFIG, validate_config
from ibex import ExpressionError
from formula import FormulaEvaluator
from formula.data_loader import load_dataset

logger = logging.getLogger(__name__)


def _setup_logging(level_name):
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format=CLI_CONFIG['log_format'],
        stream=sys.stderr
    )


def _parse_variables(assignments):
    """把 ['x=1', 'y=2.5'] 解析为 {'x': 1.0, 'y': 2.5}"""
    variables = {}
    for item in assignments or []:
        name, sep, value = item.partition('=')
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid variable assignment '{item}', expected NAME=VALUE")
        try:
            variables[name] = float(value)
        except ValueError:
            raise ValueError(f"Invalid value for variable '{name}': {value!r}") from None
    return variables


def format_result(value, precision=None):
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}g}"


def main(args):
    """
    Returns:
        进程退出码：0成功，1求值失败（或NaN结果）
    """
    try:
        variables = _parse_variables(args.var)
    except ValueError as e:
        logger.error(str(e))
        return 1

    evaluator = FormulaEvaluator(variables=variables)

    if args.csv:
        try:
            data = load_dataset(args.csv, index_column=args.index_column)
            results = evaluator.evaluate_frame(args.expression, data)
        except (ExpressionError, OSError, ValueError) as e:
            logger.error(f"Batch evaluation failed: {e}")
            return 1
        for value in results:
            print(format_result(value, args.precision))
        return 0

    try:
        result = evaluator.evaluate(args.expression)
    except ExpressionError as e:
        logger.error(f"Evaluation failed: {e}")
        return 1

    if math.isnan(result) and CLI_CONFIG['nan_is_failure']:
        logger.error(f"Expression {args.expression!r} evaluated to NaN")
        return 1

    print(format_result(result, args.precision))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate an arithmetic/boolean expression")

    parser.add_argument(
        "expression",
        type=str,
        nargs="?",
        help="Expression text, e.g. '2^3^2' or 'min(4, 7, 2)'"
    )
    parser.add_argument(
        "--var",
        action="append",
        metavar="NAME=VALUE",
        help="Define or override a variable (repeatable)"
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Evaluate the expression once per row of this CSV file; columns become variables"
    )
    parser.add_argument(
        "--index_column",
        type=str,
        default=None,
        help="Column of the CSV file to use as row index"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=CLI_CONFIG['precision'],
        help="Significant digits of the printed result (default: shortest exact repr)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG['log_level'],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli(argv=None):
    parser = build_parser()
    # 以 - 开头的表达式（如 -pi、--13.5）会被argparse当成未知选项
    args, extras = parser.parse_known_args(argv)
    if args.expression is None and len(extras) == 1:
        args.expression = extras[0]
    elif args.expression is None:
        parser.error("the following arguments are required: expression")
    elif extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    _setup_logging(args.log_level)
    validate_config()
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
