"""主程序入口 - 后缀表达式求值命令行"""
import argparse
import logging
import sys

from config.config import EVALUATOR_CONFIG, CACHE_CONFIG, LOGGING_CONFIG, validate_config
from calculator import ExpressionEvaluator
from rpn import PostfixError

logger = logging.getLogger(__name__)


def format_result(value):
    """15位有效数字，去掉多余的尾零"""
    return f"{value:.15g}"


def _iter_expressions(args, stream):
    if args.expression is not None:
        yield args.expression
        return
    for line in stream:
        # 每一行都是独立的一次求值
        if line.strip():
            yield line.rstrip("\n")


def run(args, stdin=None, stdout=None, stderr=None):
    """逐个求值并输出结果，全部成功返回0，否则返回1"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    evaluator = ExpressionEvaluator(
        cache_size=CACHE_CONFIG['cache_size'],
        strict_decimal=not args.loose_decimal,
        strict_arithmetic=not args.ieee,
        max_expression_length=EVALUATOR_CONFIG['max_expression_length'],
        max_tokens=EVALUATOR_CONFIG['max_tokens'],
    )

    failures = 0
    total = 0
    for expression in _iter_expressions(args, stdin):
        total += 1
        try:
            if args.trace:
                result, steps = evaluator.evaluate_with_trace(expression)
                for step in steps:
                    print(f"  {step}", file=stdout)
            else:
                result = evaluator.evaluate_or_raise(expression)
        except PostfixError as e:
            failures += 1
            print(f"error: {e}", file=stderr)
            continue
        print(format_result(result), file=stdout)

    logger.info(f"Evaluated {total} expression(s), {failures} failed")
    return 1 if failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Postfix (RPN) expression evaluator")

    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Whitespace-separated postfix expression, e.g. '3 4 +'. "
             "Reads one expression per line from stdin when omitted"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every push and operator application"
    )
    parser.add_argument(
        "--loose_decimal",
        action="store_true",
        help="Accept operands with several decimal points (parsed up to the second one)"
    )
    parser.add_argument(
        "--ieee",
        action="store_true",
        help="Return inf/nan for division by zero and domain errors instead of failing"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
