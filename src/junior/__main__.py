#!/usr/bin/env python3
"""
CLI for the Junior calculator.

Usage:
    python -m junior [repl] [--prompt PROMPT] [--ast] [--no-banner]
    python -m junior eval EXPR [EXPR ...]
    python -m junior ast EXPR
    python -m junior ops

Examples:
    # Start the interactive prompt
    python -m junior

    # Evaluate expressions without the prompt
    python -m junior eval "+ 1 2" "(/ 10 (- 5 5))"

    # Show the parse tree the reader receives
    python -m junior ast "(* 2 (+ 3 4))"

The default prompt can be changed with the JUNIOR_PROMPT environment
variable.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO


BANNER = "\n\tJunior- Version 0.0.1\n"
EXIT_HINT = "Press ctrl+C to Exit\n"
DEFAULT_PROMPT = ">> "


@dataclass
class ReplConfig:
    """Settings for the interactive loop."""
    prompt: str = DEFAULT_PROMPT
    show_ast: bool = False
    banner: bool = True


def eval_line(line: str, show_ast: bool = False, out: TextIO = None, err: TextIO = None) -> int:
    """
    Evaluate one line of input and print the result.

    Returns 0 when the line evaluated to a non-error value, 1 otherwise.
    """
    from . import parse_source, read, evaluate, print_ast, print_value, JuniorError, Error

    out = out or sys.stdout
    err = err or sys.stderr

    try:
        tree = parse_source(line, "<stdin>")
    except JuniorError as e:
        print(f"Error: {e}", file=err)
        return 1

    if show_ast:
        print_ast(tree, file=out)

    result = evaluate(read(tree))
    print_value(result, file=out)
    return 1 if isinstance(result, Error) else 0


def _enable_line_editing() -> None:
    """Turn on line editing and history for input() where available."""
    try:
        import readline  # noqa: F401
    except ImportError:
        logging.getLogger(__name__).debug("readline not available, line editing disabled")


def run_repl(config: ReplConfig, read_line: Callable[[str], str] = input,
             out: TextIO = None, err: TextIO = None) -> int:
    """Read, evaluate and print lines until end of input or interrupt."""
    out = out or sys.stdout

    if config.banner:
        print(BANNER, file=out)
        print(EXIT_HINT, file=out)

    while True:
        try:
            line = read_line(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            return 0

        if not line.strip():
            continue

        eval_line(line, show_ast=config.show_ast, out=out, err=err)


def cmd_repl(args) -> int:
    """Run the interactive prompt."""
    config = ReplConfig(
        prompt=args.prompt if args.prompt is not None else os.environ.get('JUNIOR_PROMPT', DEFAULT_PROMPT),
        show_ast=args.ast,
        banner=not args.no_banner,
    )
    _enable_line_editing()
    return run_repl(config)


def cmd_eval(args) -> int:
    """Evaluate each expression given on the command line."""
    status = 0
    for expr in args.expressions:
        if eval_line(expr, show_ast=args.ast) != 0:
            status = 1
    return status


def cmd_ast(args) -> int:
    """Print the parse tree of an expression."""
    from . import parse_source, print_ast, JuniorError

    try:
        tree = parse_source(args.expression, "<argv>")
    except JuniorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_ast(tree)
    return 0


def cmd_ops(args) -> int:
    """List the builtin operators."""
    from . import get_builtin_registry

    for op in get_builtin_registry().list_operators():
        print(f"  {op.name}  {op.doc}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='junior',
        description='Junior S-expression calculator',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action')

    # repl command
    repl_parser = subparsers.add_parser('repl', help='Start the interactive prompt (default)')
    repl_parser.add_argument('--prompt', default=None,
                             help='Prompt string (default: $JUNIOR_PROMPT or ">> ")')
    repl_parser.add_argument('--ast', action='store_true',
                             help='Print the parse tree of each line')
    repl_parser.add_argument('--no-banner', action='store_true',
                             help='Do not print the startup banner')

    # eval command
    eval_parser = subparsers.add_parser('eval', help='Evaluate expressions and print the results')
    eval_parser.add_argument('expressions', nargs='+', metavar='EXPR', help='Expression to evaluate')
    eval_parser.add_argument('--ast', action='store_true',
                             help='Print the parse tree before each result')

    # ast command
    ast_parser = subparsers.add_parser('ast', help='Print the parse tree of an expression')
    ast_parser.add_argument('expression', metavar='EXPR', help='Expression to parse')

    # ops command
    subparsers.add_parser('ops', help='List builtin operators')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    # No subcommand: interactive prompt with default settings
    if args.action is None:
        args.action = 'repl'
        args.prompt = None
        args.ast = False
        args.no_banner = False

    if args.action == 'repl':
        return cmd_repl(args)
    elif args.action == 'eval':
        return cmd_eval(args)
    elif args.action == 'ast':
        return cmd_ast(args)
    elif args.action == 'ops':
        return cmd_ops(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
