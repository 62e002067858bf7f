"""tinyc — compile arithmetic function definitions for the stack machine.

Usage:
    tinyc "[ x y ] 6 * x + 5 * y"              Print instructions
    tinyc "[ x y ] 6 * x + 5 * y" -r 4 2       Compile and run → 34
    tinyc prog.txt -f -o prog.asm              Source from file, write output
    tinyc "[ x ] (x + 1) * 2" -r 3 -t          Trace every machine step
"""

import argparse
import sys

from . import __version__
from .errors import TinyCompilerError
from .compiler import Compiler
from .lexer import tokenize, token_texts
from .parser import parse
from .machine import Machine


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='tinyc',
        description='Compile [ params ] expression definitions to '
                    'two-register stack machine code.',
        epilog="""Examples:
  tinyc "[ x ] x + 2*5"                IM 10 / SW / AR 0 / AD
  tinyc "[ x ] x + 2*5" --no-fold      Skip constant folding
  tinyc "[ x y ] x / y" -r 7 2         Run with x=7, y=2 → 3""")

    parser.add_argument('source',
                        help='Function definition, or a file path with -f')
    parser.add_argument('-f', '--file', action='store_true',
                        help='Read the definition from the file SOURCE')
    parser.add_argument('-o', '--output', default=None,
                        help='Write instructions to this file instead of stdout')
    parser.add_argument('--no-fold', action='store_true',
                        help='Disable constant folding')
    parser.add_argument('-r', '--run', type=int, nargs='*', default=None,
                        metavar='ARG',
                        help='Execute the code with these integer arguments')
    parser.add_argument('-t', '--trace', action='store_true',
                        help='Print machine state after every step (with -r)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show tokens and syntax trees')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    if args.trace and args.run is None:
        parser.error("--trace requires --run")

    try:
        return run(args)
    except TinyCompilerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


def _read_source(args):
    if not args.file:
        return args.source
    try:
        with open(args.source, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise TinyCompilerError(f"Cannot read '{args.source}': {e.strerror}")


def _print_step(instr, r0, r1, stack):
    stack_str = ' '.join(str(v) for v in stack) or '-'
    print(f"  {instr:<8} R0={r0:<11} R1={r1:<11} stack: {stack_str}")


def run(args) -> int:
    """Execute the compile (and optional run) pipeline."""
    source = _read_source(args)
    compiler = Compiler()

    tokens = tokenize(source)
    if args.verbose:
        print(f"Tokens: {' '.join(token_texts(tokens))}")

    ast = parse(tokens)
    if args.verbose:
        print(f"AST:    {ast!r}")

    if not args.no_fold:
        ast = compiler.pass2(ast)
        if args.verbose:
            print(f"Folded: {ast!r}")

    asm = compiler.pass3(ast)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write('\n'.join(asm) + '\n')
        print(f"Wrote: {args.output} ({len(asm)} instructions)")
    else:
        for instr in asm:
            print(instr)

    if args.run is not None:
        machine = Machine(trace=_print_step if args.trace else None)
        if args.trace:
            print("\nTrace:")
        result = machine.run(asm, args.run)
        print(f"Result: {result}")

    return 0
