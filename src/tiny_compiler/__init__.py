"""tiny-compiler: arithmetic function definitions → two-register stack code.

Supports:
  - ``[ x y ] 6 * x + 5 * y`` style definitions (+ - * /, parentheses)
  - Constant folding of all-immediate subexpressions
  - Code for a two-register, one-stack machine (IM AR SW PU PO AD SU MU DI)
  - A machine model to execute and verify generated code

Usage as library:
    from tiny_compiler import compile_program, simulate
    asm = compile_program('[ x ] x + 2*5')    # ['IM 10', 'SW', 'AR 0', 'AD']
    simulate(asm, [7])                        # 17
"""

__version__ = '1.0.0'

from .compiler import Compiler, compile_program
from .machine import Machine, simulate
from .errors import (TinyCompilerError, LexicalError, ParseError,
                     WordOverflowError, RuntimeFault)
