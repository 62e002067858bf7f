"""Three-pass compiler driver.

  1. **Parse** (``lexer.py``, ``parser.py``): text → tokens → AST
  2. **Fold** (``folder.py``): AST → AST with constants collapsed
  3. **Generate** (``codegen.py``): AST → instruction list

Each pass runs to completion before the next one starts; an error in any
pass aborts the compile with no output.
"""

from .codegen import generate
from .folder import fold
from .lexer import tokenize
from .parser import parse


class Compiler:
    """Stateless pipeline; one instance can compile any number of programs."""

    def pass1(self, program):
        """Source text → AST."""
        return parse(tokenize(program))

    def pass2(self, ast):
        """AST → folded AST."""
        return fold(ast)

    def pass3(self, ast):
        """AST → instruction strings."""
        return generate(ast)

    def compile(self, program, optimize=True):
        ast = self.pass1(program)
        if optimize:
            ast = self.pass2(ast)
        return self.pass3(ast)


def compile_program(program, optimize=True):
    """Compile a ``[ params ] expression`` definition to instructions."""
    return Compiler().compile(program, optimize)
