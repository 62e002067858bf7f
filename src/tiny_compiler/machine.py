"""Target machine model used to check generated code.

State: two word registers, R0 (primary) and R1 (secondary), and a LIFO
stack.  Each run starts from ``R0 = R1 = 0`` and an empty stack and
executes the program in textual order; there are no jumps.

Faults (:class:`RuntimeFault`): argument index out of range, ``PO`` on an
empty stack, division by zero, invalid instruction.  Arithmetic results
outside the word range raise :class:`WordOverflowError`, like folding does.
"""

from .errors import RuntimeFault
from .isa import ARITH_OPS, decode
from .words import apply_op, check_word, check_words


class Machine:
    """Two-register, one-stack interpreter."""

    def __init__(self, trace=None):
        self._trace = trace     # callback(instr, r0, r1, stack) after each step
        self.reset()

    def reset(self):
        self.r0 = 0
        self.r1 = 0
        self.stack = []

    def run(self, program, args=()):
        """Execute *program* against *args*, return the final R0."""
        self.reset()
        argv = check_words(args)
        for instr in program:
            self.step(instr, argv)
            if self._trace:
                self._trace(instr, self.r0, self.r1, tuple(self.stack))
        return self.r0

    def step(self, instr, argv):
        opcode, operand = decode(instr)

        if opcode == 'IM':
            self.r0 = check_word(operand, 'immediate')
        elif opcode == 'AR':
            if not 0 <= operand < len(argv):
                raise RuntimeFault(
                    f"AR {operand}: argument index out of range "
                    f"({len(argv)} argument(s) given)")
            self.r0 = argv[operand]
        elif opcode == 'SW':
            self.r0, self.r1 = self.r1, self.r0
        elif opcode == 'PU':
            self.stack.append(self.r0)
        elif opcode == 'PO':
            if not self.stack:
                raise RuntimeFault("PO: stack is empty")
            self.r0 = self.stack.pop()
        else:
            try:
                self.r0 = apply_op(ARITH_OPS[opcode], self.r0, self.r1)
            except ZeroDivisionError:
                raise RuntimeFault(f"DI: division by zero ({self.r0} / 0)")


def simulate(program, args=()):
    """Run *program* on a fresh machine and return R0."""
    return Machine().run(program, args)
