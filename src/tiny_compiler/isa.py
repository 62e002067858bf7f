"""Target machine instruction set.

    IM n    load the constant n into R0
    AR n    load the n-th input argument into R0
    SW      swap R0 and R1
    PU      push R0 onto the stack
    PO      pop the top of the stack into R0
    AD      R0 = R0 + R1
    SU      R0 = R0 - R1
    MU      R0 = R0 * R1
    DI      R0 = R0 / R1  (truncating)

Instructions travel as strings: a bare opcode, or an opcode followed by
one decimal operand.
"""

from .errors import RuntimeFault

OPERAND_OPS = ('IM', 'AR')
BARE_OPS = ('SW', 'PU', 'PO', 'AD', 'SU', 'MU', 'DI')
ALL_OPS = OPERAND_OPS + BARE_OPS

# Binary operator → arithmetic opcode
ARITH = {'+': 'AD', '-': 'SU', '*': 'MU', '/': 'DI'}
ARITH_OPS = {v: k for k, v in ARITH.items()}

COMMUTATIVE = ('+', '*')


def format_instr(opcode, operand=None):
    """Render one instruction: ``format_instr('IM', 7)`` → ``'IM 7'``."""
    if opcode in OPERAND_OPS:
        return f"{opcode} {operand}"
    return opcode


def decode(text):
    """Instruction string → ``(opcode, operand)``; operand is None if bare.

    Raises:
        RuntimeFault for unknown opcodes or malformed operands.
    """
    parts = text.split()
    if not parts or parts[0] not in ALL_OPS:
        raise RuntimeFault(f"Invalid instruction '{text}'")
    opcode = parts[0]

    if opcode in BARE_OPS:
        if len(parts) != 1:
            raise RuntimeFault(f"{opcode} takes no operand: '{text}'")
        return opcode, None

    if len(parts) != 2:
        raise RuntimeFault(f"{opcode} takes one operand: '{text}'")
    try:
        return opcode, int(parts[1], 10)
    except ValueError:
        raise RuntimeFault(f"Bad operand in '{text}'")
