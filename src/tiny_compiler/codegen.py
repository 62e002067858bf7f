"""Pass 3: AST → instruction list.

Every arithmetic instruction computes ``R0 = R0 op R1``, so when it runs
R0 must hold the left operand and R1 the right one.  Only R0 can be
loaded, and computing a subtree clobbers both registers, so the emission
strategy depends on the shape of the two children:

    left    right   emitted
    ──────  ──────  ────────────────────────────────────────────
    leaf    leaf    right  SW  left              op
    leaf    binary  right  SW  left              op
    binary  leaf    left   SW  right  SW¹        op
    binary  binary  left   PU  right  SW  PO     op

    ¹ only for the non-commutative ``-`` and ``/``

Loading a leaf only writes R0, so a leaf can always be computed last
without disturbing the value parked in R1.  When both sides are trees the
first result is kept on the stack instead.
"""

from .isa import ARITH, COMMUTATIVE, format_instr


def generate(node):
    """Compile an AST into a list of instruction strings."""
    asm = []
    _emit(node, asm)
    return asm


def _emit(node, asm):
    if node.is_leaf:
        _emit_leaf(node, asm)
        return

    shape = (_shape(node.left), _shape(node.right))
    _STRATEGIES[shape](node, asm)
    asm.append(ARITH[node.op])


def _shape(node):
    return 'leaf' if node.is_leaf else 'binary'


def _emit_leaf(node, asm):
    opcode = 'IM' if node.kind == 'imm' else 'AR'
    asm.append(format_instr(opcode, node.value))


# ── Operand strategies (leave left in R0, right in R1) ───────────────

def _right_then_left(node, asm):
    _emit(node.right, asm)
    asm.append('SW')
    _emit_leaf(node.left, asm)


def _left_then_right_leaf(node, asm):
    _emit(node.left, asm)
    asm.append('SW')
    _emit_leaf(node.right, asm)
    if node.op not in COMMUTATIVE:
        asm.append('SW')


def _left_via_stack(node, asm):
    _emit(node.left, asm)
    asm.append('PU')
    _emit(node.right, asm)
    asm.append('SW')
    asm.append('PO')


_STRATEGIES = {
    ('leaf', 'leaf'): _right_then_left,
    ('leaf', 'binary'): _right_then_left,
    ('binary', 'leaf'): _left_then_right_leaf,
    ('binary', 'binary'): _left_via_stack,
}
