"""AST node types.

Two variants:

  - :class:`Leaf`: ``imm`` (immediate value) or ``arg`` (N-th declared
    parameter, 0-indexed), one non-negative payload each
  - :class:`BinOp`: operator ``+ - * /`` with exclusively owned children

Nodes compare structurally and print in a compact prefix form::

    div(add(arg 0, arg 1), imm 2)
"""

from .errors import RuntimeFault
from .words import apply_op, check_words

_OP_NAMES = {'+': 'add', '-': 'sub', '*': 'mul', '/': 'div'}


class Leaf:
    """Immediate value or argument reference."""
    __slots__ = ('kind', 'value')

    def __init__(self, kind, value):
        if kind not in ('imm', 'arg'):
            raise ValueError(f"Unknown leaf kind '{kind}'")
        self.kind = kind
        self.value = value

    is_leaf = True

    @property
    def is_imm(self):
        return self.kind == 'imm'

    def __eq__(self, other):
        return (isinstance(other, Leaf)
                and self.kind == other.kind and self.value == other.value)

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"{self.kind} {self.value}"


class BinOp:
    """Binary operation node."""
    __slots__ = ('op', 'left', 'right')

    def __init__(self, op, left, right):
        if op not in _OP_NAMES:
            raise ValueError(f"Unknown operator '{op}'")
        self.op = op
        self.left = left
        self.right = right

    is_leaf = False
    is_imm = False

    def __eq__(self, other):
        return (isinstance(other, BinOp) and self.op == other.op
                and self.left == other.left and self.right == other.right)

    def __hash__(self):
        return hash((self.op, self.left, self.right))

    def __repr__(self):
        return f"{_OP_NAMES[self.op]}({self.left!r}, {self.right!r})"


# ── Builders ──────────────────────────────────────────────────────────

def imm(n): return Leaf('imm', n)
def arg(n): return Leaf('arg', n)
def add(a, b): return BinOp('+', a, b)
def sub(a, b): return BinOp('-', a, b)
def mul(a, b): return BinOp('*', a, b)
def div(a, b): return BinOp('/', a, b)


# ── Direct evaluation ─────────────────────────────────────────────────

def evaluate(node, args):
    """Evaluate *node* against an argument vector using word arithmetic.

    Faults mirror the machine: an out-of-range argument index or a division
    by zero raises :class:`RuntimeFault`, an out-of-range result raises
    :class:`WordOverflowError`.
    """
    return _eval(node, check_words(args))


def _eval(node, argv):
    if node.is_leaf:
        if node.kind == 'imm':
            return node.value
        if node.value >= len(argv):
            raise RuntimeFault(
                f"Argument {node.value} out of range ({len(argv)} given)")
        return argv[node.value]
    a = _eval(node.left, argv)
    b = _eval(node.right, argv)
    try:
        return apply_op(node.op, a, b)
    except ZeroDivisionError:
        raise RuntimeFault(f"Division by zero ({a} / 0)")

