"""Pass 2: constant folding.

Bottom-up: children are folded first, then a binary node whose two
children are both immediates is replaced by one immediate holding the
result.  Argument leaves are never folded, so any subtree that reads a
parameter keeps its shape.  Folding a folded tree returns an equal tree.

The arithmetic is the machine's (:func:`words.apply_op`): overflow raises
:class:`WordOverflowError` exactly as it would at run time.  A division by
an immediate zero is left in place, so the machine reports it when the
code is executed.
"""

from .nodes import Leaf, BinOp
from .words import apply_op


def fold(node):
    """Return a new tree with every all-immediate subtree collapsed."""
    if node.is_leaf:
        return Leaf(node.kind, node.value)

    left = fold(node.left)
    right = fold(node.right)

    if left.is_imm and right.is_imm:
        if node.op == '/' and right.value == 0:
            return BinOp(node.op, left, right)
        return Leaf('imm', apply_op(node.op, left.value, right.value))

    return BinOp(node.op, left, right)
