"""Machine word and checked word arithmetic.

The target machine works on signed 32-bit words.  The Folder, the direct
AST evaluator and the machine all combine values through :func:`apply_op`,
so folding at compile time and executing at run time agree bit for bit:

  - results outside the word range raise :class:`WordOverflowError`
    (never wrap silently)
  - ``/`` truncates toward zero, like the machine's ``DI`` instruction
  - division by zero raises :class:`ZeroDivisionError`; callers decide
    how to report it
"""

import numpy as np

from .errors import WordOverflowError

WORD = np.int32
WORD_BITS = np.iinfo(WORD).bits
INT_MIN = int(np.iinfo(WORD).min)
INT_MAX = int(np.iinfo(WORD).max)

OPERATORS = ('+', '-', '*', '/')


def check_word(value, what='value'):
    """Return *value* as int, or raise if it does not fit in a word."""
    value = int(value)
    if not INT_MIN <= value <= INT_MAX:
        raise WordOverflowError(
            f"{what} {value} does not fit in a {WORD_BITS}-bit word "
            f"[{INT_MIN}, {INT_MAX}]")
    return value


def check_words(values, what='argument'):
    """Validate an integer vector, return it as a list of Python ints.

    Raises:
        TypeError unless *values* is a flat list, tuple or array of ints
        (``bool`` and floats are rejected, never truncated).
        WordOverflowError when an element does not fit in a word.
    """
    if not isinstance(values, (list, tuple, np.ndarray)):
        raise TypeError(f"{what}s must be a list, tuple or array of integers, "
                        f"got {type(values).__name__}")
    if any(isinstance(v, (bool, np.bool_)) for v in values):
        raise TypeError(f"{what}s must be integers, not bool")

    arr = np.asarray(values)
    if arr.ndim != 1:
        raise TypeError(f"{what}s must be a flat sequence of integers")
    if arr.size == 0:
        return []

    if arr.dtype == object:
        # Python ints too large for int64
        if not all(isinstance(v, (int, np.integer)) for v in arr):
            raise TypeError(f"{what}s must be integers")
        return [check_word(v, what) for v in arr]
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"{what}s must be integers, got {arr.dtype} values")

    bad = (arr < INT_MIN) | (arr > INT_MAX)
    if np.any(bad):
        check_word(arr[np.argmax(bad)], what)
    return arr.tolist()


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def apply_op(op: str, a: int, b: int) -> int:
    """Combine two words with a binary operator, checking the result range."""
    if   op == '+':  result = a + b
    elif op == '-':  result = a - b
    elif op == '*':  result = a * b
    elif op == '/':  result = trunc_div(a, b)
    else:
        raise ValueError(f"Unknown operator '{op}'")
    return check_word(result, f"result of {a} {op} {b}:")
