"""Lexer: source text → flat token list.

Token types: 'ident', 'num', 'op', 'lbracket', 'rbracket', 'lparen', 'rparen'

Identifiers are runs of ASCII letters only (no digits, underscores or
accented letters).  Tokens are ``(type, text)`` tuples and carry no
position; their order is the only structure.  Literal text is kept as written, the parser converts
it to a word.
"""

import string

from .errors import LexicalError

_SINGLE = {
    '+': 'op', '-': 'op', '*': 'op', '/': 'op',
    '[': 'lbracket', ']': 'rbracket',
    '(': 'lparen', ')': 'rparen',
}


def tokenize(text):
    """Tokenize a function definition into ``(type, text)`` tuples.

    Raises:
        LexicalError on any character outside the vocabulary.
    """
    tokens = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]

        if c.isspace():
            i += 1
            continue

        # Identifier: maximal run of ASCII letters
        if c in string.ascii_letters:
            j = i
            while j < n and text[j] in string.ascii_letters:
                j += 1
            tokens.append(('ident', text[i:j]))
            i = j
            continue

        # Integer literal: maximal digit run
        if c in '0123456789':
            j = i
            while j < n and text[j] in '0123456789':
                j += 1
            tokens.append(('num', text[i:j]))
            i = j
            continue

        if c in _SINGLE:
            tokens.append((_SINGLE[c], c))
            i += 1
            continue

        raise LexicalError(f"Unexpected character '{c}' at column {i + 1}")

    return tokens


def token_texts(tokens):
    """Token list → list of token strings (for display and tests)."""
    return [t for _, t in tokens]
