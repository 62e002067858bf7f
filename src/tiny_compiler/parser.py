"""Pass 1b: token list → abstract syntax tree.

Grammar (left-associative, ``* /`` bind tighter than ``+ -``)::

    function   ::= '[' arg-list ']' expression
    arg-list   ::= ε | identifier arg-list
    expression ::= term (('+' | '-') term)*
    term       ::= factor (('*' | '/') factor)*
    factor     ::= integer | identifier | '(' expression ')'

The parameter table is built from the bracketed list, then only read while
the body is parsed.  The whole token list must be consumed.
"""

from .errors import ParseError
from .lexer import tokenize
from .nodes import Leaf, BinOp
from .words import check_word


def parse(tokens):
    """Parse a token list into an AST.

    Raises:
        ParseError on grammar violations, undeclared or duplicate
        parameters, and trailing tokens.
        WordOverflowError when a literal does not fit in a word.
    """
    p = _Parser(tokens)
    p.params()
    node = p.expression()
    if not p.at_end():
        typ, val = p.peek()
        raise ParseError(f"Unexpected trailing token '{val}' ({typ})")
    return node


def parse_source(text):
    """Tokenize and parse *text*."""
    return parse(tokenize(text))


class _Parser:
    """Internal parse state."""

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        self.table = {}             # {param name: index}

    # ── Token access ──────────────────────────────────────────────────

    def at_end(self):
        return self.pos >= len(self.tokens)

    def peek(self):
        if self.at_end():
            return None, None
        return self.tokens[self.pos]

    def take(self, what):
        if self.at_end():
            raise ParseError(f"Unexpected end of input, expected {what}")
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def expect(self, typ, what):
        got, val = self.take(what)
        if got != typ:
            raise ParseError(f"Expected {what}, got '{val}'")
        return val

    # ── Grammar rules ─────────────────────────────────────────────────

    def params(self):
        self.expect('lbracket', "'[' opening the parameter list")
        while True:
            typ, val = self.take("']' closing the parameter list")
            if typ == 'rbracket':
                return
            if typ != 'ident':
                raise ParseError(
                    f"Expected parameter name or ']', got '{val}'")
            if val in self.table:
                raise ParseError(f"Duplicate parameter '{val}'")
            self.table[val] = len(self.table)

    def expression(self):
        left = self.term()
        while self.peek() in (('op', '+'), ('op', '-')):
            _, op = self.take('operator')
            left = BinOp(op, left, self.term())
        return left

    def term(self):
        left = self.factor()
        while self.peek() in (('op', '*'), ('op', '/')):
            _, op = self.take('operator')
            left = BinOp(op, left, self.factor())
        return left

    def factor(self):
        typ, val = self.take('a number, a parameter or \'(\'')

        if typ == 'num':
            return Leaf('imm', check_word(val, 'literal'))

        if typ == 'ident':
            if val not in self.table:
                raise ParseError(f"Undeclared parameter '{val}'")
            return Leaf('arg', self.table[val])

        if typ == 'lparen':
            node = self.expression()
            self.expect('rparen', "')'")
            return node

        raise ParseError(f"Unexpected token '{val}' ({typ})")
