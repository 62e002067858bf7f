"""Error types for tiny-compiler."""


class TinyCompilerError(Exception):
    """Base error for tiny-compiler."""
    pass


class LexicalError(TinyCompilerError):
    """Source text contains a character outside the token vocabulary."""
    pass


class ParseError(TinyCompilerError):
    """Token stream does not match the grammar (or names an unknown parameter)."""
    pass


class WordOverflowError(TinyCompilerError, OverflowError):
    """A literal or an arithmetic result does not fit in a machine word."""
    pass


class RuntimeFault(TinyCompilerError):
    """The target machine cannot execute an instruction."""
    pass
