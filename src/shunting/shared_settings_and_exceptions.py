"""

Some settings and exceptions that are shared between several modules.

"""

__all__ = ["DEFAULT_ELEMENT_SEPARATOR", "DEFAULT_STATEMENT_SEPARATOR",
           "END_OF_TEXT", "ShuntingBaseException", "ParserException",
           "ErrorInParsedLanguage", "ImpossibleParserState"]

# These should stay strings because they are matched against the parsed text.
DEFAULT_ELEMENT_SEPARATOR = ","
DEFAULT_STATEMENT_SEPARATOR = ";"

# Returned by lookahead past either end of the text, so no bounds checks are
# needed when peeking.
END_OF_TEXT = "\0"

#
# Exceptions.
#

class ShuntingBaseException(Exception):
    """The base exception for all package-defined exceptions.  All
    potentially-recoverable exceptions should be subclasses of this
    class (i.e., not a builtin Python exception)."""
    pass

class ParserException(ShuntingBaseException):
    """Base exception for exceptions in the parser modules.  Raised directly
    when the package itself is misused, such as passing a malformed postfix
    sequence to the `SyntaxTree` constructor."""
    pass

class ErrorInParsedLanguage(ParserException, ValueError):
    """Raised for syntax errors in the expression that is being parsed.  The
    message always ends in "at index N", and the offset N is also saved as the
    `index` attribute."""
    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index

class ImpossibleParserState(ParserException, RuntimeError):
    """Raised when the parser configuration drives the parse into a state
    that cannot be handled, such as an operator which is neither prefix,
    infix, nor postfix."""
    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index

