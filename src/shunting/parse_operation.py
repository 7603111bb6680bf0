"""

The `ParseOperation` class, which does the actual work of parsing one
expression with the shunting-yard algorithm.

A new `ParseOperation` is created by the `ExpressionParser` for every call to
its parse methods, so all the mutable state of a parse lives here and is
never shared:

* `stream` -- the `TextStream` cursor into the expression,
* `stack` -- the operator stack, holding operators and open groups,
* `output` -- the list of tokens in postfix order, which is the result,
* `infix` -- the state flag, described below.

The state flag
==============

The parser is always expecting one of two things next.  If `infix` is false
(as at the start) a "noun" is expected: a literal, a variable, a prefix
operator, or the opener of a group.  If `infix` is true a value was just read,
so an infix or postfix operator, an element separator, or a group terminator
is expected.  This is how the same symbol can have different meanings, for
example `-` is negation when `infix` is false and subtraction when it is true,
and `(` is a parenthesized subexpression when false but a call when true.
Literals are only recognized when `infix` is false, which also keeps a quote
character free to be a postfix operator (transpose) after a value.

Customizing
===========

Each kind of token is recognized by its own `parse_xxx` method, each of which
returns `None` (or zero, for lengths) when the next token is not of that kind.
These can be overridden in a subclass to change identifier rules or literal
handling without touching the main loop.  Pass the subclass as the
`parse_operation_factory` of an `ExpressionParser`.

"""

if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_parse_operation.py",
                              "../../test/test_expression_parser.py",
                              ], pytest_args="-v")

import logging

from .text_stream import TextStream
from .tokens import Variable, Function
from .helpers import is_operator, is_group, is_matching_group
from .syntax_tree import SyntaxTree
from .shared_settings_and_exceptions import ParserException

__all__ = ["ParseOperation"]

logger = logging.getLogger(__name__)


class ParseOperation:
    """The state and logic of a single parse."""

    def __init__(self, parser, expression):
        """The `parser` is the `ExpressionParser` holding the configuration and
        `expression` is the text to parse."""
        self.parser = parser
        self.expression = expression

        self.stream = TextStream(expression)
        self.stack = []
        self.output = []
        self.infix = False
        self.literal_chain = parser.literal_chain

    def parse_postfix(self):
        """Parse the expression into a list of tokens in postfix (reverse
        Polish) order.  Raises `ErrorInParsedLanguage` on a syntax error."""
        while True:
            self.parse_whitespace()

            # Stop if there are no more tokens to be read.
            if self.stream.at_end():
                break

            literal = self.parse_literal()
            if literal is not None:
                self.output.append(literal)
                self.infix = True
                continue

            if self.parse_element_separator() is not None:
                self._handle_element_separator()
                continue

            if self.parse_statement_separator() is not None:
                # Flush the stack and begin a new statement.
                self._flush_stack()
                self.infix = False
                continue

            o1 = self.parse_operator()
            if o1 is not None:
                if is_group(o1) and self.infix:
                    # A group opener directly after a value, so there is an
                    # implicit function application between them.
                    logger.debug("Implicit function before %r at index %d.",
                                 o1.symbol, self.stream.get())
                    self._handle_operator(Function(o1.precedence))
                self._handle_operator(o1)
                continue

            group = self.parse_group_terminator()
            if group is not None:
                self._handle_group_terminator(group)
                continue

            variable = self.parse_variable()
            if variable is not None:
                self.output.append(variable)
                self.infix = True
                continue

            self.stream.die("Invalid character")

        self._flush_stack()
        return self.output

    def parse_tree(self):
        """Parse the expression into a `SyntaxTree`.  The expression must hold
        exactly one complete statement; anything else is reported as an
        `ErrorInParsedLanguage` located at the end of the text."""
        output = self.parse_postfix()
        try:
            return SyntaxTree(output)
        except ParserException as e:
            self.stream.die(str(e).rstrip("."))

    #
    # Recognizers for each kind of token.  These can be overridden.
    #

    def current_char(self):
        return self.stream.ch()

    def future_char(self, offset):
        return self.stream.ch(offset)

    def parse_whitespace(self):
        """Skip past any whitespace to the next interesting character."""
        while self.current_char().isspace():
            self.stream.inc()

    def parse_literal(self):
        """Try to parse a literal with the parser's literal chain.  Returns the
        value, or `None` if the next token is not a literal."""
        # Only accept a literal in the appropriate context.  This avoids
        # confusing e.g. the unary and binary minus operators, or a quoted
        # string with a quote operator.
        if self.infix:
            return None
        return self.literal_chain.parse(self.expression, self.stream)

    def parse_variable(self):
        """Try to parse a variable.  Returns a `Variable` or `None`."""
        length = self.parse_identifier()
        if length == 0:
            return None
        return Variable(self.parse_token(length))

    def parse_identifier(self):
        """Try to parse an identifier, using the Python rules for which
        characters can start and continue one.  Returns the length of the
        identifier, or zero if the next token is not one."""
        # Only accept an identifier in the appropriate context.
        if self.infix:
            return 0
        if not self.current_char().isidentifier():
            return 0
        length = 1
        while ("_" + self.future_char(length)).isidentifier():
            length += 1
        return length

    def parse_operator(self):
        """Try to parse an operator.  Returns the catalogue operator, or `None`
        if the next token is not an operator valid in the current context."""
        return self.parser.operator_table.match_operator(self.stream, self.infix)

    def parse_group_terminator(self):
        """Try to parse a group terminator.  Returns the catalogue group which
        it terminates, or `None`."""
        return self.parser.operator_table.match_terminator(self.stream, self.infix)

    def parse_element_separator(self):
        """Try to parse an element separator (a comma, by default).  Returns
        the separator symbol or `None`."""
        # Only accept an element separator in the appropriate context.
        if not self.infix:
            return None
        return self.parse_chars(self.parser.element_separator)

    def parse_statement_separator(self):
        """Try to parse a statement separator (a semicolon, by default)."""
        return self.parse_chars(self.parser.statement_separator)

    def parse_chars(self, chars):
        """Parse the string `chars` if it comes next, returning it.  Otherwise
        return `None`."""
        if not chars or not self.stream.startswith(chars):
            return None
        self.stream.inc(len(chars))
        return chars

    def parse_token(self, length):
        """Consume and return the next `length` characters."""
        offset = self.stream.get()
        token = self.expression[offset:offset + length]
        self.stream.inc(length)
        return token

    #
    # Stack manipulation.
    #

    def _handle_operator(self, o1):
        p1 = o1.precedence
        # While there is an operator o2 other than a group on top of the
        # stack, with o1 binding less tightly, pop o2 to the output.
        while self.stack and is_operator(self.stack[-1]) and not is_group(self.stack[-1]):
            p2 = self.stack[-1].precedence
            if (o1.is_left_associative() and p1 <= p2
                    or o1.is_right_associative() and p1 < p2):
                self.output.append(self.stack.pop())
            else:
                break
        self.stack.append(o1.instance())

        # Prefix is checked first, so a unary operator of either
        # associativity always leaves a value expected next.
        if o1.is_prefix() or o1.is_infix():
            self.infix = False
        elif o1.is_postfix():
            self.infix = True
        else:
            self.stream.fail("Impenetrable operator '{0}'".format(o1))

    def _handle_element_separator(self):
        # Pop to the output until the enclosing group is found.
        while True:
            if not self.stack:
                self.stream.die("Misplaced separator or mismatched groups")
            if is_group(self.stack[-1]):
                # Count the completed element in the group's arity.
                self.stack[-1].inc_arity()
                break
            self.output.append(self.stack.pop())
        self.infix = False

    def _handle_group_terminator(self, group):
        # Pop to the output until the matching group is found.
        while True:
            if not self.stack:
                self.stream.die("Mismatched group terminator '{0}'"
                                .format(group.terminator))
            if is_matching_group(self.stack[-1], group):
                # A value just before the terminator is the last element.
                if self.infix:
                    self.stack[-1].inc_arity()
                self.output.append(self.stack.pop())
                break
            self.output.append(self.stack.pop())
        self.infix = True

    def _flush_stack(self):
        while self.stack:
            token = self.stack.pop()
            # There should not be any groups left.
            if is_group(token):
                self.stream.die("Mismatched groups")
            self.output.append(token)

    def __str__(self):
        """Show the expression with a caret under the current position."""
        return str(self.stream)

