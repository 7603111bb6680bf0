"""

The `ExpressionParser` class, the main entry point of the package.

An `ExpressionParser` holds the configuration: the operator catalogue, the
element and statement separators, the chain of literal recognizers, and the
class (or factory function) used for each parse.  The configuration is fixed
when the parser is created.  Each call to `parse_postfix` or `parse_tree`
creates a new parse operation holding all of its own state, so one parser can
be used for any number of parses::

    import shunting

    parser = shunting.ExpressionParser()
    parser.parse_postfix("f(a, b) + 1")     # [f, a, b, (2), <Fn>, 1, +]
    tree = parser.parse_tree("a + b * c")
    print(tree)

Operators can be added by extending the standard list::

    ops = shunting.standard_operator_list()
    ops.append(shunting.Operator("@", 2, "left", 100))
    parser = shunting.ExpressionParser(ops)

"""

if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run(["../../test/test_expression_parser.py",
                              "../../test/test_syntax_tree.py",
                              ], pytest_args="-v")

import logging

from .shared_settings_and_exceptions import (DEFAULT_ELEMENT_SEPARATOR,
                                             DEFAULT_STATEMENT_SEPARATOR)
from .operators import standard_operator_list
from .operator_table import OperatorTable
from .literals import LiteralChain, standard_chain
from .parse_operation import ParseOperation

__all__ = ["ExpressionParser"]

logger = logging.getLogger(__name__)


class ExpressionParser:
    """A parser for infix expressions, producing postfix token lists or
    syntax trees."""

    def __init__(self, operators=None,
                       element_separator=DEFAULT_ELEMENT_SEPARATOR,
                       statement_separator=DEFAULT_STATEMENT_SEPARATOR,
                       parse_operation_factory=ParseOperation,
                       literal_chain=None):
        """Initialize the parser.

        The `operators` argument is an iterable of `Operator` instances (which
        may include `Group` instances).  It is copied.  The default is the
        list from `standard_operator_list`.

        The `element_separator` separates the elements of a group, such as the
        arguments of a function call.  The default is a comma.

        The `statement_separator` separates whole statements.  The default is
        a semicolon.  The postfix output of several statements is simply the
        concatenation of the output of each.

        The `parse_operation_factory` is called as
        `parse_operation_factory(parser, expression)` for each parse and must
        return an object with `parse_postfix` and `parse_tree` methods.  The
        default is the `ParseOperation` class, and subclasses of it can be
        passed in to customize the recognition of tokens.

        The `literal_chain` is the `LiteralChain` of literal recognizers used
        by the default parse operation.  The default is from `standard_chain`."""
        if operators is None:
            operators = standard_operator_list()
        self._operator_table = OperatorTable(operators)
        self._element_separator = element_separator
        self._statement_separator = statement_separator
        self._parse_operation_factory = parse_operation_factory
        if literal_chain is None:
            literal_chain = standard_chain()
        # Only the matchers are kept, so later changes to the caller's chain
        # do not reach the parser.
        self._literal_matchers = tuple(literal_chain)

        logger.debug("Created parser with %d operators, element separator %r,"
                     " statement separator %r.", len(self._operator_table),
                     element_separator, statement_separator)

    #
    # Read-only configuration.
    #

    @property
    def operator_table(self):
        return self._operator_table

    @property
    def operators(self):
        """The operators, as a new list in matching order."""
        return list(self._operator_table)

    @property
    def element_separator(self):
        return self._element_separator

    @property
    def statement_separator(self):
        return self._statement_separator

    @property
    def literal_chain(self):
        """A new `LiteralChain` holding the parser's literal recognizers."""
        return LiteralChain(self._literal_matchers)

    @property
    def parse_operation_factory(self):
        return self._parse_operation_factory

    #
    # Parsing.
    #

    def parse_postfix(self, expression):
        """Parse `expression` into a list of tokens in postfix (reverse Polish)
        order.  Raises `ErrorInParsedLanguage` if the syntax is incorrect."""
        logger.debug("Parsing %r to postfix.", expression)
        output = self._parse_operation_factory(self, expression).parse_postfix()
        logger.debug("Parsed %r into %d tokens.", expression, len(output))
        return output

    def parse_tree(self, expression):
        """Parse `expression` into a `SyntaxTree`.  Raises
        `ErrorInParsedLanguage` if the syntax is incorrect."""
        logger.debug("Parsing %r to a syntax tree.", expression)
        return self._parse_operation_factory(self, expression).parse_tree()

    def __repr__(self):
        return ("ExpressionParser(<{0} operators>, element_separator={1!r},"
                " statement_separator={2!r})".format(len(self._operator_table),
                    self._element_separator, self._statement_separator))

