"""

Some helper routines for classifying the tokens in a postfix sequence, plus a
function for composing literal matchers.

For the predefined operator catalogue see the `operators` module.

"""

if __name__ == "__main__":
    import pytest_helper
    # No test file for now, just run the parser's tests.
    pytest_helper.script_run("../../test/test_expression_parser.py", pytest_args="-v")

import numbers
import decimal

from .tokens import Variable, Operator, Group, Function

__all__ = ["is_operator", "is_group", "is_function", "is_variable",
           "is_number", "is_string", "is_boolean", "is_literal",
           "is_matching_group", "token_arity", "first_match_fun"]

#
# Token classification.
#

def is_operator(token):
    return isinstance(token, Operator)

def is_group(token):
    return isinstance(token, Group)

def is_function(token):
    return isinstance(token, Function)

def is_variable(token):
    return isinstance(token, Variable)

def is_number(token):
    """True for any numeric literal, including the Numpy sized types and
    `decimal.Decimal`.  Booleans are not numbers here."""
    if isinstance(token, bool):
        return False
    return isinstance(token, (numbers.Number, decimal.Decimal))

def is_string(token):
    return isinstance(token, str)

def is_boolean(token):
    return isinstance(token, bool)

def is_literal(token):
    """True for anything which is neither an operator nor a variable."""
    return not is_operator(token) and not is_variable(token)

def is_matching_group(token, group):
    """Test whether `token` is a group of the same kind as `group`, ignoring
    arity."""
    return is_group(token) and token.matches(group)

def token_arity(token):
    """Return the number of operands that `token` consumes from a postfix
    sequence.  Literals and variables consume none."""
    return token.arity if is_operator(token) else 0

#
# Combining matcher functions.
#

def first_match_fun(*funs):
    """Takes any number of matcher functions as arguments, each taking the
    arguments `(text, stream)` and returning either a value or `None`.
    Returns a combined matcher function which tries them in order and returns
    the first non-`None` value (or `None` if all fail).  Any `None` object
    arguments are ignored."""
    funs = [f for f in funs if f]
    if not funs:
        return None
    elif len(funs) == 1:
        return funs[0]

    def combined_fun(text, stream):
        for fun in funs:
            result = fun(text, stream)
            if result is not None:
                return result
        return None

    return combined_fun

