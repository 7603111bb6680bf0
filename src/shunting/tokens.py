"""

The kinds of tokens which appear in the postfix output of the parser, other
than literals.  Literals are just the Python (or Numpy) values themselves.

Operators
=========

An `Operator` is a value description of an operator symbol: its arity, its
associativity, and its precedence (a real number, higher binds tighter).
Whether an operator is prefix, infix, or postfix is computed from the arity
and associativity:

* prefix -- arity one and right-associative,
* postfix -- arity one and left-associative,
* infix -- arity two or more.

An operator with associativity `EITHER` counts as both left- and
right-associative, so a unary `EITHER` operator can be used in both prefix and
postfix positions.

Plain operators are immutable, so the same instance is put on the output for
every occurrence in the parsed text.  This means the catalogue constants in
the `operators` module can be compared with `is` against parser output.

Groups and functions
====================

A `Group` is an operator with an initiator symbol (like `(`), a terminator
symbol (like `)`), and an arity which counts the elements actually found
between them.  Since that count differs for each occurrence, the parser pushes
a fresh copy (from the `instance` method) every time it sees the initiator.
A `Group` acts as a prefix opener when it starts a subexpression and as an
infix continuation when it follows a value (the call target role).

A `Function` is the binary operator which the parser inserts between a value
and a group which directly follows it, as in `f(x)`.  Its two operands are the
callee and the group.  It is never declared by the user.

"""

import enum

__all__ = ["Associativity", "Variable", "Operator", "Group", "Function",
           "FUNCTION_SYMBOL"]

FUNCTION_SYMBOL = "<Fn>"


class Associativity(enum.Enum):
    """How operators of equal precedence are grouped."""
    EITHER = "either"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    def __str__(self):
        return self.name


class Variable:
    """An identifier found in the parsed text.  Variables are equal when
    their names are equal."""

    def __init__(self, token):
        self.token = token

    def __eq__(self, other):
        return isinstance(other, Variable) and self.token == other.token

    def __hash__(self):
        return hash((Variable, self.token))

    def __str__(self):
        return self.token

    def __repr__(self):
        return "Variable({0!r})".format(self.token)


class Operator:
    """An operator symbol along with its arity, associativity and precedence."""

    def __init__(self, symbol, arity, associativity, precedence):
        """The `associativity` should be an `Associativity` member, or one of
        the strings "left", "right", "either" or "none"."""
        self.symbol = symbol
        self._arity = arity
        self.associativity = Associativity(associativity)
        self.precedence = precedence

    @property
    def arity(self):
        """The number of operands the operator takes."""
        return self._arity

    def is_left_associative(self):
        return self.associativity in (Associativity.LEFT, Associativity.EITHER)

    def is_right_associative(self):
        return self.associativity in (Associativity.RIGHT, Associativity.EITHER)

    def is_infix(self):
        return self.arity > 1

    def is_prefix(self):
        return self.arity == 1 and self.is_right_associative()

    def is_postfix(self):
        return self.arity == 1 and self.is_left_associative()

    def instance(self):
        """Return the object to use for one occurrence of the operator in the
        parsed text.  Properties are immutable, so the instance is reused."""
        return self

    def _key(self):
        return (type(self), self.symbol, self.arity, self.associativity,
                self.precedence)

    def __eq__(self, other):
        return isinstance(other, Operator) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return "Operator({0!r}, {1}, {2}, {3})".format(self.symbol, self.arity,
                                     self.associativity, self.precedence)


class Group(Operator):
    """A pair of bracketing symbols, counting the elements between them as its
    arity.  The arity starts at zero on each instance and is incremented by
    the parser as elements are completed."""

    def __init__(self, initiator, terminator, precedence):
        super().__init__(initiator, 0, Associativity.NONE, precedence)
        self.terminator = terminator

    def inc_arity(self):
        """Count one more element in this occurrence of the group."""
        self._arity += 1

    def matches(self, other):
        """Test whether `other` is the same kind of group, ignoring the arity
        of either one."""
        return (isinstance(other, Group)
                and self.symbol == other.symbol
                and self.terminator == other.terminator
                and self.precedence == other.precedence)

    # A group opens a subexpression in prefix position and applies as a call
    # in infix position; it is never a postfix operator.
    def is_infix(self):
        return True

    def is_prefix(self):
        return True

    def is_postfix(self):
        return False

    def instance(self):
        """Return a new occurrence of the group, with zero arity."""
        return Group(self.symbol, self.terminator, self.precedence)

    def _key(self):
        return (Group, self.symbol, self.terminator, self.precedence)

    def __eq__(self, other):
        return self.matches(other) and self.arity == other.arity

    def __hash__(self):
        # The arity is mutable, so leave it out.
        return hash(self._key())

    def __str__(self):
        return "{0}{1}{2}".format(self.symbol, self.arity, self.terminator)

    def __repr__(self):
        return "Group({0!r}, {1!r}, {2}, arity={3})".format(self.symbol,
                                  self.terminator, self.precedence, self.arity)


class Function(Operator):
    """The implicit binary operator applying a value to the group following
    it.  Its precedence is that of the group."""

    def __init__(self, precedence):
        super().__init__(FUNCTION_SYMBOL, 2, Associativity.LEFT, precedence)

    def __repr__(self):
        return "Function({0})".format(self.precedence)

