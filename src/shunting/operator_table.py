"""

The `OperatorTable` class, the catalogue of operators known to a parser.

The table is sorted so that longer symbols come first, with ties broken by
ordinary string order.  Scanning the table front to back then always finds
the longest symbol which applies at the current position (maximal munch), so
for example `<<=` is tried before `<<`, which is tried before `<`.  No
separate tokenizing pass is needed.  The sort is stable, so when two
operators have the same symbol and fixity the one which was given first wins.

"""

if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run("../../test/test_operator_table.py", pytest_args="-v")

from .helpers import is_group

__all__ = ["OperatorTable"]


def _symbol_sort_key(op):
    return (-len(op.symbol), op.symbol)


class OperatorTable:
    """An immutable, sorted catalogue of operators."""

    def __init__(self, operators):
        """Copy and sort the iterable `operators`."""
        self._operators = tuple(sorted(operators, key=_symbol_sort_key))
        # Terminators are looked up separately from the initiators, in their
        # own longest-first order.
        self._groups = tuple(sorted((op for op in self._operators if is_group(op)),
                                    key=lambda g: (-len(g.terminator), g.terminator)))

    def __iter__(self):
        return iter(self._operators)

    def __len__(self):
        return len(self._operators)

    def __contains__(self, op):
        return op in self._operators

    def groups(self):
        """Return the groups in the table, in terminator-matching order."""
        return self._groups

    def match_operator(self, stream, infix):
        """Return the first operator whose symbol is next in `stream` and
        which fits the current context, moving the stream past the symbol.
        If `infix` is true a value was just read, so only infix and postfix
        operators apply; otherwise only prefix operators apply.  Returns
        `None` if nothing matches."""
        for op in self._operators:
            if self._matches(op, op.symbol, stream, infix):
                return op
        return None

    def match_terminator(self, stream, infix):
        """Return the group whose terminator symbol is next in `stream`,
        moving the stream past the symbol.  Returns `None` if there is none."""
        for group in self._groups:
            if self._matches(group, group.terminator, stream, infix):
                return group
        return None

    @staticmethod
    def _matches(op, symbol, stream, infix):
        if not stream.startswith(symbol):
            return False
        prefix, postfix, infix_op = op.is_prefix(), op.is_postfix(), op.is_infix()
        # An operator of no known fixity is returned in any context, so that
        # the parser reports the bad configuration.
        impenetrable = not (prefix or postfix or infix_op)
        # Ensure the operator is appropriate to the current context.
        if impenetrable or (not infix and prefix) or (infix and (postfix or infix_op)):
            stream.inc(len(symbol))
            return True
        return False

    def __repr__(self):
        return "OperatorTable([{0}])".format(", ".join(repr(op) for op in self))

