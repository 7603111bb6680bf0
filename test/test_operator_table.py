"""

Tests of the OperatorTable class.

"""

if __name__ == "__main__": # Run tests when invoked as a script.
    import pytest_helper
    pytest_helper.script_run(self_test=True, pytest_args="-v")

import shunting as sh
from shunting import operators as ops

def test_longest_symbols_first():
    table = sh.OperatorTable([ops.LESS_THAN, ops.LEFT_SHIFT, ops.ADD,
                              ops.LEFT_SHIFT_ASSIGN])
    assert [op.symbol for op in table] == ["<<=", "<<", "+", "<"]
    assert len(table) == 4
    assert ops.ADD in table
    assert ops.SUB not in table

def test_match_operator_longest():
    table = sh.OperatorTable(sh.standard_operator_list())
    stream = sh.TextStream("<<=b")
    assert table.match_operator(stream, True) is ops.LEFT_SHIFT_ASSIGN
    assert stream.get() == 3

    stream = sh.TextStream("<<b")
    assert table.match_operator(stream, True) is ops.LEFT_SHIFT
    assert stream.get() == 2

def test_match_operator_fixity():
    table = sh.OperatorTable(sh.standard_operator_list())
    assert table.match_operator(sh.TextStream("-a"), False) is ops.NEG
    assert table.match_operator(sh.TextStream("-a"), True) is ops.SUB
    assert table.match_operator(sh.TextStream("++"), False) is ops.PRE_INC
    assert table.match_operator(sh.TextStream("++"), True) is ops.POST_INC
    # Groups fit both contexts.
    assert table.match_operator(sh.TextStream("("), False) is ops.PARENS
    assert table.match_operator(sh.TextStream("("), True) is ops.PARENS
    # A transpose needs a value before it.
    assert table.match_operator(sh.TextStream("'"), False) is None

def test_no_match_leaves_stream():
    table = sh.OperatorTable(sh.standard_operator_list())
    stream = sh.TextStream("a+b")
    assert table.match_operator(stream, False) is None
    assert stream.get() == 0

def test_match_terminator():
    table = sh.OperatorTable(sh.standard_operator_list())
    assert [g.terminator for g in table.groups()] == [")", "]", "}"]
    stream = sh.TextStream("x]", 1)
    assert table.match_terminator(stream, True) is ops.BRACKETS
    assert stream.get() == 2
    assert table.match_terminator(sh.TextStream("}"), False) is ops.BRACES
    assert table.match_terminator(sh.TextStream("x"), True) is None

def test_duplicate_symbols():
    low = sh.Operator("+", 2, "left", 1)
    high = sh.Operator("+", 2, "left", 20)
    stream = sh.TextStream("+")
    assert sh.OperatorTable([low, high]).match_operator(stream, True) is low
    stream = sh.TextStream("+")
    assert sh.OperatorTable([high, low]).match_operator(stream, True) is high

def test_input_not_changed():
    operators = [ops.SUB, ops.SUB_ASSIGN]
    table = sh.OperatorTable(operators)
    assert operators == [ops.SUB, ops.SUB_ASSIGN]
    assert list(table) == [ops.SUB_ASSIGN, ops.SUB]

