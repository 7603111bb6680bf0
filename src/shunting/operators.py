"""

The standard operator catalogue.  The constants are modeled on the operators
of Java and MATLAB, with precedence values running from 16 (binds tightest)
down to 0 (assignment).

Use `standard_operator_list` to get the catalogue as a new list, which can
then be extended or trimmed before passing it to an `ExpressionParser`.

"""

from .tokens import Operator, Group, Associativity

LEFT = Associativity.LEFT
RIGHT = Associativity.RIGHT

# dot

DOT = Operator(".", 2, LEFT, 16)

# groups

PARENS = Group("(", ")", 16)
BRACKETS = Group("[", "]", 16)
BRACES = Group("{", "}", 16)

# transpose, power

TRANSPOSE = Operator("'", 1, LEFT, 15)
DOT_TRANSPOSE = Operator(".'", 1, LEFT, 15)
POW = Operator("^", 2, RIGHT, 15)
DOT_POW = Operator(".^", 2, RIGHT, 15)

# postfix

POST_INC = Operator("++", 1, LEFT, 14)
POST_DEC = Operator("--", 1, LEFT, 14)

# unary

PRE_INC = Operator("++", 1, RIGHT, 13)
PRE_DEC = Operator("--", 1, RIGHT, 13)
POS = Operator("+", 1, RIGHT, 13)
NEG = Operator("-", 1, RIGHT, 13)
COMPLEMENT = Operator("~", 1, RIGHT, 13)
NOT = Operator("!", 1, RIGHT, 13)

# multiplicative

MUL = Operator("*", 2, LEFT, 12)
DIV = Operator("/", 2, LEFT, 12)
MOD = Operator("%", 2, LEFT, 12)
RIGHT_DIV = Operator("\\", 2, LEFT, 12)
DOT_MUL = Operator(".*", 2, LEFT, 12)
DOT_DIV = Operator("./", 2, LEFT, 12)
DOT_RIGHT_DIV = Operator(".\\", 2, LEFT, 12)

# additive

ADD = Operator("+", 2, LEFT, 11)
SUB = Operator("-", 2, LEFT, 11)

# shift

LEFT_SHIFT = Operator("<<", 2, LEFT, 10)
RIGHT_SHIFT = Operator(">>", 2, LEFT, 10)
UNSIGNED_RIGHT_SHIFT = Operator(">>>", 2, LEFT, 10)

# relational

LESS_THAN = Operator("<", 2, LEFT, 8)
GREATER_THAN = Operator(">", 2, LEFT, 8)
LESS_THAN_OR_EQUAL = Operator("<=", 2, LEFT, 8)
GREATER_THAN_OR_EQUAL = Operator(">=", 2, LEFT, 8)
INSTANCEOF = Operator("instanceof", 2, LEFT, 8)

# equality

EQUAL = Operator("==", 2, LEFT, 7)
NOT_EQUAL = Operator("!=", 2, LEFT, 7)

# bitwise; there is no XOR since ^ is taken by POW

BITWISE_AND = Operator("&", 2, LEFT, 6)
BITWISE_OR = Operator("|", 2, LEFT, 4)

# logical

LOGICAL_AND = Operator("&&", 2, LEFT, 3)
LOGICAL_OR = Operator("||", 2, LEFT, 2)

# ternary

# These are not parsed as a true ternary operator, but an evaluator can
# simulate one from the resulting tree.
QUESTION = Operator("?", 2, LEFT, 1)
COLON = Operator(":", 2, LEFT, 1.5)

# assignment

ASSIGN = Operator("=", 2, RIGHT, 0)
POW_ASSIGN = Operator("^=", 2, RIGHT, 0)
DOT_POW_ASSIGN = Operator(".^=", 2, RIGHT, 0)
MUL_ASSIGN = Operator("*=", 2, RIGHT, 0)
DIV_ASSIGN = Operator("/=", 2, RIGHT, 0)
MOD_ASSIGN = Operator("%=", 2, RIGHT, 0)
RIGHT_DIV_ASSIGN = Operator("\\=", 2, RIGHT, 0)
DOT_DIV_ASSIGN = Operator("./=", 2, RIGHT, 0)
DOT_RIGHT_DIV_ASSIGN = Operator(".\\=", 2, RIGHT, 0)
ADD_ASSIGN = Operator("+=", 2, RIGHT, 0)
SUB_ASSIGN = Operator("-=", 2, RIGHT, 0)
AND_ASSIGN = Operator("&=", 2, RIGHT, 0)
OR_ASSIGN = Operator("|=", 2, RIGHT, 0)
LEFT_SHIFT_ASSIGN = Operator("<<=", 2, RIGHT, 0)
RIGHT_SHIFT_ASSIGN = Operator(">>=", 2, RIGHT, 0)
UNSIGNED_RIGHT_SHIFT_ASSIGN = Operator(">>>=", 2, RIGHT, 0)

STANDARD_OPERATORS = (
        DOT,
        PARENS, BRACKETS, BRACES,
        TRANSPOSE, DOT_TRANSPOSE, POW, DOT_POW,
        POST_INC, POST_DEC,
        PRE_INC, PRE_DEC, POS, NEG, COMPLEMENT, NOT,
        MUL, DIV, MOD, RIGHT_DIV, DOT_MUL, DOT_DIV, DOT_RIGHT_DIV,
        ADD, SUB,
        LEFT_SHIFT, RIGHT_SHIFT, UNSIGNED_RIGHT_SHIFT,
        LESS_THAN, GREATER_THAN, LESS_THAN_OR_EQUAL, GREATER_THAN_OR_EQUAL,
        INSTANCEOF,
        EQUAL, NOT_EQUAL,
        BITWISE_AND,
        BITWISE_OR,
        LOGICAL_AND,
        LOGICAL_OR,
        QUESTION, COLON,
        ASSIGN, POW_ASSIGN, DOT_POW_ASSIGN, MUL_ASSIGN, DIV_ASSIGN, MOD_ASSIGN,
        RIGHT_DIV_ASSIGN, DOT_DIV_ASSIGN, DOT_RIGHT_DIV_ASSIGN, ADD_ASSIGN,
        SUB_ASSIGN, AND_ASSIGN, OR_ASSIGN, LEFT_SHIFT_ASSIGN, RIGHT_SHIFT_ASSIGN,
        UNSIGNED_RIGHT_SHIFT_ASSIGN,
        )

def standard_operator_list():
    """Return a new list of the standard operators."""
    return list(STANDARD_OPERATORS)

