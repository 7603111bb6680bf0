"""

A customizable shunting-yard parser for infix expressions.  Expressions are
parsed into postfix token lists or syntax trees.  See the `expression_parser`
module for usage.

"""

from .shared_settings_and_exceptions import *
from .text_stream import *
from .tokens import *
from .helpers import *
from .literals import *
from .operator_table import *
from .syntax_tree import *
from .parse_operation import *
from .expression_parser import *
from .operators import standard_operator_list
from . import operators

__version__ = "0.1.0"
