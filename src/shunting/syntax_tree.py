"""

The `SyntaxTree` class, a tree form of a postfix token sequence.

Each node holds a token and its children.  An operator node has as many
children as the operator's arity, in the same left-to-right order as its
operands appeared in the expression.  Literals and variables are leaves.  A
`Function` node has two children: the callee and the group holding the
arguments.

Converting between the two forms is lossless: for any postfix sequence `seq`
produced by the parser, `SyntaxTree(seq).postfix() == seq`.

Both directions are implemented with explicit work stacks instead of
recursion, so very deeply nested expressions do not hit Python's recursion
limit.

"""

if __name__ == "__main__":
    import pytest_helper
    pytest_helper.script_run("../../test/test_syntax_tree.py", pytest_args="-v")

from .helpers import token_arity
from .shared_settings_and_exceptions import ParserException

__all__ = ["SyntaxTree"]


class SyntaxTree:
    """A node in a syntax tree.  The attribute `token` is the token at the
    node and `children` is the tuple of child subtrees.  Indexing and
    iteration go over the children."""

    def __init__(self, tokens):
        """Build the tree for the postfix sequence `tokens`.  The sequence is
        not modified.  It must hold exactly one complete expression, otherwise
        a `ParserException` is raised."""
        tokens = tuple(tokens)
        if not tokens:
            raise ParserException("Cannot build a syntax tree from an empty"
                                  " token sequence.")
        root, start = _build_from_tail(tokens, len(tokens))
        if start != 0:
            raise ParserException("The token sequence holds more than one"
                                  " expression; {0} tokens are left over."
                                  .format(start))
        self.token = root.token
        self.children = root.children

    @classmethod
    def from_token(cls, token, children=()):
        """Make a node directly from a token and a sequence of child nodes."""
        node = cls.__new__(cls)
        node.token = token
        node.children = tuple(children)
        return node

    def child(self, index):
        """Return the child subtree at `index`."""
        return self.children[index]

    def count(self):
        """Return the number of children."""
        return len(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def postfix(self):
        """Return the tokens of the tree as a list in postfix order, i.e.,
        depth-first with the children before each node."""
        output = []
        # Each entry is a node and whether its children were already pushed.
        work = [(self, False)]
        while work:
            node, expanded = work.pop()
            if expanded:
                output.append(node.token)
                continue
            work.append((node, True))
            for child in reversed(node.children):
                work.append((child, False))
        return output

    #
    # Comparisons.
    #

    def __eq__(self, other):
        if not isinstance(other, SyntaxTree):
            return NotImplemented
        if self._shape() != other._shape():
            return False
        return all(_same_token(a, b)
                   for a, b in zip(self.postfix(), other.postfix()))

    def __hash__(self):
        return hash((tuple(self._shape()),
                     tuple(type(t).__name__ for t in self.postfix())))

    def _shape(self):
        """The arities of the nodes in postfix order, which along with the
        tokens determines the tree."""
        shape = []
        work = [(self, False)]
        while work:
            node, expanded = work.pop()
            if expanded:
                shape.append(len(node.children))
                continue
            work.append((node, True))
            for child in reversed(node.children):
                work.append((child, False))
        return shape

    #
    # Representations.
    #

    def tree_repr(self, prefix=""):
        """Return an indented listing of the tree, one token per line.  Each
        level of depth adds a space and a dash to the prefix."""
        lines = []
        work = [(self, prefix)]
        while work:
            node, node_prefix = work.pop()
            lines.append("{0} '{1}'\n".format(node_prefix, node.token))
            deeper_prefix = " " + node_prefix + "-"
            for child in reversed(node.children):
                work.append((child, deeper_prefix))
        return "".join(lines)

    def string_tree_repr(self):
        """Return a one-line nested representation, like `+(a,*(b,c))`."""
        string = str(self.token)
        if self.children:
            string += "("
            string += ",".join(c.string_tree_repr() for c in self.children)
            string += ")"
        return string

    __str__ = tree_repr

    def __repr__(self):
        return "SyntaxTree({0})".format(self.string_tree_repr())


def _same_token(a, b):
    """Literals of different types are different tokens, even where Python
    counts them equal (`True == 1 == 1.0`)."""
    return type(a) is type(b) and bool(a == b)

def _build_from_tail(tokens, end):
    """Build the subtree whose root is `tokens[end-1]`.  Returns the tree and
    the index where the subtree starts, which is where the previous sibling
    ends."""
    if end <= 0:
        raise ParserException("The token sequence ends before all operands"
                              " were found.")
    end -= 1
    # Each frame is a token, the number of children it needs, and the
    # children found so far, last child first.
    root_token = tokens[end]
    work = [(root_token, token_arity(root_token), [])]
    while True:
        token, needed, found = work[-1]
        if len(found) < needed:
            if end <= 0:
                raise ParserException("Operator '{0}' is missing operands in"
                                      " the token sequence.".format(token))
            end -= 1
            child_token = tokens[end]
            work.append((child_token, token_arity(child_token), []))
            continue
        work.pop()
        node = SyntaxTree.from_token(token, reversed(found))
        if not work:
            return node, end
        work[-1][2].append(node)

