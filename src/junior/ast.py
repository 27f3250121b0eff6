"""
Parse tree nodes produced by the parser.

The tree is deliberately untyped: every node carries a ``tag`` string
describing the grammar rules that matched it, the matched text in
``contents`` (leaves only) and its ``children`` in source order. Tags are
composed with ``|`` from the outermost rule inward, e.g. a number inside
an expression is tagged ``expr|number|regex``. The root is tagged ``>``.

Punctuation (``char`` nodes for parentheses) and the start/end anchors
(``regex`` nodes) are kept in the tree; the reader filters them out.
"""

from dataclasses import dataclass, field
from typing import List, Optional, TextIO
import sys

from .tokens import SourceSpan


# Tags emitted by the parser
ROOT_TAG = ">"
ANCHOR_TAG = "regex"
CHAR_TAG = "char"
NUMBER_TAG = "expr|number|regex"
OPERATOR_TAG = "expr|symbol|char"
NAME_TAG = "expr|symbol|regex"
SEXPR_TAG = "expr|sexpr|>"


@dataclass
class ParseNode:
    """A node of the parse tree."""
    tag: str
    contents: str = ""
    children: List["ParseNode"] = field(default_factory=list)
    span: Optional[SourceSpan] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def has_tag(self, fragment: str) -> bool:
        """Check whether any rule in the tag matches ``fragment``."""
        return fragment in self.tag.split("|")


def format_ast(node: ParseNode, depth: int = 0) -> str:
    """Render a parse tree, one node per line, indented by depth."""
    indent = "  " * depth
    if node.is_leaf:
        line = f"{indent}{node.tag} '{node.contents}'"
        if node.span is not None:
            line = f"{indent}{node.tag}:{node.span.start.line}:{node.span.start.column} '{node.contents}'"
        return line

    lines = [f"{indent}{node.tag} "]
    for child in node.children:
        lines.append(format_ast(child, depth + 1))
    return "\n".join(lines)


def print_ast(node: ParseNode, file: TextIO = None) -> None:
    """Print a parse tree for debugging."""
    print(format_ast(node), file=file or sys.stdout)
