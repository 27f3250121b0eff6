"""
Conversion of parse trees into runtime values.
"""

import logging
import re

from .values import (
    Value, ErrorKind,
    make_number, make_error, make_symbol, make_expression, fits_int64,
)
from ..ast import ParseNode, ROOT_TAG, ANCHOR_TAG

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Digits in the widest signed 64-bit value
_MAX_DIGITS = 19

# Punctuation leaves that carry no value
_STRUCTURAL = frozenset({"(", ")", "{", "}"})


def read_number(text: str) -> Value:
    """Convert literal text to a Number, or an invalid-number Error."""
    if not _INTEGER_RE.fullmatch(text):
        logger.debug("rejecting malformed number literal %r", text)
        return make_error(ErrorKind.BAD_NUM)
    # Strip sign and leading zeros so int() only ever sees a bounded string
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        logger.debug("number literal of %d characters is out of range", len(text))
        return make_error(ErrorKind.BAD_NUM)
    n = int(digits or "0")
    if text.startswith("-"):
        n = -n
    if not fits_int64(n):
        logger.debug("number literal %r is out of range", text)
        return make_error(ErrorKind.BAD_NUM)
    return make_number(n)


def _is_structural(node: ParseNode) -> bool:
    return node.contents in _STRUCTURAL or node.tag == ANCHOR_TAG


def read(node: ParseNode) -> Value:
    """
    Convert one parse tree node, recursively, into a value.

    Never raises for odd input: a node whose shape is not recognized
    becomes an Error value.
    """
    if node.has_tag("number"):
        return read_number(node.contents)

    if node.has_tag("symbol"):
        return make_symbol(node.contents)

    if node.tag == ROOT_TAG or node.has_tag("sexpr"):
        expr = make_expression()
        for child in node.children:
            if _is_structural(child):
                continue
            expr.append(read(child))
        return expr

    logger.debug("unrecognized parse tree node with tag %r", node.tag)
    return make_error(ErrorKind.BAD_NODE, f"unrecognized parse tree node '{node.tag}'")
