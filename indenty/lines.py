"""Turning text lines into (indentation, content) pairs and back"""
import re
from typing import Iterable, Iterator, Tuple, List, Any

from indenty.tree import RoseTree

LEADING_WHITESPACE_RE = re.compile(r'^[ \t]*')
DEFAULT_INDENT = '  '

LinePair = Tuple[str, str]


def split_indent(line: str) -> LinePair:
    """
    Splits a line into its leading spaces/tabs and the rest, with any line ending removed
    """
    line = line.rstrip('\r\n')
    match = LEADING_WHITESPACE_RE.match(line)
    assert match is not None  # the pattern can match an empty string
    indent = match.group()
    return indent, line[len(indent):]


def lines_to_pairs(lines: Iterable[str], skip_blank: bool = True) -> Iterator[LinePair]:
    for line in lines:
        indent, content = split_indent(line)
        if skip_blank and not content.strip():
            continue
        yield indent, content


class LineCounter:
    """
    Wraps an iterable of lines and remembers the (1-based) number of the last line pulled from it, so an error
    raised while consuming it lazily can be reported with a position
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = lines
        self.line_number = 0

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            self.line_number += 1
            yield line


def flatten(forest: Iterable[RoseTree[Any]], indent: str = DEFAULT_INDENT) -> Iterator[str]:
    """
    The opposite of building a forest from lines: each value on its own line, indented once per level
    """
    for tree in forest:
        for depth, value in tree.walk():
            yield f"{indent * depth}{value}"


def flatten_to_text(forest: Iterable[RoseTree[Any]], indent: str = DEFAULT_INDENT) -> str:
    flattened: List[str] = list(flatten(forest, indent))
    if not flattened:
        return ''
    return '\n'.join(flattened) + '\n'
