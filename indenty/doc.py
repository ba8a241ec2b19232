"""
A tiny pretty-printing document algebra.

Docs are built from text, line breaks, nesting and groups.  A group is laid out flat (its soft line breaks
become their flat text) when it fits in the remaining width, otherwise its line breaks become newlines.
"""
from typing import NamedTuple, Optional, Tuple, Union, List, Iterable

DEFAULT_WIDTH = 80


class Text(NamedTuple):
    text: str


class Line(NamedTuple):
    # what the break turns into when its group is flat; None means it always breaks
    flat: Optional[str]


class Nest(NamedTuple):
    indent: int
    doc: 'Doc'


class Concat(NamedTuple):
    docs: Tuple['Doc', ...]


class Group(NamedTuple):
    doc: 'Doc'


Doc = Union[Text, Line, Nest, Concat, Group]

# (indent, flat, doc)
_Item = Tuple[int, bool, Doc]


def text(value: str) -> Text:
    if '\n' in value:
        raise ValueError(f"Text docs can't contain newlines, use a line break instead: {value!r}")
    return Text(value)


def hardline() -> Line:
    return Line(None)


def line() -> Line:
    return Line(' ')


def softline() -> Line:
    return Line('')


def nest(indent: int, doc: Doc) -> Nest:
    return Nest(indent, doc)


def concat(*docs: Doc) -> Concat:
    return Concat(tuple(docs))


def group(doc: Doc) -> Group:
    return Group(doc)


def intersperse(docs: Iterable[Doc], separator: Doc) -> Concat:
    parts: List[Doc] = []
    for i, doc in enumerate(docs):
        if i > 0:
            parts.append(separator)
        parts.append(doc)
    return Concat(tuple(parts))


def _fits(remaining: int, item: _Item, rest: List[_Item]) -> bool:
    """
    Does `item`, followed by whatever is left on the stack up to the next newline, fit in `remaining` columns?
    """
    pending: List[_Item] = [item]
    rest_index = len(rest)

    while remaining >= 0:
        if not pending:
            if rest_index == 0:
                return True
            rest_index -= 1
            pending.append(rest[rest_index])

        indent, flat, doc = pending.pop()
        if isinstance(doc, Text):
            remaining -= len(doc.text)
        elif isinstance(doc, Line):
            if flat and doc.flat is not None:
                remaining -= len(doc.flat)
            else:
                return True
        elif isinstance(doc, Nest):
            pending.append((indent + doc.indent, flat, doc.doc))
        elif isinstance(doc, Concat):
            pending.extend((indent, flat, d) for d in reversed(doc.docs))
        elif isinstance(doc, Group):
            pending.append((indent, flat, doc.doc))
        else:
            raise TypeError(f"Not a doc: {doc!r}")

    return False


def render(doc: Doc, width: int = DEFAULT_WIDTH) -> str:
    out: List[str] = []
    column = 0
    # a break's indentation is only written once something follows it on the new line
    pending_indent = 0
    stack: List[_Item] = [(0, False, doc)]

    def write(chunk: str) -> None:
        nonlocal pending_indent
        if chunk:
            if pending_indent:
                out.append(' ' * pending_indent)
                pending_indent = 0
            out.append(chunk)

    while stack:
        indent, flat, doc = stack.pop()
        if isinstance(doc, Text):
            write(doc.text)
            column += len(doc.text)
        elif isinstance(doc, Line):
            if flat and doc.flat is not None:
                write(doc.flat)
                column += len(doc.flat)
            else:
                out.append('\n')
                pending_indent = indent
                column = indent
        elif isinstance(doc, Nest):
            stack.append((indent + doc.indent, flat, doc.doc))
        elif isinstance(doc, Concat):
            stack.extend((indent, flat, d) for d in reversed(doc.docs))
        elif isinstance(doc, Group):
            if flat:
                stack.append((indent, True, doc.doc))
            else:
                fits = _fits(width - column, (indent, True, doc.doc), stack)
                stack.append((indent, fits, doc.doc))
        else:
            raise TypeError(f"Not a doc: {doc!r}")

    return ''.join(out)
