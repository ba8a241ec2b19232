from typing import Generic, TypeVar, List, Optional, Iterator, Tuple, Iterable, Any, Dict

from indenty import doc as d

T = TypeVar('T')
K = TypeVar('K')

CHILD_INDENT = 2


class RoseTree(Generic[T]):
    """
    A value with an ordered list of child trees.  Trees own their children: no parent links, no sharing
    """

    __slots__ = ('value', 'children')

    def __init__(self, value: T, children: Optional[List['RoseTree[T]']] = None):
        self.value = value
        if children:
            self.children = list(children)
        else:
            self.children = []

    @classmethod
    def leaf(cls, value: T) -> 'RoseTree[T]':
        return cls(value)

    @classmethod
    def node(cls, value: T, children: Iterable['RoseTree[T]']) -> 'RoseTree[T]':
        return cls(value, list(children))

    @classmethod
    def from_prefixables(cls, pairs: Iterable[Tuple[K, T]]) -> List['RoseTree[T]']:
        """
        Builds a forest from (key, value) pairs, nesting each value under the last one with a shorter key.
        See `indenty.forest.build_forest()`
        """
        from indenty.forest import build_forest

        return build_forest(pairs)

    def is_leaf(self) -> bool:
        return not self.children

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, T]]:
        """
        Pre-order walk yielding `(depth, value)`, where the tree's root has depth `depth`
        """
        stack: List[Tuple[int, RoseTree[T]]] = [(depth, self)]
        while stack:
            node_depth, node = stack.pop()
            yield node_depth, node.value
            stack.extend((node_depth + 1, child) for child in reversed(node.children))

    def size(self) -> int:
        return sum(1 for _ in self.walk())

    def height(self) -> int:
        return max(depth for depth, _ in self.walk()) + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'children': [c.to_dict() for c in self.children]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoseTree[Any]':
        return cls(data['value'], [cls.from_dict(c) for c in data.get('children') or []])

    def to_doc(self, vertical: bool) -> d.Doc:
        """
        Vertical docs put each child on its own line, indented under its parent.  Horizontal docs look like
        `value => [child, child => [grandchild]]` and only break lines when a node's children don't fit
        """
        head = d.text(str(self.value))
        if not self.children:
            return head
        elif vertical:
            return d.concat(head, d.nest(CHILD_INDENT, d.concat(*(
                d.concat(d.hardline(), child.to_doc(vertical)) for child in self.children
            ))))
        else:
            child_docs = d.intersperse(
                (child.to_doc(vertical) for child in self.children),
                d.concat(d.text(','), d.line())
            )
            return d.concat(
                head,
                d.text(' => '),
                d.group(d.concat(
                    d.text('['),
                    d.nest(CHILD_INDENT, d.concat(d.softline(), child_docs)),
                    d.softline(),
                    d.text(']')
                ))
            )

    def render(self, vertical: bool = True, width: int = d.DEFAULT_WIDTH) -> str:
        return d.render(self.to_doc(vertical), width)

    def __eq__(self, other) -> bool:
        if isinstance(other, RoseTree):
            return self.value == other.value and self.children == other.children
        else:
            return False

    def __repr__(self):
        if self.children:
            return f"RoseTree({self.value!r}, {self.children!r})"
        else:
            return f"RoseTree({self.value!r})"


def forest_to_doc(forest: Iterable[RoseTree[Any]], vertical: bool) -> d.Doc:
    return d.intersperse((tree.to_doc(vertical) for tree in forest), d.hardline())


def render_forest(forest: Iterable[RoseTree[Any]], vertical: bool = True, width: int = d.DEFAULT_WIDTH) -> str:
    return d.render(forest_to_doc(forest, vertical), width)


def walk_forest(forest: Iterable[RoseTree[T]]) -> Iterator[Tuple[int, T]]:
    for tree in forest:
        yield from tree.walk()
