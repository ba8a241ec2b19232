"""
Builds a forest of `RoseTree`s out of (key, value) pairs, where the keys (usually indentation strings) say how
deeply each value is nested.

The builder keeps a stack of frames.  Each frame is a key plus the sibling trees built at that key's level,
and each frame's key is a strict prefix of the keys of the frames above it.  When the nesting gets shallower,
frames are popped and their siblings become the children of the last sibling in the frame below, which is
the value that opened the deeper level.
"""
import logging
from typing import Generic, TypeVar, List, Optional, Iterable, Tuple, Any

from indenty.errors import IncoherentIndentError, InvalidIndentError, InternalIndentError, EmptyIteratorError, \
    BuilderFinishedError
from indenty.nonempty import NonEmptyList, NonEmptyError
from indenty.prefix import PrefixOrdering, prefix_ord
from indenty.tree import RoseTree

logger = logging.getLogger(__name__)

K = TypeVar('K')
T = TypeVar('T')


class Frame(Generic[K, T]):
    __slots__ = ('key', 'siblings')

    def __init__(self, key: K, first_value: T):
        self.key = key
        self.siblings: NonEmptyList[RoseTree[T]] = NonEmptyList(RoseTree.leaf(first_value))

    def __repr__(self):
        return f"Frame({self.key!r}, {self.siblings.to_list()!r})"


class ForestBuilder(Generic[K, T]):
    """
    Incremental version of `build_forest()`: call `push()` for each pair, then `finish()` once
    """

    def __init__(self) -> None:
        self._stack: Optional[NonEmptyList[Frame[K, T]]] = None
        self._finished = False

    @property
    def depth(self) -> int:
        """Number of open levels, 0 if nothing has been pushed yet"""
        if self._stack is None:
            return 0
        return len(self._stack)

    @property
    def finished(self) -> bool:
        return self._finished

    def push(self, key: K, value: T) -> None:
        if self._finished:
            raise BuilderFinishedError()

        if self._stack is None:
            # whatever the first key is becomes the base level
            self._stack = NonEmptyList(Frame(key, value))
            return

        stack = self._stack
        current_key = stack.last.key
        ordering = prefix_ord(key, current_key)

        if ordering is PrefixOrdering.EQUAL:
            stack.last.siblings.append(RoseTree.leaf(value))
        elif ordering is PrefixOrdering.GREATER:
            logger.debug('Opening level %r at depth %d', key, len(stack))
            stack.append(Frame(key, value))
        elif ordering is PrefixOrdering.LESS:
            if not self._is_open_level(key):
                raise InvalidIndentError(key, current_key)
            self._fold_down_to(key)
            stack.last.siblings.append(RoseTree.leaf(value))
        elif ordering is PrefixOrdering.INCOMPARABLE:
            raise IncoherentIndentError(key, current_key)
        else:
            raise AssertionError('Should not make it here')

    def finish(self) -> List[RoseTree[T]]:
        if self._finished:
            raise BuilderFinishedError()
        self._finished = True

        if self._stack is None:
            return []

        while len(self._stack) > 1:
            self._fold_top()

        forest = self._stack.last.siblings.to_list()
        self._stack = None
        return forest

    def _is_open_level(self, key: K) -> bool:
        assert self._stack is not None
        return any(prefix_ord(frame.key, key) is PrefixOrdering.EQUAL for frame in self._stack)

    def _fold_down_to(self, key: K) -> None:
        assert self._stack is not None
        while prefix_ord(key, self._stack.last.key) is PrefixOrdering.LESS:
            self._fold_top()

    def _fold_top(self) -> None:
        """
        Pops the innermost frame and appends its siblings to the children of the last sibling of the frame
        below it
        """
        assert self._stack is not None
        try:
            popped = self._stack.pop()
        except NonEmptyError as e:
            raise InternalIndentError(
                f"Tried to fold the base level {self._stack.last.key!r} onto nothing"
            ) from e

        parent = self._stack.last.siblings.last
        logger.debug('Folding %d tree(s) at level %r under %r', len(popped.siblings), popped.key, parent.value)
        parent.children.extend(popped.siblings)


def build_forest(pairs: Iterable[Tuple[K, T]], allow_empty: bool = True) -> List[RoseTree[T]]:
    """
    Builds a forest from `(key, value)` pairs, consuming `pairs` exactly once.

    A pair whose key equals the current level's key is a sibling of the previous value, a pair whose key
    extends it is nested under the previous value, and a pair whose key is a shorter prefix goes back to the
    level that used that exact key.

    Raises `IncoherentIndentError` if a key is neither a prefix nor an extension of the current level,
    `InvalidIndentError` if a key goes back to a level that was never opened, and `EmptyIteratorError` for
    empty input if `allow_empty` is False
    """
    builder: ForestBuilder[K, T] = ForestBuilder()
    for key, value in pairs:
        builder.push(key, value)

    if builder.depth == 0 and not allow_empty:
        raise EmptyIteratorError()

    return builder.finish()


def forest_depths(pairs: Iterable[Tuple[K, Any]]) -> List[int]:
    """
    The depth each pair would end up at in the built forest, worked out from the keys alone
    """
    open_keys: List[Any] = []
    depths: List[int] = []
    for key, _ in pairs:
        while open_keys and prefix_ord(key, open_keys[-1]) is not PrefixOrdering.GREATER:
            open_keys.pop()
        depths.append(len(open_keys))
        open_keys.append(key)
    return depths
