from typing import Generic, TypeVar, List, Iterable, Iterator, overload

T = TypeVar('T')


class NonEmptyError(IndexError):
    pass


class NonEmptyList(Generic[T]):
    """
    A list that always has at least one item.  You need the first item to build one, and `pop()` won't
    remove the last one
    """

    def __init__(self, first: T, rest: Iterable[T] = ()):
        self._items: List[T] = [first]
        self._items.extend(rest)

    @property
    def first(self) -> T:
        return self._items[0]

    @property
    def last(self) -> T:
        return self._items[-1]

    def append(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if len(self._items) == 1:
            raise NonEmptyError('Refusing to pop the only item of a NonEmptyList')
        return self._items.pop()

    def to_list(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T:
        ...

    @overload
    def __getitem__(self, index: slice) -> List[T]:
        ...

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, type(self)):
            return self._items == other._items
        else:
            return False

    def __repr__(self):
        return f"{type(self).__name__}({self._items!r})"
