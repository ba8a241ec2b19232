"""
Prefix ordering of hierarchy keys.

A key only has to say whether it is a prefix of another key.  Everything else (is a line at the same level,
deeper, shallower, or unrelated) is derived from asking that question both ways.
"""
from collections.abc import Sequence
from enum import Enum
from pathlib import PurePath
from typing import Any, Generic, TypeVar

from typing_extensions import Protocol, runtime_checkable

K = TypeVar('K')


@runtime_checkable
class Prefixable(Protocol):
    def is_prefix_of(self, other: Any) -> bool:
        """Should be reflexive: a key is always a prefix of itself"""
        ...


class PrefixOrdering(Enum):
    EQUAL = 'equal'
    LESS = 'less'
    GREATER = 'greater'
    INCOMPARABLE = 'incomparable'


_STRING_LIKE = (str, bytes, bytearray)


def _sequence_is_prefix_of(a: Sequence, b: Sequence) -> bool:
    if len(a) > len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def is_prefix_of(a: Any, b: Any) -> bool:
    """
    Is `a` a prefix of `b`?  Keys implementing `Prefixable` decide for themselves.  Strings, bytes, paths and
    other sequences get "starts with" semantics.  Keys of different kinds (e.g. `str` and `bytes`) are never
    prefixes of each other
    """
    if isinstance(a, Prefixable):
        return a.is_prefix_of(b)
    elif isinstance(a, str):
        return isinstance(b, str) and b.startswith(a)
    elif isinstance(a, (bytes, bytearray)):
        return isinstance(b, (bytes, bytearray)) and b.startswith(a)
    elif isinstance(a, PurePath):
        return isinstance(b, PurePath) and _sequence_is_prefix_of(a.parts, b.parts)
    elif isinstance(a, Sequence):
        return isinstance(b, Sequence) and not isinstance(b, _STRING_LIKE) and _sequence_is_prefix_of(a, b)
    else:
        raise TypeError(f"Can't use {type(a).__name__!r} as a hierarchy key: it isn't a sequence and has no"
                        f" is_prefix_of() method")


def prefix_ord(a: Any, b: Any) -> PrefixOrdering:
    a_prefixes_b = is_prefix_of(a, b)
    b_prefixes_a = is_prefix_of(b, a)

    if a_prefixes_b and b_prefixes_a:
        return PrefixOrdering.EQUAL
    elif a_prefixes_b:
        return PrefixOrdering.LESS
    elif b_prefixes_a:
        return PrefixOrdering.GREATER
    else:
        return PrefixOrdering.INCOMPARABLE


class PrefixKey(Generic[K]):
    """
    Wraps a key and compares by delegating to the wrapped value
    """

    def __init__(self, inner: K):
        self.inner = inner

    def is_prefix_of(self, other: Any) -> bool:
        if isinstance(other, PrefixKey):
            other = other.inner
        return is_prefix_of(self.inner, other)

    def __eq__(self, other) -> bool:
        if isinstance(other, type(self)):
            return self.inner == other.inner
        else:
            return False

    def __hash__(self) -> int:
        return hash(self.inner)

    def __repr__(self):
        return f"PrefixKey({self.inner!r})"
