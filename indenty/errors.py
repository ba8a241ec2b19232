"""Errors raised while building a forest."""
from typing import Any


class IndentyError(Exception):
    """Base class for everything the forest builder raises."""


class KeyRelationError(IndentyError):
    """
    An error about how a new key relates to the current nesting level.  Keeps both keys around so callers
    can report them
    """

    def __init__(self, key: Any, current_key: Any, message: str):
        super().__init__(message)
        self.key = key
        self.current_key = current_key


class IncoherentIndentError(KeyRelationError):
    def __init__(self, key: Any, current_key: Any):
        super().__init__(
            key, current_key,
            f"Indentation {key!r} can't be compared with the current indentation {current_key!r}"
        )


class InvalidIndentError(KeyRelationError):
    def __init__(self, key: Any, current_key: Any):
        super().__init__(
            key, current_key,
            f"Indentation {key!r} doesn't match any enclosing level (current indentation is {current_key!r})"
        )


class InternalIndentError(IndentyError):
    """The builder's stack got into a state it should never be in.  This is a bug, not bad input"""


class EmptyIteratorError(IndentyError):
    def __init__(self, message: str = 'No lines to build a forest from'):
        super().__init__(message)


class BuilderFinishedError(IndentyError):
    def __init__(self, message: str = 'ForestBuilder.finish() was already called'):
        super().__init__(message)
