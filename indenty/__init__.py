"""Top-level package for indenty."""

__version__ = '0.1.0'

from indenty.errors import IndentyError, IncoherentIndentError, InvalidIndentError, InternalIndentError, \
    EmptyIteratorError, BuilderFinishedError  # noqa: F401
from indenty.prefix import Prefixable, PrefixOrdering, PrefixKey, is_prefix_of, prefix_ord  # noqa: F401
from indenty.tree import RoseTree, render_forest  # noqa: F401
from indenty.forest import ForestBuilder, build_forest  # noqa: F401
