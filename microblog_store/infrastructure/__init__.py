from .accounts import AccountStore
from .graph import RelationshipGraph
from .ordered_index import OrderedIndex, TraversalOrder
from .posts import PostStore
from .selection import select_top


__all__ = [
    "AccountStore",
    "OrderedIndex",
    "PostStore",
    "RelationshipGraph",
    "TraversalOrder",
    "select_top",
]
