"""
In-memory data layer for a micro-blogging domain
"""
from .config import settings
from .domain.models import Account, FollowEdge, Post, TrendingTerm
from .infrastructure import (
    AccountStore,
    OrderedIndex,
    PostStore,
    RelationshipGraph,
    TraversalOrder,
    select_top,
)
from .service import MicroblogService


__all__ = [
    "Account",
    "AccountStore",
    "FollowEdge",
    "MicroblogService",
    "OrderedIndex",
    "Post",
    "PostStore",
    "RelationshipGraph",
    "TraversalOrder",
    "TrendingTerm",
    "select_top",
    "settings",
]
