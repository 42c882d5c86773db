"""
Relationship graph - mirrored follower/following adjacency
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
import logging

from ..domain.models import FollowEdge
from ..domain.repositories import IFollowRepository
from .selection import select_top

logger = logging.getLogger(__name__)


@dataclass
class _Adjacency:
    """Edges of one account in one direction: peer id -> since"""
    edges: Dict[int, datetime] = field(default_factory=dict)
    count: int = 0

    def add(self, peer_id: int, since: datetime) -> None:
        self.edges[peer_id] = since
        self.count += 1


class RelationshipGraph(IFollowRepository):
    """
    Follow graph stored twice, once per traversal direction.

    ``_followers[x]`` holds the accounts following x and ``_following[y]`` the
    accounts y follows. Both maps are only ever written by ``add_edge`` so the
    two views cannot diverge. Every account touched by an edge is registered
    in both maps.
    """

    def __init__(self):
        self._followers: Dict[int, _Adjacency] = {}
        self._following: Dict[int, _Adjacency] = {}

    def __len__(self) -> int:
        return len(self._followers)

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._followers

    def _ensure_node(self, user_id: int) -> None:
        if user_id not in self._followers:
            self._followers[user_id] = _Adjacency()
            self._following[user_id] = _Adjacency()

    def add_edge(self, followee_id: int, follower_id: int, since: datetime) -> bool:
        """
        Record that follower_id follows followee_id

        Returns:
            True if a new edge was created, False if it already existed
        """
        self._ensure_node(followee_id)
        self._ensure_node(follower_id)

        followers = self._followers[followee_id]
        if follower_id in followers.edges:
            logger.debug(f"Edge {follower_id} -> {followee_id} already exists")
            return False

        followers.add(follower_id, since)
        self._following[follower_id].add(followee_id, since)
        logger.debug(f"Added edge {follower_id} -> {followee_id}")
        return True

    def add(self, edge: FollowEdge) -> bool:
        """Record a follow edge value"""
        return self.add_edge(edge.followee_id, edge.follower_id, edge.since)

    @staticmethod
    def _by_recency(adjacency: _Adjacency) -> List[int]:
        ordered = select_top(list(adjacency.edges.items()), key=lambda pair: pair[1])
        return [peer_id for peer_id, _ in ordered]

    def follower_edges(self, user_id: int) -> Optional[List[FollowEdge]]:
        """Edges pointing at user_id, most recent first"""
        adjacency = self._followers.get(user_id)
        if adjacency is None:
            return None
        edges = [
            FollowEdge(followee_id=user_id, follower_id=peer_id, since=since)
            for peer_id, since in adjacency.edges.items()
        ]
        return select_top(edges, key=lambda edge: edge.since)

    def following_edges(self, user_id: int) -> Optional[List[FollowEdge]]:
        """Edges leaving user_id, most recent first"""
        adjacency = self._following.get(user_id)
        if adjacency is None:
            return None
        edges = [
            FollowEdge(followee_id=peer_id, follower_id=user_id, since=since)
            for peer_id, since in adjacency.edges.items()
        ]
        return select_top(edges, key=lambda edge: edge.since)

    def followers_of(self, user_id: int) -> Optional[List[int]]:
        """Followers of user_id, most recent first; None if never registered"""
        adjacency = self._followers.get(user_id)
        if adjacency is None:
            return None
        return self._by_recency(adjacency)

    def following_of(self, user_id: int) -> Optional[List[int]]:
        """Accounts user_id follows, most recent first; None if never registered"""
        adjacency = self._following.get(user_id)
        if adjacency is None:
            return None
        return self._by_recency(adjacency)

    def is_follower(self, candidate_id: int, target_id: int) -> Optional[bool]:
        """Check if candidate follows target; None if target was never registered"""
        adjacency = self._followers.get(target_id)
        if adjacency is None:
            logger.debug(f"Membership check against unknown user {target_id}")
            return None
        return candidate_id in adjacency.edges

    def edge_count(self, user_id: int) -> Optional[int]:
        """Cached number of followers; None if never registered"""
        adjacency = self._followers.get(user_id)
        return adjacency.count if adjacency is not None else None

    def following_count(self, user_id: int) -> Optional[int]:
        """Cached number of followed accounts; None if never registered"""
        adjacency = self._following.get(user_id)
        return adjacency.count if adjacency is not None else None

    @staticmethod
    def _intersect(first: _Adjacency, second: _Adjacency) -> List[int]:
        seen: Dict[int, datetime] = {}
        for peer_id, since in first.edges.items():
            if peer_id not in seen or since > seen[peer_id]:
                seen[peer_id] = since

        common: Dict[int, datetime] = {}
        for peer_id, since in second.edges.items():
            if peer_id not in seen:
                continue
            if peer_id not in common or since > common[peer_id]:
                common[peer_id] = since

        ordered = select_top(list(common.items()), key=lambda pair: pair[1])
        return [peer_id for peer_id, _ in ordered]

    def mutual_followers(self, user_id: int, other_user_id: int) -> Optional[List[int]]:
        """
        Accounts following both users

        Returns:
            Ids ordered by the time they followed other_user_id, most recent
            first; empty on no overlap; None if either user is unknown
        """
        first = self._followers.get(user_id)
        second = self._followers.get(other_user_id)
        if first is None or second is None:
            return None
        return self._intersect(first, second)

    def mutual_following(self, user_id: int, other_user_id: int) -> Optional[List[int]]:
        """Accounts followed by both users, same ordering as mutual_followers"""
        first = self._following.get(user_id)
        second = self._following.get(other_user_id)
        if first is None or second is None:
            return None
        return self._intersect(first, second)

    def all_nodes_by_id(self) -> List[int]:
        """
        Every registered user ID, ascending.

        Served as "top users" even though it ranks by identifier rather than
        follower count.
        """
        return select_top(list(self._followers), key=lambda user_id: -user_id)

    def suggestions_for(self, user_id: int, limit: int) -> Optional[List[int]]:
        """
        Friends of friends that user_id does not follow yet

        Candidates are ranked by how many of the user's followed accounts
        follow them.
        """
        following = self._following.get(user_id)
        if following is None:
            return None

        scores: Dict[int, int] = {}
        for followed_id in following.edges:
            for candidate_id in self._following[followed_id].edges:
                if candidate_id == user_id or candidate_id in following.edges:
                    continue
                scores[candidate_id] = scores.get(candidate_id, 0) + 1

        ranked = select_top(list(scores.items()), key=lambda pair: pair[1], limit=limit)
        return [candidate_id for candidate_id, _ in ranked]
