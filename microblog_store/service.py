"""
Microblog Service business logic
"""
from datetime import datetime
from itertools import islice
from typing import List, Optional, Tuple
import logging

from .config import settings
from .domain.models import Account, FollowEdge, FollowStatus, Post, RelationshipType
from .infrastructure.accounts import AccountStore
from .infrastructure.graph import RelationshipGraph
from .infrastructure.posts import PostStore
from .schemas import (
    AccountResponse,
    FeedResponse,
    FollowersResponse,
    FollowingResponse,
    FollowResponse,
    FollowSuggestionsResponse,
    GraphStatsResponse,
    MutualFollowersResponse,
    PostResponse,
    RelationshipResponse,
    TrendingResponse,
    UserFollowInfo,
)

logger = logging.getLogger(__name__)


class MicroblogService:
    """Business logic over the account, post and follow stores"""

    def __init__(
        self,
        accounts: Optional[AccountStore] = None,
        posts: Optional[PostStore] = None,
        graph: Optional[RelationshipGraph] = None,
    ):
        self.accounts = accounts if accounts is not None else AccountStore()
        self.posts = posts if posts is not None else PostStore()
        self.graph = graph if graph is not None else RelationshipGraph()

    def register_account(self, account: Account) -> bool:
        """Store a new account; False if the id is already taken"""
        created = self.accounts.add_account(account)
        if not created:
            logger.info(f"Account {account.id} already registered")
        return created

    def get_account(self, account_id: int) -> Optional[AccountResponse]:
        account = self.accounts.get_account(account_id)
        if account is None:
            return None
        return AccountResponse(
            id=account.id,
            display_name=account.display_name,
            joined_at=account.joined_at,
        )

    def publish_post(self, post: Post) -> bool:
        """Store a new post; False if the id is already taken"""
        created = self.posts.add_post(post)
        if not created:
            logger.info(f"Post {post.id} already published")
        return created

    def follow_user(
        self, follower_id: int, following_id: int, since: datetime
    ) -> FollowResponse:
        """
        Follow a user

        Args:
            follower_id: User who is following
            following_id: User to be followed
            since: When the follow happened

        Returns:
            FollowResponse with status
        """
        if follower_id == following_id:
            return FollowResponse(
                success=False,
                status=FollowStatus.NOT_FOLLOWING,
                message="You cannot follow yourself",
            )

        created = self.graph.add_edge(following_id, follower_id, since)
        if not created:
            return FollowResponse(
                success=False,
                status=FollowStatus.FOLLOWING,
                message="You are already following this user",
            )

        logger.info(f"User {follower_id} followed user {following_id}")
        return FollowResponse(
            success=True,
            status=FollowStatus.FOLLOWING,
            message="Successfully followed user",
        )

    @staticmethod
    def _paginate(
        edges: List[FollowEdge], page: int, page_size: int
    ) -> Tuple[List[FollowEdge], int, int, bool]:
        page = max(1, page)
        page_size = max(1, min(page_size, settings.MAX_PAGE_SIZE))
        offset = (page - 1) * page_size

        window = edges[offset:offset + page_size]
        has_more = len(edges) > offset + page_size
        return window, page, page_size, has_more

    def get_followers(
        self, user_id: int, page: int = 1, page_size: int = settings.DEFAULT_PAGE_SIZE
    ) -> Optional[FollowersResponse]:
        """
        Get user's followers

        Args:
            user_id: User ID
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            FollowersResponse, or None if the user has no graph record
        """
        edges = self.graph.follower_edges(user_id)
        if edges is None:
            return None

        window, page, page_size, has_more = self._paginate(edges, page, page_size)
        return FollowersResponse(
            followers=[
                UserFollowInfo(user_id=edge.follower_id, created_at=edge.since)
                for edge in window
            ],
            total=self.graph.edge_count(user_id),
            page=page,
            page_size=page_size,
            has_more=has_more,
        )

    def get_following(
        self, user_id: int, page: int = 1, page_size: int = settings.DEFAULT_PAGE_SIZE
    ) -> Optional[FollowingResponse]:
        """
        Get users that user is following

        Args:
            user_id: User ID
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            FollowingResponse, or None if the user has no graph record
        """
        edges = self.graph.following_edges(user_id)
        if edges is None:
            return None

        window, page, page_size, has_more = self._paginate(edges, page, page_size)
        return FollowingResponse(
            following=[
                UserFollowInfo(user_id=edge.followee_id, created_at=edge.since)
                for edge in window
            ],
            total=self.graph.following_count(user_id),
            page=page,
            page_size=page_size,
            has_more=has_more,
        )

    def get_relationship(
        self, current_user_id: int, target_user_id: int
    ) -> RelationshipResponse:
        """Get relationship between current user and target user"""
        is_following = bool(self.graph.is_follower(current_user_id, target_user_id))
        is_followed_by = bool(self.graph.is_follower(target_user_id, current_user_id))
        is_mutual = is_following and is_followed_by

        if is_mutual:
            relationship = RelationshipType.MUTUAL
        elif is_following:
            relationship = RelationshipType.FOLLOWING
        elif is_followed_by:
            relationship = RelationshipType.FOLLOWED_BY
        else:
            relationship = RelationshipType.NONE

        return RelationshipResponse(
            user_id=current_user_id,
            target_user_id=target_user_id,
            relationship=relationship,
            is_following=is_following,
            is_followed_by=is_followed_by,
            is_mutual=is_mutual,
        )

    def get_user_stats(self, user_id: int) -> Optional[GraphStatsResponse]:
        """Get user's graph statistics; None for an unknown user"""
        if user_id not in self.accounts and user_id not in self.graph:
            return None

        return GraphStatsResponse(
            user_id=user_id,
            follower_count=self.graph.edge_count(user_id) or 0,
            following_count=self.graph.following_count(user_id) or 0,
            post_count=len(self.posts.list_by_author(user_id)),
        )

    def get_mutual_followers(
        self, user_id: int, other_user_id: int, limit: int = settings.DEFAULT_PAGE_SIZE
    ) -> MutualFollowersResponse:
        """Get mutual followers between two users"""
        mutual = self.graph.mutual_followers(user_id, other_user_id) or []
        limit = max(0, min(limit, settings.MAX_PAGE_SIZE))
        mutual = mutual[:limit]
        return MutualFollowersResponse(
            user_id=user_id,
            other_user_id=other_user_id,
            mutual_followers=mutual,
            count=len(mutual),
        )

    def get_follow_suggestions(
        self, user_id: int, limit: int = settings.SUGGESTION_LIMIT
    ) -> FollowSuggestionsResponse:
        """Get follow suggestions (friends of friends)"""
        suggestions = self.graph.suggestions_for(user_id, limit) or []
        return FollowSuggestionsResponse(suggestions=suggestions, count=len(suggestions))

    def get_trending(self) -> TrendingResponse:
        return TrendingResponse(terms=self.posts.get_trending())

    def get_feed(
        self, user_id: int, limit: int = settings.DEFAULT_PAGE_SIZE
    ) -> FeedResponse:
        """
        Get posts from the accounts a user follows

        Args:
            user_id: User ID
            limit: Maximum number of posts, clamped to 1..MAX_PAGE_SIZE

        Returns:
            FeedResponse with the most recent posts first
        """
        limit = max(1, min(limit, settings.MAX_PAGE_SIZE))
        followed = set(self.graph.following_of(user_id) or [])
        recent = (post for post in self.posts.list_posts() if post.author_id in followed)
        posts = [
            PostResponse(
                id=post.id,
                author_id=post.author_id,
                text=post.text,
                posted_at=post.posted_at,
            )
            for post in islice(recent, limit)
        ]
        return FeedResponse(user_id=user_id, posts=posts, count=len(posts), limit=limit)
