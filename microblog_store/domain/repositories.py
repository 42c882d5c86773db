"""
Repository interfaces - Define contracts for data access
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from .models import Account, Post, TrendingTerm


class IAccountRepository(ABC):
    """Account repository interface"""

    @abstractmethod
    def add_account(self, account: Account) -> bool:
        """Store a new account; False if the id is already taken"""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Find account by ID"""
        pass

    @abstractmethod
    def list_accounts(self) -> List[Account]:
        """All accounts, most recently joined first"""
        pass

    @abstractmethod
    def search(self, query: Optional[str]) -> List[Account]:
        """Accounts whose display name contains the query"""
        pass

    @abstractmethod
    def list_joined_before(self, cutoff: Optional[datetime]) -> List[Account]:
        """Accounts that joined on or before the cutoff"""
        pass


class IPostRepository(ABC):
    """Post repository interface"""

    @abstractmethod
    def add_post(self, post: Post) -> bool:
        """Store a new post and count its trending terms"""
        pass

    @abstractmethod
    def get_post(self, post_id: int) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    def list_posts(self) -> List[Post]:
        """All posts, most recent first"""
        pass

    @abstractmethod
    def list_by_author(self, author_id: int) -> List[Post]:
        """Posts written by an author, most recent first"""
        pass

    @abstractmethod
    def search(self, query: Optional[str]) -> List[Post]:
        """Posts whose text contains the query"""
        pass

    @abstractmethod
    def list_on(self, moment: Optional[datetime]) -> List[Post]:
        """Posts published exactly at the given moment"""
        pass

    @abstractmethod
    def list_before(self, cutoff: Optional[datetime]) -> List[Post]:
        """Posts published on or before the cutoff"""
        pass

    @abstractmethod
    def get_trending(self) -> List[Optional[str]]:
        """Most used marked terms, padded with None"""
        pass

    @abstractmethod
    def get_trending_term(self, term: str) -> Optional[TrendingTerm]:
        """Find trending counter by term"""
        pass


class IFollowRepository(ABC):
    """Follow graph repository interface"""

    @abstractmethod
    def add_edge(self, followee_id: int, follower_id: int, since: datetime) -> bool:
        """Record that follower_id follows followee_id"""
        pass

    @abstractmethod
    def followers_of(self, user_id: int) -> Optional[List[int]]:
        """Followers of a user, most recent first"""
        pass

    @abstractmethod
    def following_of(self, user_id: int) -> Optional[List[int]]:
        """Users followed by a user, most recent first"""
        pass

    @abstractmethod
    def is_follower(self, candidate_id: int, target_id: int) -> Optional[bool]:
        """Check if candidate follows target"""
        pass

    @abstractmethod
    def edge_count(self, user_id: int) -> Optional[int]:
        """Number of followers of a user"""
        pass

    @abstractmethod
    def mutual_followers(self, user_id: int, other_user_id: int) -> Optional[List[int]]:
        """Accounts following both users"""
        pass

    @abstractmethod
    def mutual_following(self, user_id: int, other_user_id: int) -> Optional[List[int]]:
        """Accounts followed by both users"""
        pass

    @abstractmethod
    def all_nodes_by_id(self) -> List[int]:
        """Every registered user ID in ascending order"""
        pass
