"""
Domain models - Core business entities
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class FollowStatus(str, Enum):
    """Result of checking whether one account follows another"""
    FOLLOWING = "following"
    NOT_FOLLOWING = "not_following"


class RelationshipType(str, Enum):
    """Type of relationship between users"""
    FOLLOWING = "following"
    FOLLOWED_BY = "followed_by"
    MUTUAL = "mutual"
    NONE = "none"


@dataclass(frozen=True)
class Account:
    """Account domain model"""
    id: int
    display_name: str
    joined_at: datetime


@dataclass(frozen=True)
class Post:
    """Post domain model"""
    id: int
    author_id: int
    text: str
    posted_at: datetime


@dataclass(frozen=True)
class FollowEdge:
    """Directed follow relationship: follower_id follows followee_id"""
    followee_id: int
    follower_id: int
    since: datetime


@dataclass
class TrendingTerm:
    """Marked token seen in post text, without its marker"""
    term: str
    occurrence_count: int = 1

    def record_occurrence(self) -> None:
        """Count one more textual occurrence"""
        self.occurrence_count += 1
