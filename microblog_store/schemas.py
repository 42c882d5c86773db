"""
Pydantic schemas handed to the serving layer
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from .domain.models import FollowStatus, RelationshipType


class AccountResponse(BaseModel):
    """Account as exposed to callers"""

    id: int
    display_name: str
    joined_at: datetime


class PostResponse(BaseModel):
    """Post as exposed to callers"""

    id: int
    author_id: int
    text: str
    posted_at: datetime


class FollowResponse(BaseModel):
    """Response after follow action"""

    success: bool
    status: FollowStatus
    message: str


class UserFollowInfo(BaseModel):
    """User follow information"""

    user_id: int
    created_at: datetime


class FollowersResponse(BaseModel):
    """Response with followers list"""

    followers: List[UserFollowInfo]
    total: int
    page: int
    page_size: int
    has_more: bool


class FollowingResponse(BaseModel):
    """Response with following list"""

    following: List[UserFollowInfo]
    total: int
    page: int
    page_size: int
    has_more: bool


class RelationshipResponse(BaseModel):
    """Response with relationship info between two users"""

    user_id: int
    target_user_id: int
    relationship: RelationshipType
    is_following: bool
    is_followed_by: bool
    is_mutual: bool


class GraphStatsResponse(BaseModel):
    """User's graph statistics"""

    user_id: int
    follower_count: int
    following_count: int
    post_count: int


class MutualFollowersResponse(BaseModel):
    """Response with mutual followers"""

    user_id: int
    other_user_id: int
    mutual_followers: List[int]
    count: int


class FollowSuggestionsResponse(BaseModel):
    """Response with follow suggestions"""

    suggestions: List[int]
    count: int


class TrendingResponse(BaseModel):
    """Top trending terms; unused slots are None"""

    terms: List[Optional[str]]


class FeedResponse(BaseModel):
    """Posts from followed accounts, most recent first"""

    user_id: int
    posts: List[PostResponse]
    count: int
    limit: int = Field(..., ge=1)
