"""
Post store - identity and date indexes over posts, plus trending term counters
"""
from datetime import datetime
from typing import List, Optional
import logging
import re

from ..config import settings
from ..domain.models import Post, TrendingTerm
from ..domain.repositories import IPostRepository
from .ordered_index import OrderedIndex
from .selection import select_top

logger = logging.getLogger(__name__)


class PostStore(IPostRepository):
    """In-memory post repository backed by three ordered indexes"""

    def __init__(self):
        self._by_id: OrderedIndex[int, Post] = OrderedIndex()
        self._by_date: OrderedIndex[datetime, Post] = OrderedIndex()
        self._terms: OrderedIndex[str, TrendingTerm] = OrderedIndex()

        self._marker = settings.TRENDING_MARKER
        self._trending_limit = settings.TRENDING_LIMIT
        # a marker followed by a run of ASCII word characters or a run of anything else
        self._term_pattern = re.compile(re.escape(self._marker) + r"(\w+|\W+)", re.ASCII)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, post_id: int) -> bool:
        return post_id in self._by_id

    def extract_terms(self, text: str) -> List[str]:
        """Every marked token in text, without the marker, repeats included"""
        if not text:
            return []
        return self._term_pattern.findall(text)

    def add_post(self, post: Post) -> bool:
        """Store a new post and count its trending terms; False on duplicate id"""
        if post.id in self._by_id:
            logger.debug(f"Rejected duplicate post {post.id}")
            return False

        self._by_id.insert(post.id, post)
        self._by_date.insert(post.posted_at, post)

        for term in self.extract_terms(post.text):
            trending = self._terms.get(term)
            if trending is None:
                self._terms.insert(term, TrendingTerm(term=term))
            else:
                trending.record_occurrence()

        logger.debug(f"Added post {post.id} by author {post.author_id}")
        return True

    def get_post(self, post_id: int) -> Optional[Post]:
        return self._by_id.get(post_id)

    def list_posts(self) -> List[Post]:
        return list(self._by_date.values())

    def list_by_author(self, author_id: int) -> List[Post]:
        return [post for post in self._by_date.values() if post.author_id == author_id]

    def search(self, query: Optional[str]) -> List[Post]:
        """Posts whose text contains query (case sensitive)"""
        if not query:
            return []
        return [post for post in self._by_date.values() if query in post.text]

    def list_on(self, moment: Optional[datetime]) -> List[Post]:
        """Posts whose posted_at equals moment exactly"""
        if moment is None:
            return []

        def probe(posted_at: datetime) -> int:
            return (posted_at > moment) - (posted_at < moment)

        return list(self._by_date.walk(probe))

    def list_before(self, cutoff: Optional[datetime]) -> List[Post]:
        """Posts with posted_at <= cutoff, most recent first"""
        if cutoff is None:
            return []
        return list(self._by_date.walk(lambda posted_at: 0 if posted_at <= cutoff else 1))

    def list_tagged(self, term: Optional[str]) -> List[Post]:
        """Posts carrying the marked token term, most recent first"""
        if not term or term not in self._terms:
            return []
        return [post for post in self._by_date.values() if term in self.extract_terms(post.text)]

    def get_trending_term(self, term: str) -> Optional[TrendingTerm]:
        return self._terms.get(term)

    def occurrence_count(self, term: str) -> Optional[int]:
        trending = self._terms.get(term)
        return trending.occurrence_count if trending is not None else None

    def get_trending(self) -> List[Optional[str]]:
        """
        Most used terms with their marker, most used first

        Returns:
            Exactly TRENDING_LIMIT entries; missing slots are None. Terms
            with equal counts come in no particular order.
        """
        top = select_top(
            list(self._terms.values()),
            key=lambda trending: trending.occurrence_count,
            limit=self._trending_limit,
        )
        trending: List[Optional[str]] = [self._marker + item.term for item in top]
        trending.extend([None] * (self._trending_limit - len(trending)))
        return trending
