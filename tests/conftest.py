from __future__ import annotations

import pytest

from microblog_store import AccountStore, MicroblogService, PostStore, RelationshipGraph


@pytest.fixture()
def accounts() -> AccountStore:
    return AccountStore()


@pytest.fixture()
def posts() -> PostStore:
    return PostStore()


@pytest.fixture()
def graph() -> RelationshipGraph:
    return RelationshipGraph()


@pytest.fixture()
def service() -> MicroblogService:
    return MicroblogService()
