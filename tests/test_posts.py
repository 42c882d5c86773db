from __future__ import annotations

from datetime import datetime, timedelta

from microblog_store import Post, PostStore, TrendingTerm

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def _post(post_id: int, author_id: int, text: str, minutes: int) -> Post:
    return Post(id=post_id, author_id=author_id, text=text, posted_at=at(minutes))


def test_add_then_get(posts: PostStore):
    post = _post(1, 7, "hello", 0)
    assert posts.add_post(post) is True
    assert posts.get_post(1) == post
    assert posts.get_post(2) is None


def test_duplicate_post_does_not_count_terms_twice(posts: PostStore):
    posts.add_post(_post(1, 7, "#python", 0))
    assert posts.add_post(_post(1, 7, "#python #python", 1)) is False

    assert posts.occurrence_count("python") == 1
    assert len(posts) == 1


def test_listings_most_recent_first(posts: PostStore):
    posts.add_post(_post(1, 7, "first", 1))
    posts.add_post(_post(2, 8, "second", 3))
    posts.add_post(_post(3, 7, "third", 2))

    assert [post.id for post in posts.list_posts()] == [2, 3, 1]
    assert [post.id for post in posts.list_by_author(7)] == [3, 1]
    assert posts.list_by_author(99) == []


def test_search(posts: PostStore):
    posts.add_post(_post(1, 7, "Good morning", 1))
    posts.add_post(_post(2, 7, "good night", 2))

    assert [post.id for post in posts.search("good")] == [2]
    assert [post.id for post in posts.search("o")] == [2, 1]
    assert posts.search(None) == []
    assert posts.search("") == []


def test_list_on_exact_moment(posts: PostStore):
    for post_id, minutes in enumerate([5, 3, 5, 1, 5, 8, 3, 5]):
        posts.add_post(_post(post_id, 1, "text", minutes))

    assert [post.id for post in posts.list_on(at(5))] == [0, 2, 4, 7]
    assert [post.id for post in posts.list_on(at(3))] == [1, 6]
    assert posts.list_on(at(4)) == []
    assert posts.list_on(None) == []


def test_list_before_is_inclusive(posts: PostStore):
    for post_id, minutes in [(1, 1), (2, 2), (3, 3)]:
        posts.add_post(_post(post_id, 1, "text", minutes))

    assert [post.id for post in posts.list_before(at(2))] == [2, 1]
    assert posts.list_before(at(0)) == []
    assert posts.list_before(None) == []


def test_repeated_term_in_one_post_counts_twice(posts: PostStore):
    posts.add_post(_post(1, 1, "hello #world #world", 0))

    assert posts.occurrence_count("world") == 2
    assert "#world" in posts.get_trending()


def test_occurrences_accumulate_across_posts(posts: PostStore):
    posts.add_post(_post(1, 1, "#a #b", 0))
    posts.add_post(_post(2, 1, "#a and #a again", 1))
    posts.add_post(_post(3, 1, "#A is different", 2))

    assert posts.occurrence_count("a") == 3
    assert posts.occurrence_count("b") == 1
    assert posts.occurrence_count("A") == 1
    assert posts.occurrence_count("missing") is None
    assert posts.get_trending_term("a") == TrendingTerm(term="a", occurrence_count=3)


def test_non_word_runs_are_terms_too(posts: PostStore):
    assert posts.extract_terms("#!!! then #ok, and #café") == ["!!! ", "ok", "caf"]

    posts.add_post(_post(1, 1, "wow #!!", 0))
    assert posts.occurrence_count("!!") == 1


def test_trending_ordered_by_count(posts: PostStore):
    posts.add_post(_post(1, 1, "#low #mid #mid #high #high #high", 0))

    trending = posts.get_trending()

    assert trending[:3] == ["#high", "#mid", "#low"]
    assert trending[3:] == [None] * 7


def test_trending_caps_at_ten(posts: PostStore):
    text = " ".join(f"#t{index}" for index in range(15))
    posts.add_post(_post(1, 1, text, 0))
    posts.add_post(_post(2, 1, "#t3 #t3", 1))

    trending = posts.get_trending()

    assert len(trending) == 10
    assert trending[0] == "#t3"
    assert None not in trending


def test_trending_on_empty_store(posts: PostStore):
    assert posts.get_trending() == [None] * 10


def test_list_tagged(posts: PostStore):
    posts.add_post(_post(1, 1, "#python rocks", 1))
    posts.add_post(_post(2, 1, "no tags here python", 2))
    posts.add_post(_post(3, 2, "more #python", 3))

    assert [post.id for post in posts.list_tagged("python")] == [3, 1]
    assert posts.list_tagged("rust") == []
    assert posts.list_tagged(None) == []


def test_accented_letters_end_a_term(posts: PostStore):
    posts.add_post(_post(1, 1, "#café #über", 0))

    assert posts.occurrence_count("caf") == 1
    assert posts.occurrence_count("café") is None
    assert posts.occurrence_count("über") is None
    assert posts.occurrence_count("ü") == 1
    assert posts.extract_terms("#über") == ["ü"]
