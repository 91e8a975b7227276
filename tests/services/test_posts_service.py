import datetime

import pytest
from pydantic import ValidationError

from kenblog.schemas.post import Post, PostData, parse_iso_date
from kenblog.services.posts_service import (
    PostsService,
    parse_post,
    render_html,
    sort_by_date_desc,
)
from tests.conftest import FakeRepo, make_post_md


def test_get_all_posts_sorts_by_date_desc(sample_service):
    result = sample_service.get_all_posts()

    assert [(p.lang, p.slug) for p in result] == [
        ("en", "astro-tips"),
        ("ja", "only-japanese"),
        ("en", "hello-world"),
        ("ja", "hello-world"),
        ("en", "2023/old-news"),
    ]
    assert all(isinstance(p, Post) for p in result)


def test_get_all_posts_loads_once(sample_repo):
    sample_repo.track_calls = True
    service = PostsService(repo=sample_repo)

    service.get_all_posts()
    service.get_posts_by_lang("ja")
    service.get_alternate_lang_post("hello-world", "en")

    assert sample_repo.calls.count("list_post_ids") == 1


def test_get_posts_by_lang_filters_and_sorts(sample_service):
    ja = sample_service.get_posts_by_lang("ja")
    en = sample_service.get_posts_by_lang("en")

    assert [p.slug for p in ja] == ["only-japanese", "hello-world"]
    assert all(p.lang == "ja" for p in ja)
    assert [p.slug for p in en] == ["astro-tips", "hello-world", "2023/old-news"]
    dates = [p.published for p in en]
    assert dates == sorted(dates, reverse=True)


def test_get_posts_by_lang_unknown_language_is_empty(sample_service):
    assert sample_service.get_posts_by_lang("fr") == []


def test_get_alternate_lang_post_finds_translation(sample_service):
    alt = sample_service.get_alternate_lang_post("hello-world", "en")

    assert alt is not None
    assert alt.lang == "ja"
    assert alt.id == "hello-world.ja.md"


def test_get_alternate_lang_post_none_without_translation(sample_service):
    assert sample_service.get_alternate_lang_post("astro-tips", "en") is None
    assert sample_service.get_alternate_lang_post("only-japanese", "ja") is None


def test_get_alternate_lang_post_requires_exact_slug(sample_service):
    assert sample_service.get_alternate_lang_post("hello", "en") is None
    assert sample_service.get_alternate_lang_post("hello-world.ja", "en") is None


def test_get_alternate_lang_post_returns_newest_duplicate():
    repo = FakeRepo(
        {
            "dup.en.md": make_post_md("Dup", "2024-01-01", "en"),
            "dup.ja": make_post_md("Old", "2023-01-01", "ja"),
            "dup.ja.md": make_post_md("New", "2024-05-01", "ja"),
        }
    )

    alt = PostsService(repo=repo).get_alternate_lang_post("dup", "en")

    assert alt.data.title == "New"


def test_get_post_matches_lang_and_slug(sample_service):
    post = sample_service.get_post("ja", "hello-world")

    assert post.data.title == "こんにちは世界"
    assert sample_service.get_post("ja", "astro-tips") is None


def test_parse_post_builds_slug_data_and_body():
    raw = make_post_md(
        "Title", "2024-02-02", "en", description="About", tags=["a", "b"], body="# Heading"
    )

    post = parse_post("my-post.en.md", raw)

    assert post.id == "my-post.en.md"
    assert post.slug == "my-post"
    assert post.data.tags == ["a", "b"]
    assert post.data.cover is None
    assert post.body.strip() == "# Heading"
    assert post.url == "/en/posts/my-post/"


def test_parse_post_converts_yaml_dates_to_iso_strings():
    raw = "---\ntitle: T\ndate: 2024-06-01\ndescription: d\nlang: ja\n---\nbody\n"

    post = parse_post("t.ja.md", raw)

    assert post.data.date == "2024-06-01"
    assert post.data.tags == []


def test_parse_post_keeps_cover_fields():
    raw = (
        "---\ntitle: T\ndate: '2024-06-01'\ndescription: d\nlang: en\n"
        "cover: ./cover.png\ncoverAlt: A cover\nextra: ignored\n---\nbody\n"
    )

    post = parse_post("t.en.md", raw)

    assert post.data.cover == "./cover.png"
    assert post.data.coverAlt == "A cover"


@pytest.mark.parametrize(
    "raw",
    [
        "---\ntitle: T\ndate: '2024-01-01'\ndescription: d\nlang: fr\n---\n",
        "---\ntitle: T\ndescription: d\nlang: en\n---\n",
        "no frontmatter at all",
    ],
)
def test_parse_post_raises_on_malformed_frontmatter(raw):
    with pytest.raises(ValidationError):
        parse_post("bad.en.md", raw)


def test_get_all_posts_propagates_parse_failure():
    repo = FakeRepo({"bad.en.md": "---\ntitle: only a title\n---\n"})

    with pytest.raises(ValidationError):
        PostsService(repo=repo).get_all_posts()


def test_sort_by_date_desc_is_stable_for_equal_dates():
    data = dict(title="t", description="d", lang="en")
    posts = [
        Post(id=f"{name}.en.md", slug=name, data=PostData(date=date, **data))
        for name, date in [("a", "2024-01-01"), ("b", "2024-01-01"), ("c", "2024-02-01")]
    ]

    assert [p.slug for p in sort_by_date_desc(posts)] == ["c", "a", "b"]


def test_parse_iso_date_treats_naive_as_utc():
    assert parse_iso_date("2024-01-01") == datetime.datetime(
        2024, 1, 1, tzinfo=datetime.timezone.utc
    )
    assert parse_iso_date("2024-01-01T09:00:00+09:00") == datetime.datetime(
        2024, 1, 1, tzinfo=datetime.timezone.utc
    )
    assert parse_iso_date("2024-01-01T00:00:00Z").tzinfo is not None


def test_render_html_renders_markdown_body():
    post = parse_post(
        "x.en.md",
        make_post_md("X", "2024-01-01", "en", body="# Title\n\n```\ncode\n```"),
    )

    html = render_html(post)

    assert "<h1>Title</h1>" in html
    assert "<code>code" in html


def test_parse_post_rejects_non_iso_date(caplog):
    raw = make_post_md("Slashy", "2024/01/15", "en")

    with caplog.at_level("ERROR"):
        with pytest.raises(ValidationError):
            parse_post("slashy.en.md", raw)

    assert "slashy.en.md" in caplog.text


def test_get_all_posts_fails_at_parse_for_non_iso_date():
    repo = FakeRepo(
        {
            "ok.en.md": make_post_md("Ok", "2024-01-01", "en"),
            "slashy.en.md": make_post_md("Slashy", "2024/01/15", "en"),
        }
    )

    with pytest.raises(ValidationError):
        PostsService(repo=repo).get_all_posts()
