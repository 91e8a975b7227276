import textwrap

import pytest
from PIL import ImageFont

from kenblog.services.posts_service import PostsService
from kenblog.settings import Settings


class FakeRepo:
    """
    In-memory stand-in for FilesystemPostsRepo.
    Set track_calls=True to record the order of read_post() calls.
    """

    def __init__(self, raw_by_id: dict, track_calls: bool = False):
        self.raw_by_id = raw_by_id
        self.track_calls = track_calls
        self.calls = []

    def list_post_ids(self):
        if self.track_calls:
            self.calls.append("list_post_ids")
        return sorted(self.raw_by_id)

    def read_post(self, post_id: str):
        if self.track_calls:
            self.calls.append(post_id)
        raw = self.raw_by_id.get(post_id)
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


def make_post_md(title, date, lang, description="desc", tags=None, body="Body text."):
    tags_line = f"tags: [{', '.join(tags)}]\n" if tags else ""
    return (
        "---\n"
        f"title: {title}\n"
        f'date: "{date}"\n'
        f"description: {description}\n"
        f"{tags_line}"
        f"lang: {lang}\n"
        "---\n"
        f"{body}\n"
    )


SAMPLE_POSTS = {
    "hello-world.en.md": make_post_md("Hello World", "2024-01-01", "en", tags=["intro"]),
    "hello-world.ja.md": make_post_md("こんにちは世界", "2024-01-01", "ja", tags=["intro"]),
    "astro-tips.en.md": make_post_md("Astro Tips", "2024-03-15", "en"),
    "only-japanese.ja.md": make_post_md("日本語だけ", "2024-02-10", "ja"),
    "2023/old-news.en.md": make_post_md("Old News", "2023-06-30T09:00:00Z", "en"),
}


@pytest.fixture
def sample_repo():
    return FakeRepo(dict(SAMPLE_POSTS))


@pytest.fixture
def sample_service(sample_repo):
    return PostsService(repo=sample_repo)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        SITE_URL="https://blog.example.com",
        SITE_TITLE="Test Blog",
        SITE_DESCRIPTION="A test blog",
        CONTENT_DIR=str(tmp_path / "posts"),
        OUTPUT_DIR=str(tmp_path / "dist"),
        OG_FONT_PATH=str(tmp_path / "missing-font.otf"),
    )


@pytest.fixture
def font_loader():
    """Pillow's bundled scalable font, so tests need no font file."""
    return lambda size: ImageFont.load_default(size=size)
