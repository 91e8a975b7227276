import logging
from typing import List, Optional

import frontmatter
import markdown

from kenblog.i18n import get_other_lang, get_slug_from_id
from kenblog.schemas.post import Post, PostData

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


class PostsService:
    def __init__(self, repo):
        self.repo = repo
        self._posts: Optional[List[Post]] = None

    def get_all_posts(self) -> List[Post]:
        """All posts, newest first."""
        if self._posts is None:
            self._posts = sort_by_date_desc(self._load_posts())
        return list(self._posts)

    def get_posts_by_lang(self, lang: str) -> List[Post]:
        return [post for post in self.get_all_posts() if post.lang == lang]

    def get_alternate_lang_post(self, slug: str, lang: str) -> Optional[Post]:
        """Find the translation of `slug` in the language other than `lang`."""
        other_lang = get_other_lang(lang)
        return next(
            (
                post
                for post in self.get_all_posts()
                if post.slug == slug and post.lang == other_lang
            ),
            None,
        )

    def get_post(self, lang: str, slug: str) -> Optional[Post]:
        return next(
            (
                post
                for post in self.get_all_posts()
                if post.slug == slug and post.lang == lang
            ),
            None,
        )

    def _load_posts(self) -> List[Post]:
        posts = []
        for post_id in self.repo.list_post_ids():
            raw = self.repo.read_post(post_id)
            if raw is None:
                logger.warning(f"Post disappeared while loading: {post_id}")
                continue
            posts.append(parse_post(post_id, raw))
        logger.debug(f"Loaded {len(posts)} posts")
        return posts


def parse_post(post_id: str, raw: str) -> Post:
    """Parse frontmatter and body; malformed frontmatter is fatal."""
    try:
        parsed = frontmatter.loads(raw)
        data = PostData(**(parsed.metadata or {}))
    except Exception as e:
        logger.error(f"Failed to parse post {post_id}: {e}")
        raise
    return Post(
        id=post_id,
        slug=get_slug_from_id(post_id),
        data=data,
        body=parsed.content,
    )


def sort_by_date_desc(posts: List[Post]) -> List[Post]:
    return sorted(posts, key=lambda post: post.published, reverse=True)


def render_html(post: Post) -> str:
    return markdown.markdown(post.body, extensions=MARKDOWN_EXTENSIONS)
