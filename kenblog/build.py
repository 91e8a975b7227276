"""Static build: write every feed and OG image to the output directory."""

import logging
from pathlib import Path
from typing import List, Tuple

from kenblog.i18n import SUPPORTED_LANGS
from kenblog.repos.posts_repo import FilesystemPostsRepo
from kenblog.schemas.post import Post
from kenblog.services.feed_service import combined_feed, language_feed
from kenblog.services.og_image_service import render_og_image, truetype_loader
from kenblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)


def get_og_static_paths(service: PostsService) -> List[Tuple[str, str, Post]]:
    """One (lang, slug, post) per post, like the OG image route expects."""
    return [(post.lang, post.slug, post) for post in service.get_all_posts()]


def build_feeds(service: PostsService, settings, output_dir: Path) -> List[Path]:
    written = [_write(output_dir / "rss.xml", combined_feed(service, settings))]
    for lang in SUPPORTED_LANGS:
        written.append(
            _write(output_dir / lang / "rss.xml", language_feed(service, settings, lang))
        )
    return written


def build_og_images(service: PostsService, settings, output_dir: Path, font_loader=None) -> List[Path]:
    font_loader = font_loader or truetype_loader(settings.OG_FONT_PATH)
    written = []
    seen = set()
    for lang, slug, post in get_og_static_paths(service):
        # Newest post wins, as in the OG route
        if (lang, slug) in seen:
            logger.warning(f"Skipping {post.id}: OG image for {lang}/{slug} already written")
            continue
        seen.add((lang, slug))
        try:
            png = render_og_image(post.data.title, settings.site_host, font_loader)
        except Exception as e:
            logger.error(f"Failed to render OG image for {post.id}: {e}")
            raise
        written.append(_write(output_dir / "og" / lang / f"{slug}.png", png))
    return written


def build_site(settings, font_loader=None) -> List[Path]:
    output_dir = Path(settings.OUTPUT_DIR)
    service = PostsService(repo=FilesystemPostsRepo(settings.CONTENT_DIR))

    written = build_feeds(service, settings, output_dir)
    written += build_og_images(service, settings, output_dir, font_loader=font_loader)

    logger.info(f"Wrote {len(written)} files to {output_dir}")
    return written


def _write(path: Path, content) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {path}")
    return path
