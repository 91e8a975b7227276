import datetime
import html
import logging
from dataclasses import dataclass
from email.utils import format_datetime
from typing import Iterable, List
from urllib.parse import urljoin

from kenblog.i18n import LANG_NAMES
from kenblog.schemas.post import Post

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedItem:
    title: str
    pub_date: datetime.datetime
    description: str
    link: str


def feed_items(posts: Iterable[Post]) -> List[FeedItem]:
    return [
        FeedItem(
            title=post.data.title,
            pub_date=post.published,
            description=post.data.description,
            link=post.url,
        )
        for post in posts
    ]


def build_rss(title: str, description: str, site: str, items: List[FeedItem]) -> str:
    """Render an RSS 2.0 document; item links are resolved against `site`."""
    site_url = site.rstrip("/") + "/"
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0">',
        "<channel>",
        f"<title>{html.escape(title)}</title>",
        f"<description>{html.escape(description)}</description>",
        f"<link>{html.escape(site_url)}</link>",
    ]
    for item in items:
        link = html.escape(urljoin(site_url, item.link))
        lines.extend(
            [
                "<item>",
                f"<title>{html.escape(item.title)}</title>",
                f"<link>{link}</link>",
                f'<guid isPermaLink="true">{link}</guid>',
                f"<description>{html.escape(item.description)}</description>",
                f"<pubDate>{_rfc822(item.pub_date)}</pubDate>",
                "</item>",
            ]
        )
    lines.extend(["</channel>", "</rss>"])
    return "\n".join(lines)


def combined_feed(service, settings) -> str:
    posts = service.get_all_posts()
    logger.info(f"Building combined feed with {len(posts)} items")
    return build_rss(
        title=settings.SITE_TITLE,
        description=settings.SITE_DESCRIPTION,
        site=settings.SITE_URL,
        items=feed_items(posts),
    )


def language_feed(service, settings, lang: str) -> str:
    posts = service.get_posts_by_lang(lang)
    logger.info(f"Building {lang} feed with {len(posts)} items")
    return build_rss(
        title=f"{settings.SITE_TITLE} ({LANG_NAMES.get(lang, lang)})",
        description=settings.SITE_DESCRIPTION,
        site=settings.SITE_URL,
        items=feed_items(posts),
    )


def _rfc822(value: datetime.datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(value.astimezone(datetime.timezone.utc), usegmt=True)
