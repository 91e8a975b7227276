"""Language helpers shared by the feeds, OG images and post routes.

Posts live in files named ``<slug>.<lang>.md``; the slug is what ties a
post to its translation.
"""

from typing import Dict, Literal, Tuple

Lang = Literal["ja", "en"]

SUPPORTED_LANGS: Tuple[str, ...] = ("ja", "en")
DEFAULT_LANG: Lang = "en"

LANG_NAMES: Dict[str, str] = {
    "ja": "日本語",
    "en": "English",
}

UI_STRINGS: Dict[str, Dict[str, str]] = {
    "ja": {
        "posts": "記事一覧",
        "rss": "RSS",
        "home": "ホーム",
        "readMore": "続きを読む",
        "postedOn": "投稿日:",
        "tags": "タグ:",
        "notFound": "ページが見つかりません",
        "notFoundMessage": "お探しのページは存在しないか、移動した可能性があります。",
        "backToHome": "ホームに戻る",
        "langSwitch": "English",
        "allPosts": "すべての記事",
    },
    "en": {
        "posts": "Posts",
        "rss": "RSS",
        "home": "Home",
        "readMore": "Read more",
        "postedOn": "Posted on:",
        "tags": "Tags:",
        "notFound": "Page Not Found",
        "notFoundMessage": "The page you are looking for does not exist or has been moved.",
        "backToHome": "Back to Home",
        "langSwitch": "日本語",
        "allPosts": "All Posts",
    },
}


def t(lang: str, key: str) -> str:
    """Look up a UI string, falling back to the default language, then the key."""
    return (
        UI_STRINGS.get(lang, {}).get(key)
        or UI_STRINGS[DEFAULT_LANG].get(key)
        or key
    )


def is_valid_lang(value: str) -> bool:
    return value in SUPPORTED_LANGS


def get_other_lang(lang: str) -> str:
    return "en" if lang == "ja" else "ja"


def get_lang_from_path(path: str) -> str:
    segments = path.split("/")
    lang = segments[1] if len(segments) > 1 else ""
    if is_valid_lang(lang):
        return lang
    return DEFAULT_LANG


def get_slug_from_id(post_id: str) -> str:
    """
    Derive the language-agnostic slug from a post id.

    "hello-world.ja.md" -> "hello-world"
    "notes.v2.md"       -> "notes.v2" (no recognized language part)
    """
    without_ext = post_id.removesuffix(".md")
    base, sep, lang_part = without_ext.rpartition(".")
    if sep and is_valid_lang(lang_part):
        return base
    return without_ext
