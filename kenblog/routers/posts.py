import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from kenblog import dependencies as deps
from kenblog.i18n import is_valid_lang
from kenblog.schemas.post import PostDetail, PostSummary
from kenblog.services.posts_service import PostsService, render_html

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{lang}/posts", response_model=List[PostSummary])
@router.get("/{lang}/posts/", response_model=List[PostSummary])
def list_posts(lang: str, service: PostsService = Depends(deps.get_posts_service)):
    """Get the posts of one language, newest first."""
    if not is_valid_lang(lang):
        raise HTTPException(status_code=404, detail="Language not supported")
    try:
        return [PostSummary.from_post(post) for post in service.get_posts_by_lang(lang)]
    except Exception as e:
        logger.error(f"Unexpected error listing {lang} posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/{lang}/posts/{slug:path}", response_model=PostDetail)
def get_post(
    lang: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with its rendered body and translation link."""
    if not is_valid_lang(lang):
        raise HTTPException(status_code=404, detail="Language not supported")
    slug = slug.strip("/")
    try:
        post = service.get_post(lang, slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        alternate = service.get_alternate_lang_post(slug, lang)
        summary = PostSummary.from_post(post)
        return PostDetail(
            **summary.model_dump(),
            content=post.body,
            html=render_html(post),
            alternate=alternate.url if alternate else None,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {lang}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
