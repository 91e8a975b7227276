import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from kenblog import dependencies as deps
from kenblog.i18n import is_valid_lang
from kenblog.services.feed_service import combined_feed, language_feed
from kenblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()

RSS_MEDIA_TYPE = "application/xml"


@router.get("/rss.xml")
def get_combined_feed(
    service: PostsService = Depends(deps.get_posts_service),
    app_settings=Depends(deps.get_settings),
):
    """RSS feed of every post in every language."""
    try:
        return Response(content=combined_feed(service, app_settings), media_type=RSS_MEDIA_TYPE)
    except Exception as e:
        logger.error(f"Unexpected error building combined feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build feed")


@router.get("/{lang}/rss.xml")
def get_language_feed(
    lang: str,
    service: PostsService = Depends(deps.get_posts_service),
    app_settings=Depends(deps.get_settings),
):
    if not is_valid_lang(lang):
        raise HTTPException(status_code=404, detail="Feed not found")
    try:
        return Response(
            content=language_feed(service, app_settings, lang), media_type=RSS_MEDIA_TYPE
        )
    except Exception as e:
        logger.error(f"Unexpected error building {lang} feed: {e}")
        raise HTTPException(status_code=500, detail="Failed to build feed")
