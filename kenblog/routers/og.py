import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from kenblog import dependencies as deps
from kenblog.services.og_image_service import CACHE_CONTROL, render_og_image
from kenblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/og/{lang}/{slug:path}.png")
def get_og_image(
    lang: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    app_settings=Depends(deps.get_settings),
    font_loader=Depends(deps.get_font_loader),
):
    """
    Render the Open-Graph card of a post
    """
    try:
        post = service.get_post(lang, slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        png = render_og_image(post.data.title, app_settings.site_host, font_loader)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to render OG image for {lang}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render image")

    headers = {
        "Content-Length": str(len(png)),
        "Cache-Control": CACHE_CONTROL,
    }
    return Response(content=png, media_type="image/png", headers=headers)
