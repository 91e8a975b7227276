import logging

from fastapi import FastAPI

from kenblog.routers import feeds, og, posts
from kenblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description=settings.SITE_DESCRIPTION)

app.include_router(feeds.router)
app.include_router(og.router)
app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": f"{settings.SITE_TITLE} is running"}
