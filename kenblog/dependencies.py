from fastapi import Depends

from kenblog.repos.posts_repo import FilesystemPostsRepo
from kenblog.services.og_image_service import truetype_loader
from kenblog.services.posts_service import PostsService
from kenblog.settings import settings


def get_settings():
    return settings


def get_posts_repo(app_settings=Depends(get_settings)):
    return FilesystemPostsRepo(app_settings.CONTENT_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_font_loader(app_settings=Depends(get_settings)):
    return truetype_loader(app_settings.OG_FONT_PATH)
