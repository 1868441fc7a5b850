from fastapi import Depends

from app.repos.posts_repo import FilesystemPostsRepo
from app.security import get_settings
from app.services.content_parser import ContentParser
from app.services.posts_service import PostsService
from app.settings import Settings


def get_content_parser():
    return ContentParser()


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(
        current_settings.content_root_path,
        extension=current_settings.CONTENT_EXTENSION,
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
):
    return PostsService(repo=repo, parser=parser)
