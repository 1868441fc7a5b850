import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.repos.posts_repo import ContentRootError
from app.schemas.blog import PostDetail, PostPage, PostSummary, SortOrder
from app.security import get_settings
from app.services.pagination import paginate
from app.services.posts_service import PostsService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostPage)
def list_posts(
    lang: Optional[str] = None,
    category: Optional[str] = None,
    sort: SortOrder = "date-desc",
    page: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get one page of posts metadata."""
    if lang:
        _require_language(lang, current_settings)
    try:
        posts = service.list_posts(language=lang, category=category, sort=sort)
        return paginate(
            posts,
            page,
            current_settings.PAGE_SIZE,
            radius=current_settings.PAGE_WINDOW,
        )
    except ContentRootError as e:
        logger.error(f"Content root unavailable while listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/latest", response_model=List[PostSummary])
def latest_posts(
    lang: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=0),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get the newest posts for the home page."""
    language = lang or current_settings.DEFAULT_LANGUAGE
    _require_language(language, current_settings)
    if limit is None:
        limit = current_settings.LATEST_POSTS_LIMIT
    try:
        return service.latest_posts(language, limit)
    except ContentRootError as e:
        logger.error(f"Content root unavailable while listing latest posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing latest posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{lang}/{slug}", response_model=PostDetail)
def find_post(
    lang: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get a single post by language and slug, whatever its category."""
    _require_language(lang, current_settings)
    try:
        post = service.find_post(slug, lang)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {lang}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{category}/{lang}/{slug}", response_model=PostDetail)
def get_post(
    category: str,
    lang: str,
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get a single post by category, language and slug."""
    _require_language(lang, current_settings)
    try:
        post = service.get_post(slug, category, lang)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {category}/{lang}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/categories", response_model=List[str])
def list_categories(service: PostsService = Depends(deps.get_posts_service)):
    return service.list_categories()


@router.get("/categories/{category}/languages", response_model=List[str])
def list_languages(
    category: str, service: PostsService = Depends(deps.get_posts_service)
):
    return service.list_languages(category)


def _require_language(lang: str, current_settings: Settings) -> None:
    if lang not in current_settings.SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=404, detail="Language not supported")
