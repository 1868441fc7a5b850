import datetime
import logging
import unicodedata
from typing import List, Optional

from app.repos.posts_repo import ContentRootError, PostFile
from app.schemas.blog import SORT_ORDERS, PostDetail, PostSummary
from app.services.content_parser import ContentParser

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser: Optional[ContentParser] = None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def list_posts(
        self,
        language: Optional[str] = None,
        category: Optional[str] = None,
        sort: str = "date-desc",
    ) -> List[PostSummary]:
        """List post metadata, filtered and sorted. Content is never loaded."""
        if sort not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order {sort!r}")

        files = self.repo.find_post_files(
            category=category or None, language=language or None
        )
        posts = []
        for post_file in files:
            post_data = parse_post_data(post_file, parser=self.parser)
            if post_data:
                posts.append(PostSummary(**post_data))

        return sort_posts(posts, sort)

    def get_post(self, slug: str, category: str, language: str) -> Optional[PostDetail]:
        post_file = self.repo.get_post_file(category, language, slug)
        if post_file is None:
            logger.info(f"Rejected lookup for {category}/{language}/{slug}")
            return None
        post_data = parse_post_data(post_file, include_content=True, parser=self.parser)
        if not post_data:
            return None
        return PostDetail(**post_data)

    def find_post(self, slug: str, language: str) -> Optional[PostDetail]:
        """Resolve a post by slug within one language, newest category first."""
        for post in self.list_posts(language=language):
            if post.slug == slug:
                return self.get_post(slug, post.category, language)
        return None

    def latest_posts(self, language: Optional[str] = None, limit: int = 3) -> List[PostSummary]:
        return self.list_posts(language=language)[: max(limit, 0)]

    def list_categories(self) -> List[str]:
        try:
            return self.repo.list_category_names()
        except ContentRootError as e:
            logger.error(f"Error reading categories: {e}")
            return []

    def list_languages(self, category: str) -> List[str]:
        return self.repo.list_language_names(category)


def parse_post_data(
    post_file: PostFile, include_content: bool = False, *, parser: ContentParser
) -> Optional[dict]:
    """Read a post file and return standardized post data"""
    where = f"{post_file.category}/{post_file.language}/{post_file.slug}"
    try:
        markdown = parser.get_markdown_content(post_file.path)
    except FileNotFoundError:
        logger.info(f"Post {where} not found")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read post {where}: {e}")
        return None

    metadata, body = parser.parse(markdown, source=str(post_file.path))

    post_data = {
        "slug": post_file.slug,
        "category": post_file.category,
        "language": post_file.language,
        "title": _as_text(metadata.get("title")),
        "description": _as_text(metadata.get("description")),
        "date": _convert_date(metadata.get("date")),
        "tags": _normalize_tags(metadata.get("tags")),
        "creationTimestamp": post_file.created,
    }
    if include_content:
        post_data["content"] = body
    return post_data


def sort_posts(posts: List[PostSummary], sort: str = "date-desc") -> List[PostSummary]:
    if sort == "title-asc":
        return sorted(posts, key=lambda p: _title_key(p.title))

    def by_date(post: PostSummary):
        return (_parse_date(post.date) or datetime.datetime.min, post.creationTimestamp or 0)

    return sorted(posts, key=by_date, reverse=(sort == "date-desc"))


def _as_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _convert_date(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _parse_date(value: str) -> Optional[datetime.datetime]:
    if not value:
        return None
    try:
        parsed = datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable post date {value!r}, sorting as earliest")
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed


def _title_key(title: str) -> str:
    return unicodedata.normalize("NFKD", title).casefold()
