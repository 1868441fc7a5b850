import textwrap
from pathlib import Path

import pytest

from app.repos.posts_repo import ContentRootError, PostFile


def write_post(root: Path, category: str, language: str, slug: str, text: str) -> Path:
    """Write a content file under root/category/language/slug.mdx."""
    directory = root / category / language
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug}.mdx"
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path):
    """
    Small content tree:
      tech/{en,ko}, life/en, and an empty 'drafts' category.
    """
    root = tmp_path / "posts"
    write_post(
        root,
        "tech",
        "en",
        "fastapi-intro",
        """
        ---
        title: FastAPI Intro
        date: 2024-03-01
        tags: [python, web]
        description: Getting started
        ---
        FastAPI body.
        """,
    )
    write_post(
        root,
        "tech",
        "en",
        "pydantic-tips",
        """
        ---
        title: Pydantic Tips
        date: 2024-05-10
        ---
        Pydantic body.
        """,
    )
    write_post(
        root,
        "tech",
        "ko",
        "fastapi-intro",
        """
        ---
        title: FastAPI 소개
        date: 2024-03-02
        tags: [python]
        ---
        한국어 본문.
        """,
    )
    write_post(
        root,
        "life",
        "en",
        "hiking",
        """
        ---
        title: Hiking
        date: 2023-11-20
        ---
        Trail notes.
        """,
    )
    (root / "drafts").mkdir()
    (root / "tech" / "en" / "notes.txt").write_text("not a post", encoding="utf-8")
    return root


class FakePostsRepo:
    """
    In-memory repo stand-in that hands out prepared PostFile records.
    """

    def __init__(self, files, categories=None, fail_root=False):
        self.files = list(files)
        self.categories = categories
        self.fail_root = fail_root
        self.calls = []

    def find_post_files(self, category=None, language=None):
        self.calls.append((category, language))
        if self.fail_root:
            raise ContentRootError(Path("/missing"), "No such file or directory")
        return [
            f
            for f in self.files
            if (category is None or f.category == category)
            and (language is None or f.language == language)
        ]

    def get_post_file(self, category, language, slug):
        for f in self.files:
            if (f.category, f.language, f.slug) == (category, language, slug):
                return f
        return None

    def list_category_names(self):
        if self.fail_root:
            raise ContentRootError(Path("/missing"), "No such file or directory")
        if self.categories is not None:
            return list(self.categories)
        return sorted({f.category for f in self.files})

    def list_language_names(self, category):
        return sorted({f.language for f in self.files if f.category == category})


def make_post_file(tmp_path: Path, slug: str, text: str, created=None, category="tech", language="en") -> PostFile:
    path = write_post(tmp_path, category, language, slug, text)
    return PostFile(
        category=category, language=language, slug=slug, path=path, created=created
    )


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        categories=None,
        error=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._categories = categories or []
        self._error = error
        self.calls = []

    def list_posts(self, language=None, category=None, sort="date-desc"):
        self.calls.append(("list_posts", language, category, sort))
        if self._error:
            raise self._error
        return self._list_posts_return

    def latest_posts(self, language=None, limit=3):
        self.calls.append(("latest_posts", language, limit))
        if self._error:
            raise self._error
        return self._list_posts_return[:limit]

    def get_post(self, slug, category, language):
        self.calls.append(("get_post", slug, category, language))
        if self._error:
            raise self._error
        return self._get_post_return

    def find_post(self, slug, language):
        self.calls.append(("find_post", slug, language))
        if self._error:
            raise self._error
        return self._get_post_return

    def list_categories(self):
        return self._categories

    def list_languages(self, category):
        self.calls.append(("list_languages", category))
        return ["en"] if category in self._categories else []
