import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class ContentRootError(RuntimeError):
    """The content root is missing or cannot be listed."""

    def __init__(self, root: Path, reason: str):
        super().__init__(f"Content root {root} is unavailable: {reason}")
        self.root = root


@dataclass(frozen=True)
class PostFile:
    category: str
    language: str
    slug: str
    path: Path
    created: Optional[int] = None


class FilesystemPostsRepo:
    """Discovers post files laid out as <root>/<category>/<language>/<slug><ext>."""

    def __init__(self, root, extension: str = ".mdx"):
        self.root = Path(root)
        self.extension = extension

    def list_category_names(self) -> List[str]:
        try:
            with os.scandir(self.root) as entries:
                return sorted(entry.name for entry in entries if entry.is_dir())
        except OSError as e:
            raise ContentRootError(self.root, e.strerror or str(e)) from e

    def list_language_names(self, category: str) -> List[str]:
        category_dir = self._safe_join(category)
        if category_dir is None:
            return []
        return self._subdirectories(category_dir)

    def find_post_files(
        self, category: Optional[str] = None, language: Optional[str] = None
    ) -> List[PostFile]:
        files: List[PostFile] = []
        for name in self.list_category_names():
            if category is not None and name != category:
                continue
            languages = (
                [language]
                if language is not None
                else self._subdirectories(self.root / name)
            )
            for lang in languages:
                lang_dir = self._safe_join(name, lang)
                if lang_dir is None:
                    continue
                files.extend(self._post_files_in(name, lang, lang_dir))
        return files

    def get_post_file(
        self, category: str, language: str, slug: str
    ) -> Optional[PostFile]:
        """Build the expected location of a post without touching the disk."""
        path = self._safe_join(category, language, f"{slug}{self.extension}")
        if path is None or not self._is_safe_segment(slug):
            return None
        return PostFile(category=category, language=language, slug=slug, path=path)

    def _post_files_in(
        self, category: str, language: str, directory: Path
    ) -> List[PostFile]:
        try:
            with os.scandir(directory) as entries:
                matches = [
                    entry
                    for entry in entries
                    if entry.name.endswith(self.extension) and entry.is_file()
                ]
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as e:
            logger.warning(f"Could not list posts in {directory}: {e}")
            return []

        files = []
        for entry in sorted(matches, key=lambda e: e.name):
            slug = entry.name[: -len(self.extension)] if self.extension else entry.name
            files.append(
                PostFile(
                    category=category,
                    language=language,
                    slug=slug,
                    path=Path(entry.path),
                    created=_creation_timestamp(entry),
                )
            )
        return files

    def _subdirectories(self, directory: Path) -> List[str]:
        try:
            with os.scandir(directory) as entries:
                return sorted(entry.name for entry in entries if entry.is_dir())
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as e:
            logger.warning(f"Could not list {directory}: {e}")
            return []

    def _safe_join(self, *segments: str) -> Optional[Path]:
        if not all(self._is_safe_segment(s) for s in segments):
            logger.debug(f"Rejected unsafe path segments {segments!r}")
            return None
        return self.root.joinpath(*segments)

    @staticmethod
    def _is_safe_segment(segment: str) -> bool:
        if not segment or segment in (".", ".."):
            return False
        return not any(ch in segment for ch in ("/", "\\", "\x00"))


def _creation_timestamp(entry: os.DirEntry) -> Optional[int]:
    try:
        stat = entry.stat()
    except OSError:
        return None
    created = getattr(stat, "st_birthtime", None) or stat.st_ctime
    return int(created * 1000)
