import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import frontmatter

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def get_markdown_content(self, path: Path) -> str:
        """Read a content file as text. I/O errors propagate to the caller."""
        text = Path(path).read_text(encoding=self.encoding)
        return text.replace("\r\n", "\n").replace("\r", "\n")

    def parse(self, text: str, source: str = "") -> Tuple[Dict[str, Any], str]:
        """Split front-matter from body.

        Malformed front-matter is not fatal: the metadata comes back empty and
        the whole text is treated as the body.
        """
        try:
            parsed = frontmatter.loads(text)
        except Exception as e:
            logger.warning(f"Malformed front-matter in {source or '<text>'}: {e}")
            return {}, text
        return dict(parsed.metadata or {}), parsed.content
