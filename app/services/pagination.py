import math
import re
from typing import Sequence

from app.schemas.blog import PageWindow, PostPage, PostSummary

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def coerce_page(value) -> int:
    """Turn an untrusted page parameter into a 1-based page number.

    Only the leading integer counts, so "2.5" and "3abc" give 2 and 3, the same
    pages a browser-side parseInt would link to. Anything else is page 1.
    """
    match = _LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return 1
    page = int(match.group(0))
    return page if page >= 1 else 1


def total_pages(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def page_window(current: int, total: int, radius: int = 2) -> PageWindow:
    start = max(1, current - radius)
    end = min(total, current + radius)
    return PageWindow(
        pages=list(range(start, end + 1)),
        first=1 if start > 1 else None,
        last=total if end < total else None,
        leadingEllipsis=start > 2,
        trailingEllipsis=end < total - 1,
        previous=current - 1 if current > 1 else None,
        next=current + 1 if current < total else None,
    )


def paginate(
    posts: Sequence[PostSummary], page, page_size: int, radius: int = 2
) -> PostPage:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    pages = total_pages(len(posts), page_size)
    current = min(coerce_page(page), pages)
    start = (current - 1) * page_size

    return PostPage(
        items=list(posts[start : start + page_size]),
        page=current,
        pageSize=page_size,
        total=len(posts),
        totalPages=pages,
        window=page_window(current, pages, radius),
    )
