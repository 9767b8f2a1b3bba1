"""Post selection, pagination and tag grouping.

All functions are pure: they never mutate the input sequence.
"""

import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence

from habari.models.blog import BlogPost, PostPage

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Return posts newest first; posts sharing a date are ordered by slug."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    # sorted() is stable, so the slug order survives among equal dates
    return sorted(by_slug, key=lambda p: p.date, reverse=True)


def select_top_posts(posts: Iterable[BlogPost], limit: int) -> list[BlogPost]:
    """Return the ``limit`` most recent posts, newest first."""
    if limit <= 0:
        return []
    return sort_posts(posts)[:limit]


def paginate_posts(
    posts: Sequence[BlogPost], page: int = 1, per_page: int = 5
) -> PostPage:
    """Slice the sorted posts into a 1-based page.

    A page outside ``1..total_pages`` comes back with no posts.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")

    total = len(posts)
    total_pages = max(1, math.ceil(total / per_page))
    selected: list[BlogPost] = []
    if 1 <= page <= total_pages:
        start = (page - 1) * per_page
        selected = sort_posts(posts)[start : start + per_page]

    return PostPage(
        posts=selected,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )


def tag_slug(tag: str) -> str:
    """Normalise a tag for use in URLs ("Web Assembly" -> "web-assembly")."""
    return _NON_SLUG_RE.sub("-", tag.strip().lower()).strip("-")


def filter_by_tag(posts: Iterable[BlogPost], tag: str) -> list[BlogPost]:
    """Return posts carrying ``tag`` (compared by slug), newest first."""
    wanted = tag_slug(tag)
    return sort_posts(
        p for p in posts if any(tag_slug(t) == wanted for t in p.tags)
    )


def tag_counts(posts: Iterable[BlogPost]) -> dict[str, int]:
    """Count posts per tag slug, most used first then alphabetical."""
    counts: Counter[str] = Counter()
    for post in posts:
        counts.update({s for s in map(tag_slug, post.tags) if s})
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def tag_label(posts: Iterable[BlogPost], tag: str) -> str | None:
    """Return a tag as authors wrote it, or None if no post carries it."""
    wanted = tag_slug(tag)
    spellings = sorted({t for p in posts for t in p.tags if tag_slug(t) == wanted})
    return spellings[0] if spellings else None
