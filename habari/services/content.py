"""Blog content loader: reads Markdown posts with YAML front matter.

Posts live in ``content/blog/*.md``. The parsed collection is cached and only
re-read when a file in the directory is added, removed or modified.
"""

import logging
from pathlib import Path

import frontmatter
import markdown

from habari.config import get_settings
from habari.models.blog import BlogPost

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "toc"]

# Cache keyed by (directory, file count, newest mtime)
_cached_paths: dict[str, Path] | None = None
_cached_posts: list[BlogPost] = []
_cache_key_value: tuple[str, int, float] | None = None


def _cache_key(content_dir: Path, files: list[Path]) -> tuple[str, int, float]:
    newest = max((f.stat().st_mtime for f in files), default=0.0)
    return (str(content_dir), len(files), newest)


def parse_post_file(path: Path) -> BlogPost:
    """Parse one Markdown file's front matter into a BlogPost.

    The slug defaults to the file name without its extension.

    Raises:
        pydantic.ValidationError: If required front matter is missing or malformed.
    """
    post = frontmatter.load(path.as_posix())
    metadata = dict(post.metadata)
    metadata.setdefault("slug", path.stem)
    return BlogPost.model_validate(metadata)


def _load_all(content_dir: Path) -> tuple[list[BlogPost], dict[str, Path]]:
    """Return every post (drafts included) and a slug -> file map."""
    global _cached_paths, _cached_posts, _cache_key_value

    if not content_dir.is_dir():
        logger.warning("Content directory not found at %s", content_dir)
        return [], {}

    files = sorted(content_dir.glob("*.md"))
    key = _cache_key(content_dir, files)
    if _cached_paths is not None and key == _cache_key_value:
        return _cached_posts, _cached_paths

    posts: list[BlogPost] = []
    paths: dict[str, Path] = {}
    for path in files:
        post = parse_post_file(path)
        if post.slug in paths:
            raise ValueError(
                f"Duplicate slug {post.slug!r} in {paths[post.slug].name} and {path.name}"
            )
        paths[post.slug] = path
        posts.append(post)

    logger.info("Loaded %d posts from %s", len(posts), content_dir)
    _cached_paths = paths
    _cached_posts = posts
    _cache_key_value = key
    return posts, paths


def load_posts(
    content_dir: Path | None = None, include_drafts: bool | None = None
) -> list[BlogPost]:
    """Load blog post metadata from the content directory.

    Args:
        content_dir: Directory of ``.md`` files. Defaults to the configured one.
        include_drafts: Keep posts marked ``draft: true``. Defaults to the
            ``show_drafts`` setting.

    Raises:
        ValueError: If two files declare the same slug.
    """
    settings = get_settings()
    if content_dir is None:
        content_dir = settings.content_dir
    if include_drafts is None:
        include_drafts = settings.show_drafts

    posts, _ = _load_all(content_dir)
    if include_drafts:
        return list(posts)
    return [p for p in posts if not p.draft]


def render_post_body(slug: str, content_dir: Path | None = None) -> str | None:
    """Render a post's Markdown body to HTML, or None if the slug is unknown."""
    if content_dir is None:
        content_dir = get_settings().content_dir

    _, paths = _load_all(content_dir)
    path = paths.get(slug)
    if path is None:
        return None
    post = frontmatter.load(path.as_posix())
    return markdown.markdown(post.content, extensions=MARKDOWN_EXTENSIONS)
