"""Static site builder: writes every page to an output directory.

Uses the same render path as the server, so ``/blog/my-post`` becomes
``<out>/blog/my-post/index.html``.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from habari.config import get_settings
from habari.services.content import load_posts, render_post_body
from habari.services.markup import (
    render_blog_list_html,
    render_home_html,
    render_post_html,
    render_projects_html,
)
from habari.services.posts import (
    filter_by_tag,
    paginate_posts,
    select_top_posts,
    tag_counts,
    tag_label,
)
from habari.services.render import (
    build_blog_list_page,
    build_home_page,
    build_post_detail_page,
    build_projects_page,
    build_tag_page,
)
from habari.services.site_data import get_projects, get_site_metadata

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Stats from a build run."""

    posts: int
    pages: int
    tags: int
    assets_copied: bool

    def to_dict(self) -> dict:
        return {
            "posts": self.posts,
            "pages": self.pages,
            "tags": self.tags,
            "assets_copied": self.assets_copied,
        }


def _write(out_dir: Path, url_path: str, content: str) -> None:
    target = out_dir / url_path.strip("/") / "index.html"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", target)


def build_site(out_dir: Path, include_drafts: bool | None = None) -> BuildStats:
    """Render the whole site into ``out_dir``.

    Args:
        out_dir: Destination directory; created if missing.
        include_drafts: Publish draft posts too. Defaults to ``show_drafts``.

    Returns:
        Stats from the build.

    Raises:
        ValueError: If two posts share a slug.
    """
    settings = get_settings()
    site = get_site_metadata()
    projects = get_projects()
    posts = load_posts(include_drafts=include_drafts)
    pages = 0

    logger.info("Building %d posts into %s", len(posts), out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1. Home
    selected = select_top_posts(posts, settings.max_display)
    home = build_home_page(
        site, projects, selected, total_posts=len(posts), display_cap=settings.max_display
    )
    _write(out_dir, "/", render_home_html(home))
    pages += 1

    # 2. Blog listing, one directory per page
    first = paginate_posts(posts, 1, settings.posts_per_page)
    for number in range(1, first.total_pages + 1):
        page = paginate_posts(posts, number, settings.posts_per_page)
        listing = render_blog_list_html(build_blog_list_page(site, page))
        _write(out_dir, "/blog" if number == 1 else f"/blog/page/{number}", listing)
        pages += 1

    # 3. Posts
    for post in posts:
        body = render_post_body(post.slug) or ""
        detail = build_post_detail_page(site, post, body, posts)
        _write(out_dir, post.href, render_post_html(detail))
        pages += 1

    # 4. Tags
    tags = tag_counts(posts)
    for slug in tags:
        tagged = filter_by_tag(posts, slug)
        label = tag_label(tagged, slug) or slug
        listing = render_blog_list_html(build_tag_page(site, label, tagged))
        _write(out_dir, f"/tags/{slug}", listing)
        pages += 1

    # 5. Projects
    _write(out_dir, "/projects", render_projects_html(build_projects_page(site, projects)))
    pages += 1

    # 6. Static assets
    assets_copied = False
    if settings.static_dir.is_dir():
        shutil.copytree(settings.static_dir, out_dir / "static", dirs_exist_ok=True)
        assets_copied = True

    stats = BuildStats(
        posts=len(posts), pages=pages, tags=len(tags), assets_copied=assets_copied
    )
    logger.info("Build complete: %s", stats.to_dict())
    return stats
