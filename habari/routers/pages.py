"""Server-rendered HTML pages."""

import logging

from fastapi import APIRouter, HTTPException, Path
from fastapi.responses import HTMLResponse

from habari.config import get_settings
from habari.models.blog import SLUG_PATTERN
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

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def home():
    """Home page: hero, latest posts, projects, newsletter."""
    settings = get_settings()
    posts = load_posts()
    selected = select_top_posts(posts, settings.max_display)
    page = build_home_page(
        get_site_metadata(),
        get_projects(),
        selected,
        total_posts=len(posts),
        display_cap=settings.max_display,
    )
    return HTMLResponse(content=render_home_html(page))


def _blog_page(page_number: int) -> HTMLResponse:
    settings = get_settings()
    page = paginate_posts(load_posts(), page_number, settings.posts_per_page)
    # An empty blog still has a first page
    if not page.posts and page_number != 1:
        raise HTTPException(status_code=404, detail="Page not found")
    return HTMLResponse(
        content=render_blog_list_html(build_blog_list_page(get_site_metadata(), page))
    )


@router.get("/blog", response_class=HTMLResponse)
def blog_index():
    return _blog_page(1)


@router.get("/blog/page/{page_number}", response_class=HTMLResponse)
def blog_page(page_number: int = Path(..., ge=1)):
    return _blog_page(page_number)


@router.get("/blog/{slug}", response_class=HTMLResponse)
def blog_post(slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200)):
    """Render a single post with its Markdown body."""
    posts = load_posts()
    post = next((p for p in posts if p.slug == slug), None)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")

    body = render_post_body(slug)
    if body is None:
        logger.warning("Post %s is indexed but its file is gone", slug)
        raise HTTPException(status_code=404, detail="Blog post not found")

    page = build_post_detail_page(get_site_metadata(), post, body, posts)
    return HTMLResponse(content=render_post_html(page))


@router.get("/projects", response_class=HTMLResponse)
def projects():
    page = build_projects_page(get_site_metadata(), get_projects())
    return HTMLResponse(content=render_projects_html(page))


@router.get("/tags/{tag}", response_class=HTMLResponse)
def tag_listing(tag: str = Path(..., max_length=100)):
    """List posts carrying a tag."""
    posts = filter_by_tag(load_posts(), tag)
    label = tag_label(posts, tag)
    if label is None:
        raise HTTPException(status_code=404, detail="Tag not found")
    page = build_tag_page(get_site_metadata(), label, posts)
    return HTMLResponse(content=render_blog_list_html(page))
