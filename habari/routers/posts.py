"""JSON API over the blog posts and projects."""

from fastapi import APIRouter, HTTPException, Path, Query

from habari.models.blog import SLUG_PATTERN, BlogIndex, BlogPost
from habari.models.site import ProjectEntry
from habari.services.content import load_posts
from habari.services.posts import filter_by_tag, sort_posts, tag_counts
from habari.services.site_data import get_projects

router = APIRouter(tags=["api"])


@router.get("/posts", response_model=BlogIndex)
def list_posts(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    tag: str | None = Query(
        default=None, max_length=100, description="Only posts carrying this tag"
    ),
):
    """Get the post index, newest first."""
    posts = load_posts()
    ordered = filter_by_tag(posts, tag) if tag else sort_posts(posts)
    return BlogIndex(posts=ordered[offset : offset + limit], total=len(ordered))


@router.get("/posts/{slug}", response_model=BlogPost)
def get_post(slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200)):
    """Get a single post's metadata by slug."""
    for post in load_posts():
        if post.slug == slug:
            return post
    raise HTTPException(status_code=404, detail="Blog post not found")


@router.get("/tags")
def list_tags() -> dict[str, int]:
    """Post counts per tag slug."""
    return tag_counts(load_posts())


@router.get("/projects", response_model=list[ProjectEntry])
def list_projects():
    return list(get_projects())
