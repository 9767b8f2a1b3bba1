"""Render trees: what each page shows, before it becomes HTML."""

from pydantic import BaseModel

from habari.models.site import NewsletterConfig, ProjectEntry, SiteMetadata

NO_POSTS_MESSAGE = "No posts found."


class TagLink(BaseModel):
    name: str
    href: str

    model_config = {"frozen": True}


class PostListItem(BaseModel):
    """A post as shown in a listing."""

    slug: str
    title: str
    href: str
    date_iso: str
    date_display: str
    summary: str
    tags: list[TagLink] = []

    model_config = {"frozen": True}


class HomePage(BaseModel):
    site: SiteMetadata
    posts: list[PostListItem]
    projects: list[ProjectEntry] = []
    # Set instead of a list when there are no posts
    placeholder: str | None = None
    view_all_href: str | None = None
    newsletter: NewsletterConfig | None = None

    model_config = {"frozen": True}


class BlogListPage(BaseModel):
    """Full blog listing, one page of it, or the posts for a single tag."""

    site: SiteMetadata
    heading: str
    path: str = "/blog"
    posts: list[PostListItem]
    placeholder: str | None = None
    page: int = 1
    total_pages: int = 1
    previous_href: str | None = None
    next_href: str | None = None

    model_config = {"frozen": True}


class PostDetailPage(BaseModel):
    site: SiteMetadata
    post: PostListItem
    body_html: str
    previous_post: PostListItem | None = None
    next_post: PostListItem | None = None

    model_config = {"frozen": True}


class ProjectsPage(BaseModel):
    site: SiteMetadata
    projects: list[ProjectEntry]

    model_config = {"frozen": True}
