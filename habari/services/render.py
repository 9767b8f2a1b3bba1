"""Page renderer: composes site data and posts into render trees.

The builders only decide what appears on a page; ``services.markup`` turns
the resulting trees into HTML.
"""

from collections.abc import Sequence
from datetime import datetime

from habari.models.blog import BlogPost, PostPage
from habari.models.pages import (
    NO_POSTS_MESSAGE,
    BlogListPage,
    HomePage,
    PostDetailPage,
    PostListItem,
    ProjectsPage,
    TagLink,
)
from habari.models.site import ProjectEntry, SiteMetadata
from habari.services.posts import sort_posts, tag_slug

BLOG_HREF = "/blog"


def format_date(dt: datetime) -> str:
    """Format a date for display, e.g. "January 5, 2024"."""
    return f"{dt:%B} {dt.day}, {dt.year}"


def page_href(page: int) -> str:
    return BLOG_HREF if page <= 1 else f"{BLOG_HREF}/page/{page}"


def to_list_item(post: BlogPost) -> PostListItem:
    return PostListItem(
        slug=post.slug,
        title=post.title,
        href=post.href,
        date_iso=post.date.date().isoformat(),
        date_display=format_date(post.date),
        summary=post.summary,
        tags=[
            TagLink(name=t, href=f"/tags/{tag_slug(t)}")
            for t in sorted(post.tags, key=str.lower)
            # Tags with no letters or digits have no page to link to
            if tag_slug(t)
        ],
    )


def build_home_page(
    site: SiteMetadata,
    projects: Sequence[ProjectEntry],
    selected_posts: Sequence[BlogPost],
    total_posts: int,
    display_cap: int,
) -> HomePage:
    """Build the home page from already-selected posts.

    ``total_posts`` is the size of the whole collection; when it exceeds
    ``display_cap`` the page links to the full listing.
    """
    return HomePage(
        site=site,
        posts=[to_list_item(p) for p in selected_posts],
        projects=list(projects),
        placeholder=None if selected_posts else NO_POSTS_MESSAGE,
        view_all_href=BLOG_HREF if total_posts > display_cap else None,
        newsletter=site.newsletter if site.newsletter.provider else None,
    )


def build_blog_list_page(site: SiteMetadata, page: PostPage) -> BlogListPage:
    return BlogListPage(
        site=site,
        heading="All Posts",
        path=page_href(page.page),
        posts=[to_list_item(p) for p in page.posts],
        placeholder=None if page.posts else NO_POSTS_MESSAGE,
        page=page.page,
        total_pages=page.total_pages,
        previous_href=page_href(page.page - 1) if page.has_previous else None,
        next_href=page_href(page.page + 1) if page.has_next else None,
    )


def build_tag_page(
    site: SiteMetadata, tag: str, posts: Sequence[BlogPost]
) -> BlogListPage:
    """Build the listing for one tag; ``posts`` are already filtered."""
    return BlogListPage(
        site=site,
        heading=f"#{tag}",
        path=f"/tags/{tag_slug(tag)}",
        posts=[to_list_item(p) for p in sort_posts(posts)],
        placeholder=None if posts else NO_POSTS_MESSAGE,
    )


def build_post_detail_page(
    site: SiteMetadata,
    post: BlogPost,
    body_html: str,
    all_posts: Sequence[BlogPost] = (),
) -> PostDetailPage:
    """Build a single post page with links to its older and newer neighbours."""
    ordered = sort_posts(all_posts)
    slugs = [p.slug for p in ordered]
    older = newer = None
    if post.slug in slugs:
        idx = slugs.index(post.slug)
        if idx + 1 < len(ordered):
            older = to_list_item(ordered[idx + 1])
        if idx > 0:
            newer = to_list_item(ordered[idx - 1])

    return PostDetailPage(
        site=site,
        post=to_list_item(post),
        body_html=body_html,
        previous_post=older,
        next_post=newer,
    )


def build_projects_page(
    site: SiteMetadata, projects: Sequence[ProjectEntry]
) -> ProjectsPage:
    return ProjectsPage(site=site, projects=list(projects))
