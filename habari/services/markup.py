"""HTML emitters for the render trees in ``models.pages``.

Every piece of text taken from content or data files is escaped here; post
bodies are the one exception, as they arrive as HTML rendered from Markdown.
"""

import html

from habari.models.pages import (
    BlogListPage,
    HomePage,
    PostDetailPage,
    PostListItem,
    ProjectsPage,
)
from habari.models.site import NewsletterConfig, ProjectEntry, SiteMetadata
from habari.services.analytics import render_analytics_snippet

NAV_LINKS = (("/blog", "Blog"), ("/projects", "Projects"))


def _esc(value: str | None) -> str:
    return html.escape(value or "")


def render_layout(
    site: SiteMetadata,
    body: str,
    title: str | None = None,
    description: str | None = None,
    path: str = "/",
) -> str:
    """Wrap page body markup in the shared document shell.

    ``path`` is the page's URL path; with ``site_url`` set it becomes the
    canonical link.
    """
    page_title = f"{title} - {site.title}" if title else site.title
    nav = "".join(
        f'<a href="{href}" class="nav-link">{label}</a>' for href, label in NAV_LINKS
    )
    analytics = render_analytics_snippet(site.analytics)
    canonical = ""
    if site.site_url:
        href = site.site_url.rstrip("/") + path
        canonical = f"\n<link rel=\"canonical\" href=\"{_esc(href)}\" />"
    return f"""<!DOCTYPE html>
<html lang="{_esc(site.language)}">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>{_esc(page_title)}</title>
<meta name="description" content="{_esc(description or site.description)}" />{canonical}
</head>
<body>
<header class="site-header"><a href="/" class="site-title">{_esc(site.title)}</a><nav>{nav}</nav></header>
<main>
{body}
</main>
<footer class="site-footer">{_esc(site.author)}</footer>
{analytics}
</body>
</html>"""


def _post_item(item: PostListItem) -> str:
    tags = "".join(
        f'<a href="{_esc(t.href)}" class="tag">{_esc(t.name)}</a>' for t in item.tags
    )
    title = _esc(item.title)
    return f"""<li class="post" id="{_esc(item.slug)}">
<article>
<dl><dt class="sr-only">Published on</dt><dd><time datetime="{item.date_iso}">{_esc(item.date_display)}</time></dd></dl>
<h2><a href="{_esc(item.href)}">{title}</a></h2>
<div class="tags">{tags}</div>
<div class="summary">{_esc(item.summary)}</div>
<a href="{_esc(item.href)}" class="read-more" aria-label="Read &quot;{title}&quot;">Read more &rarr;</a>
</article>
</li>"""


def _post_list(items: list[PostListItem], placeholder: str | None) -> str:
    if placeholder is not None:
        return f'<p class="no-posts">{_esc(placeholder)}</p>'
    return '<ul class="posts">\n' + "\n".join(_post_item(i) for i in items) + "\n</ul>"


def _project_card(project: ProjectEntry) -> str:
    title = _esc(project.title)
    if project.link:
        title = f'<a href="{_esc(project.link)}" aria-label="Link to {title}">{title}</a>'
    image = ""
    if project.image_ref:
        image = f'<img src="{_esc(project.image_ref)}" alt="{_esc(project.title)}" />'
    return f"""<div class="project">
{image}<h2>{title}</h2>
<p>{_esc(project.description)}</p>
</div>"""


def _newsletter_form(newsletter: NewsletterConfig) -> str:
    action = f' action="{_esc(newsletter.form_action)}"' if newsletter.form_action else ""
    return f"""<div class="newsletter" data-provider="{_esc(newsletter.provider)}">
<form method="post"{action}>
<label for="email-input">Subscribe to the newsletter</label>
<input id="email-input" name="email" type="email" placeholder="Enter your email" required />
<button type="submit">Sign up</button>
</form>
</div>"""


def render_home_html(page: HomePage) -> str:
    site = page.site
    intro = "".join(f"<p>{_esc(p)}</p>" for p in site.intro)
    hero_image = ""
    if site.hero_image:
        hero_image = f'<img class="hero-image" alt="hero" src="{_esc(site.hero_image)}" />'

    parts = [
        f"""<section class="hero">
<p class="greeting">{_esc(site.greeting)}</p>
<div class="intro">{intro}</div>
{hero_image}
</section>""",
        f"""<section class="latest-posts">
<h1>Latest Posts</h1>
<p>{_esc(site.description)}</p>
{_post_list(page.posts, page.placeholder)}
</section>""",
    ]
    if page.view_all_href:
        parts.append(
            f'<div class="view-all"><a href="{_esc(page.view_all_href)}" aria-label="all posts">All Posts &rarr;</a></div>'
        )
    if page.projects:
        cards = "\n".join(_project_card(p) for p in page.projects)
        parts.append(f'<section class="projects">\n<h1>Projects</h1>\n{cards}\n</section>')
    if page.newsletter is not None:
        parts.append(_newsletter_form(page.newsletter))

    return render_layout(site, "\n".join(parts))


def render_blog_list_html(page: BlogListPage) -> str:
    pager = ""
    if page.total_pages > 1:
        prev_link = (
            f'<a href="{_esc(page.previous_href)}" rel="prev">Previous</a>'
            if page.previous_href
            else ""
        )
        next_link = (
            f'<a href="{_esc(page.next_href)}" rel="next">Next</a>' if page.next_href else ""
        )
        pager = f'<nav class="pagination">{prev_link}<span>{page.page} of {page.total_pages}</span>{next_link}</nav>'

    body = f"""<section class="post-list">
<h1>{_esc(page.heading)}</h1>
{_post_list(page.posts, page.placeholder)}
{pager}
</section>"""
    return render_layout(page.site, body, title=page.heading, path=page.path)


def render_post_html(page: PostDetailPage) -> str:
    post = page.post
    tags = "".join(
        f'<a href="{_esc(t.href)}" class="tag">{_esc(t.name)}</a>' for t in post.tags
    )
    neighbours = ""
    if page.previous_post:
        neighbours += f'<a href="{_esc(page.previous_post.href)}" rel="prev">&larr; {_esc(page.previous_post.title)}</a>'
    if page.next_post:
        neighbours += f'<a href="{_esc(page.next_post.href)}" rel="next">{_esc(page.next_post.title)} &rarr;</a>'

    body = f"""<article class="post-detail">
<header>
<time datetime="{post.date_iso}">{_esc(post.date_display)}</time>
<h1>{_esc(post.title)}</h1>
<div class="tags">{tags}</div>
</header>
<div class="prose">
{page.body_html}
</div>
<nav class="post-nav">{neighbours}</nav>
<a href="/blog" class="back">&larr; Back to the blog</a>
</article>"""
    return render_layout(
        page.site, body, title=post.title, description=post.summary, path=post.href
    )


def render_projects_html(page: ProjectsPage) -> str:
    cards = "\n".join(_project_card(p) for p in page.projects)
    body = f"""<section class="projects">
<h1>Projects</h1>
{cards}
</section>"""
    return render_layout(page.site, body, title="Projects", path="/projects")
