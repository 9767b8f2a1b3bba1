"""Tests for the page renderer and HTML markup."""

from datetime import datetime, timezone

import pytest

from habari.models.blog import BlogPost
from habari.models.pages import NO_POSTS_MESSAGE
from habari.models.site import (
    AnalyticsConfig,
    NewsletterConfig,
    ProjectEntry,
    SiteMetadata,
)
from habari.services.markup import (
    render_blog_list_html,
    render_home_html,
    render_post_html,
    render_projects_html,
)
from habari.services.posts import paginate_posts, select_top_posts
from habari.services.render import (
    build_blog_list_page,
    build_home_page,
    build_post_detail_page,
    build_projects_page,
    build_tag_page,
    format_date,
    to_list_item,
)

DISPLAY_CAP = 5


def _make_post(slug: str, day: int, tags=("Rust",)) -> BlogPost:
    return BlogPost(
        slug=slug,
        date=datetime(2024, 1, day, tzinfo=timezone.utc),
        title=f"Post {slug}",
        summary=f"Summary of {slug}",
        tags=list(tags),
    )


def _site(**kwargs) -> SiteMetadata:
    return SiteMetadata(
        title="Test Site",
        description="About the site",
        author="Tester",
        greeting="Habari!",
        intro=["Hello."],
        **kwargs,
    )


PROJECTS = [
    ProjectEntry(
        title="Apalis",
        description="Background jobs",
        image_ref="/static/images/apalis.png",
        link="https://github.com/geofmureithi/apalis",
    )
]


def _home(posts, site=None):
    selected = select_top_posts(posts, DISPLAY_CAP)
    return build_home_page(
        site or _site(), PROJECTS, selected, total_posts=len(posts), display_cap=DISPLAY_CAP
    )


def test_format_date():
    assert format_date(datetime(2024, 1, 5, tzinfo=timezone.utc)) == "January 5, 2024"


class TestHomePage:
    def test_seven_posts_shows_five_and_view_all(self):
        posts = [_make_post(f"p{i}", day=i) for i in range(1, 8)]

        page = _home(posts)
        html = render_home_html(page)

        assert [p.slug for p in page.posts] == ["p7", "p6", "p5", "p4", "p3"]
        assert page.view_all_href == "/blog"
        assert 'aria-label="all posts"' in html
        assert "All Posts &rarr;" in html
        assert "Post p2" not in html

    def test_three_posts_shows_all_without_view_all(self):
        posts = [_make_post(f"p{i}", day=i) for i in range(1, 4)]

        page = _home(posts)
        html = render_home_html(page)

        assert [p.slug for p in page.posts] == ["p3", "p2", "p1"]
        assert page.view_all_href is None
        assert 'aria-label="all posts"' not in html

    def test_exactly_cap_posts_has_no_view_all(self):
        posts = [_make_post(f"p{i}", day=i) for i in range(1, 6)]
        assert _home(posts).view_all_href is None

    def test_empty_collection_shows_placeholder(self):
        page = _home([])
        html = render_home_html(page)

        assert page.placeholder == NO_POSTS_MESSAGE
        assert "No posts found." in html
        assert '<ul class="posts">' not in html

    def test_post_items_link_to_posts_and_tags(self):
        html = render_home_html(_home([_make_post("first-post", day=5, tags=["Web Assembly"])]))

        assert 'href="/blog/first-post"' in html
        assert '<time datetime="2024-01-05">January 5, 2024</time>' in html
        assert 'href="/tags/web-assembly"' in html
        assert "Read more &rarr;" in html

    def test_newsletter_hidden_without_provider(self):
        page = _home([])
        assert page.newsletter is None
        assert "<form" not in render_home_html(page)

    def test_newsletter_shown_with_provider(self):
        site = _site(newsletter=NewsletterConfig(provider="buttondown", form_action="/subscribe"))
        page = _home([], site=site)
        html = render_home_html(page)

        assert page.newsletter is not None
        assert 'data-provider="buttondown"' in html
        assert 'action="/subscribe"' in html

    def test_projects_rendered(self):
        html = render_home_html(_home([]))
        assert "Apalis" in html
        assert 'src="/static/images/apalis.png"' in html

    def test_hero_content(self):
        html = render_home_html(_home([]))
        assert "Habari!" in html
        assert "<p>Hello.</p>" in html

    def test_text_is_escaped(self):
        post = BlogPost(
            slug="xss",
            date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            title="<script>alert(1)</script>",
            summary="a & b",
        )
        html = render_home_html(_home([post]))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "a &amp; b" in html


class TestAnalyticsInLayout:
    def test_snippet_absent_when_not_configured(self):
        assert "Countly" not in render_home_html(_home([]))

    def test_snippet_present_when_configured(self):
        site = _site(
            analytics=AnalyticsConfig(
                countly_app_key="k", countly_site_url="https://countly.test"
            )
        )
        html = render_home_html(_home([], site=site))
        assert 'Countly.app_key = "k";' in html
        # Injected at the end of the body, after the content
        assert html.index("Latest Posts") < html.index("countly-script")


class TestBlogListPage:
    @pytest.fixture
    def posts(self):
        return [_make_post(f"p{i}", day=i) for i in range(1, 8)]

    def test_first_page_links_to_next(self, posts):
        page = build_blog_list_page(_site(), paginate_posts(posts, 1, 5))
        html = render_blog_list_html(page)

        assert page.previous_href is None
        assert page.next_href == "/blog/page/2"
        assert 'rel="next"' in html
        assert "1 of 2" in html

    def test_second_page_links_back_to_blog_root(self, posts):
        page = build_blog_list_page(_site(), paginate_posts(posts, 2, 5))
        assert page.previous_href == "/blog"
        assert page.next_href is None
        assert [p.slug for p in page.posts] == ["p2", "p1"]

    def test_single_page_has_no_pager(self):
        page = build_blog_list_page(_site(), paginate_posts([_make_post("a", 1)], 1, 5))
        assert 'class="pagination"' not in render_blog_list_html(page)

    def test_empty_listing_uses_placeholder(self):
        page = build_blog_list_page(_site(), paginate_posts([], 1, 5))
        assert "No posts found." in render_blog_list_html(page)


def test_tag_page_heading_and_order():
    posts = [_make_post("old", day=1), _make_post("new", day=2)]
    page = build_tag_page(_site(), "Rust", posts)

    assert page.heading == "#Rust"
    assert [p.slug for p in page.posts] == ["new", "old"]
    assert "<title>#Rust - Test Site</title>" in render_blog_list_html(page)


class TestPostDetail:
    def test_neighbours(self):
        posts = [_make_post("a", 1), _make_post("b", 2), _make_post("c", 3)]
        page = build_post_detail_page(_site(), posts[1], "<p>Body</p>", posts)

        assert page.previous_post.slug == "a"
        assert page.next_post.slug == "c"

    def test_newest_post_has_no_next(self):
        posts = [_make_post("a", 1), _make_post("b", 2)]
        page = build_post_detail_page(_site(), posts[1], "", posts)
        assert page.next_post is None
        assert page.previous_post.slug == "a"

    def test_body_html_is_not_escaped(self):
        post = _make_post("a", 1)
        html = render_post_html(build_post_detail_page(_site(), post, "<p>Body</p>", [post]))

        assert "<p>Body</p>" in html
        assert "<title>Post a - Test Site</title>" in html
        assert '<meta name="description" content="Summary of a" />' in html


def test_projects_page():
    html = render_projects_html(build_projects_page(_site(), PROJECTS))
    assert "<h1>Projects</h1>" in html
    assert 'href="https://github.com/geofmureithi/apalis"' in html


def test_project_without_link_or_image():
    project = ProjectEntry(title="Plain", description="No extras")
    html = render_projects_html(build_projects_page(_site(), [project]))
    assert "<h2>Plain</h2>" in html
    assert "<img" not in html


def test_tags_without_a_slug_are_not_linked():
    item = to_list_item(_make_post("a", 1, tags=["C++", "C", "!!!"]))

    assert [t.name for t in item.tags] == ["C", "C++"]
    assert [t.href for t in item.tags] == ["/tags/c", "/tags/c"]
    assert 'href="/tags/"' not in render_home_html(_home([_make_post("a", 1, tags=["!!!"])]))


class TestCanonicalLink:
    SITE_URL = "https://example.com/"

    def test_absent_without_site_url(self):
        assert 'rel="canonical"' not in render_home_html(_home([]))

    def test_home_page(self):
        html = render_home_html(_home([], site=_site(site_url=self.SITE_URL)))
        assert '<link rel="canonical" href="https://example.com/" />' in html

    def test_blog_list_pages(self):
        site = _site(site_url=self.SITE_URL)
        posts = [_make_post(f"p{i}", day=i) for i in range(1, 8)]

        first = render_blog_list_html(build_blog_list_page(site, paginate_posts(posts, 1, 5)))
        second = render_blog_list_html(build_blog_list_page(site, paginate_posts(posts, 2, 5)))

        assert 'href="https://example.com/blog" />' in first
        assert 'href="https://example.com/blog/page/2" />' in second

    def test_tag_page(self):
        page = build_tag_page(_site(site_url=self.SITE_URL), "Web Assembly", [])
        assert page.path == "/tags/web-assembly"
        assert 'rel="canonical" href="https://example.com/tags/web-assembly"' in (
            render_blog_list_html(page)
        )

    def test_post_and_projects_pages(self):
        site = _site(site_url=self.SITE_URL)
        post = _make_post("first-post", 1)

        post_html = render_post_html(build_post_detail_page(site, post, "", [post]))
        projects_html = render_projects_html(build_projects_page(site, PROJECTS))

        assert 'rel="canonical" href="https://example.com/blog/first-post"' in post_html
        assert 'rel="canonical" href="https://example.com/projects"' in projects_html
