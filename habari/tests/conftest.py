"""Shared fixtures for habari tests."""

from pathlib import Path

import pytest

SITE_YAML = """\
title: Test Site
description: A site for tests
author: Test Author
greeting: Habari!
intro:
  - Hello from the tests.
analytics:
  countly_app_key: ""
  countly_site_url: ""
newsletter:
  provider: ""
"""

PROJECTS_YAML = """\
projects:
  - title: Apalis
    description: Background jobs for Rust.
    image_ref: /static/images/apalis.png
    link: https://github.com/geofmureithi/apalis
  - title: No Link
    description: A project without a link.
"""


def _write_post(
    content_dir: Path,
    slug: str,
    date: str = "2024-01-01",
    tags: str = "[]",
    body: str = "Body text.",
    extra: str = "",
) -> Path:
    path = content_dir / f"{slug}.md"
    path.write_text(
        f"---\ntitle: {slug.replace('-', ' ').title()}\ndate: {date}\n"
        f"summary: Summary of {slug}\ntags: {tags}\n{extra}---\n\n{body}\n"
    )
    return path


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from habari.config import get_settings

    get_settings.cache_clear()

    # 2. Site data LRU caches
    from habari.services.site_data import get_projects, get_site_metadata

    get_site_metadata.cache_clear()
    get_projects.cache_clear()

    # 3. Content cache
    import habari.services.content as content_mod

    content_mod._cached_paths = None
    content_mod._cached_posts = []
    content_mod._cache_key_value = None


@pytest.fixture
def site_dirs(tmp_path):
    """A throwaway content/data/static tree."""
    content_dir = tmp_path / "content" / "blog"
    data_dir = tmp_path / "data"
    static_dir = tmp_path / "static"
    content_dir.mkdir(parents=True)
    data_dir.mkdir()
    (static_dir / "images").mkdir(parents=True)
    (static_dir / "images" / "apalis.png").write_bytes(b"\x89PNG")
    (data_dir / "site.yaml").write_text(SITE_YAML)
    (data_dir / "projects.yaml").write_text(PROJECTS_YAML)
    return tmp_path


@pytest.fixture
def mock_settings(monkeypatch, site_dirs):
    """Provide a Settings object pointing at the throwaway tree."""
    from habari.config import Settings, get_settings

    test_settings = Settings(
        content_dir=site_dirs / "content" / "blog",
        data_dir=site_dirs / "data",
        static_dir=site_dirs / "static",
        max_display=5,
        posts_per_page=5,
        show_drafts=False,
        countly_app_key="",
        countly_site_url="",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("habari.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    # (from habari.config import get_settings creates a local binding that
    # the habari.config monkeypatch above does not affect)
    for mod_path in [
        "habari.main",
        "habari.services.content",
        "habari.services.site_data",
        "habari.services.builder",
        "habari.routers.pages",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def content_dir(mock_settings) -> Path:
    return mock_settings.content_dir


@pytest.fixture
def write_post(content_dir):
    """Write a Markdown post into the configured content directory."""

    def _write(slug: str, **kwargs) -> Path:
        return _write_post(content_dir, slug, **kwargs)

    return _write
