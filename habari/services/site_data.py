"""Static site data: site metadata and the project list from data/*.yaml."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from habari.config import get_settings
from habari.models.site import ProjectEntry, SiteMetadata

logger = logging.getLogger(__name__)

SITE_FILE = "site.yaml"
PROJECTS_FILE = "projects.yaml"


def _read_yaml(path: Path) -> dict:
    with open(path) as f:
        data = yaml.safe_load(f)
    return data or {}


def load_site_metadata(config_path: Path) -> SiteMetadata:
    """Load site metadata from a YAML file.

    Countly keys set in the environment (``HABARI_COUNTLY_APP_KEY`` and
    ``HABARI_COUNTLY_SITE_URL``) take precedence over the file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        pydantic.ValidationError: If a required field is missing.
    """
    data = _read_yaml(config_path)

    settings = get_settings()
    analytics = dict(data.get("analytics") or {})
    if settings.countly_app_key:
        analytics["countly_app_key"] = settings.countly_app_key
    if settings.countly_site_url:
        analytics["countly_site_url"] = settings.countly_site_url
    data["analytics"] = analytics

    return SiteMetadata.model_validate(data)


def load_projects(config_path: Path) -> list[ProjectEntry]:
    """Load the project list from a YAML file (``projects:`` key)."""
    data = _read_yaml(config_path)
    projects = [ProjectEntry.model_validate(p) for p in data.get("projects", [])]
    logger.info("Loaded %d projects from %s", len(projects), config_path)
    return projects


@lru_cache
def get_site_metadata() -> SiteMetadata:
    """Return the site metadata, loaded once per process."""
    return load_site_metadata(get_settings().data_dir / SITE_FILE)


@lru_cache
def get_projects() -> tuple[ProjectEntry, ...]:
    """Return the project list, loaded once per process."""
    return tuple(load_projects(get_settings().data_dir / PROJECTS_FILE))
