"""Site metadata and project data models.

Both are read-only values loaded from ``data/`` and passed explicitly to the
renderers.
"""

from pydantic import BaseModel, Field

COUNTLY_SDK_URL = (
    "https://cdnjs.cloudflare.com/ajax/libs/countly-sdk-web/20.4.0/countly.min.js"
)


class AnalyticsConfig(BaseModel):
    """Countly analytics keys."""

    countly_app_key: str = ""
    countly_site_url: str = ""
    countly_sdk_url: str = COUNTLY_SDK_URL

    model_config = {"frozen": True}

    @property
    def enabled(self) -> bool:
        return bool(self.countly_app_key and self.countly_site_url)


class NewsletterConfig(BaseModel):
    """Newsletter provider; an empty provider hides the subscribe form."""

    provider: str = ""
    form_action: str = ""

    model_config = {"frozen": True}


class SiteMetadata(BaseModel):
    """Process-wide site configuration."""

    title: str
    description: str = ""
    author: str = ""
    site_url: str = ""
    language: str = "en-us"
    # Home page hero
    greeting: str = ""
    intro: list[str] = []
    hero_image: str | None = None
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    newsletter: NewsletterConfig = Field(default_factory=NewsletterConfig)

    model_config = {"frozen": True}


class ProjectEntry(BaseModel):
    """A single portfolio project card."""

    title: str
    description: str
    image_ref: str | None = None
    link: str | None = None

    model_config = {"frozen": True}
