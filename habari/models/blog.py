"""Blog post data models."""

from datetime import date, datetime, time, timezone

from pydantic import BaseModel, Field, field_validator

SLUG_PATTERN = r"^[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$"


class BlogPost(BaseModel):
    """Blog post metadata for listing display (no body)."""

    slug: str = Field(..., pattern=SLUG_PATTERN, max_length=200)
    date: datetime
    title: str
    summary: str = ""
    tags: frozenset[str] = frozenset()
    draft: bool = False

    model_config = {"frozen": True}

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        """Plain dates from front matter become midnight UTC."""
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        return value

    @field_validator("date", mode="after")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        # Naive and aware datetimes can't be compared when sorting
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _strip_tags(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, (str, int, float)):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError(f"tags must be a list, got {value!r}")
        tags = set()
        for tag in value:
            # YAML turns tags like 2024 into numbers
            if isinstance(tag, bool) or not isinstance(tag, (str, int, float)):
                raise ValueError(f"tag must be a string, got {tag!r}")
            tag = str(tag).strip()
            if tag:
                tags.add(tag)
        return frozenset(tags)

    @property
    def href(self) -> str:
        return f"/blog/{self.slug}"


class BlogIndex(BaseModel):
    """Blog post index."""

    posts: list[BlogPost]
    total: int


class PostPage(BaseModel):
    """One page of a paginated post listing."""

    posts: list[BlogPost]
    page: int
    per_page: int
    total: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
