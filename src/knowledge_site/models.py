"""Pydantic models for content API records and generated pages."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class Record(BaseModel):
    """Base for API records: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class Category(Record):
    name: str | None = None


class HealthCondition(Record):
    name: str | None = None


class Image(Record):
    url: str | None = None


class Article(Record):
    """An article as returned by the content API."""

    id: int | str | None = None
    slug: str | None = None
    title: str | None = None
    content: str | None = None
    author: str | None = None
    createdAt: str | None = None
    updatedAt: str | None = None
    categories: list[Category] = []
    healthConditions: list[HealthCondition] = []
    images: list[Image] = []
    videoUrl: str | None = None

    @field_validator("categories", "healthConditions", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list:
        """Treat null or non-list values as an empty list; bare strings are names."""
        return _coerce_objects(v, "name")

    @field_validator("images", mode="before")
    @classmethod
    def coerce_images(cls, v: Any) -> list:
        """Accept plain URL strings alongside {"url": ...} objects."""
        return _coerce_objects(v, "url")

    @property
    def fallback_slug(self) -> str:
        if self.id is None:
            logger.warning("Article has neither a usable slug nor an id, using article-None")
        return f"article-{self.id}"

    @property
    def resolved_slug(self) -> str:
        """Explicit slug when usable, otherwise ``article-<id>``."""
        if self.slug is None or not self.slug.strip():
            return self.fallback_slug
        if _is_unsafe_slug(self.slug):
            fallback = self.fallback_slug
            logger.warning(f"Unsafe slug {self.slug!r}, using {fallback}")
            return fallback
        return self.slug

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories if c.name]

    @property
    def health_condition_names(self) -> list[str]:
        return [h.name for h in self.healthConditions if h.name]

    @property
    def image_urls(self) -> list[str]:
        return [image.url for image in self.images if image.url]


class Tip(Record):
    """A short tip as returned by the content API."""

    content: str | None = None
    category: Category | None = None
    createdAt: str | None = None

    @field_validator("category", mode="before")
    @classmethod
    def ignore_non_object(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, dict):
            return None
        return v


class RenderedPage(BaseModel):
    """Derived record for one rendered article, used by list pages and the sitemap."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    url_dir: str
    url_file: str
    last_modified: str
    updated_at: str | None = None
    first_image: str = ""


class SitemapEntry(BaseModel):
    """One <url> element of the sitemap."""

    model_config = ConfigDict(frozen=True)

    loc: str
    lastmod: str


def _is_unsafe_slug(slug: str) -> bool:
    return "/" in slug or "\\" in slug or slug in (".", "..")


def _coerce_objects(v: Any, key: str) -> list:
    """Keep objects, wrap bare strings as ``{key: value}``, drop anything else."""
    if not isinstance(v, list):
        return []
    items = []
    for item in v:
        if isinstance(item, str):
            items.append({key: item})
        elif isinstance(item, dict):
            items.append(item)
        else:
            logger.warning(f"Skipping non-object {key} entry {item!r}")
    return items
