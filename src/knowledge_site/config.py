"""Configuration management via environment variables."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_STATIC_PATHS = [
    "/",
    "/contactUs/",
    "/privacyPolicy/",
    "/disclaimerPolicy/",
    "/refundPolicy/",
    "/termsConditions/",
    "/knowledge/articles/",
    "/knowledge/tips/",
]


class Config(BaseSettings):
    """Generator configuration loaded from environment variables."""

    content_api_base: str = "https://yogastra-backend-2d084cc0cf9e.herokuapp.com"
    site_base_url: str = "https://yogastraa.com"
    output_dir: Path = Path("public")
    templates_dir: Path = Path("templates")
    custom_domain: str = "yogastraa.com"
    site_image_path: str = "/assets/yogastraa.jpg"
    default_author: str = "Yogastraa Team"
    media_enabled: bool = True
    request_timeout: float = 30.0
    static_paths: list[str] = DEFAULT_STATIC_PATHS

    @field_validator("content_api_base", "site_base_url", "custom_domain", "default_author")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v.strip()

    @field_validator("content_api_base", "site_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @property
    def knowledge_dir(self) -> Path:
        return self.output_dir / "knowledge"

    @property
    def articles_dir(self) -> Path:
        return self.knowledge_dir / "articles"

    @property
    def tips_dir(self) -> Path:
        return self.knowledge_dir / "tips"

    @property
    def site_image_url(self) -> str:
        return f"{self.site_base_url}{self.site_image_path}"
