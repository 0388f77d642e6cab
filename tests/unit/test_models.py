"""Unit tests for Pydantic data models."""

import logging

import pytest
from pydantic import ValidationError

from knowledge_site.models import Article, RenderedPage, Tip


class TestArticleModel:
    """Tests for the Article Pydantic model."""

    def test_article_from_api_payload(self):
        """A typical API record should validate, ignoring unknown fields."""
        article = Article.model_validate(
            {
                "id": 7,
                "slug": "breathing-basics",
                "title": "Breathing Basics",
                "content": "Breathe in.\n\nBreathe out.",
                "author": "Asha",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-02-01T08:00:00Z",
                "categories": [{"id": 1, "name": "Pranayama"}],
                "healthConditions": [{"id": 3, "name": "Stress"}],
                "images": [{"url": "https://cdn.example.com/a.jpg"}],
                "videoUrl": "https://youtu.be/abcdefghijk",
                "published": True,
            }
        )

        assert article.title == "Breathing Basics"
        assert article.category_names == ["Pranayama"]
        assert article.health_condition_names == ["Stress"]
        assert article.image_urls == ["https://cdn.example.com/a.jpg"]

    def test_article_is_immutable(self):
        article = Article(id=1, title="Original")

        with pytest.raises(ValidationError):
            article.title = "Changed"

    def test_null_lists_become_empty(self):
        article = Article.model_validate(
            {"id": 1, "categories": None, "healthConditions": "n/a", "images": None}
        )

        assert article.categories == []
        assert article.healthConditions == []
        assert article.images == []

    def test_bare_strings_are_accepted_for_images_and_categories(self):
        article = Article.model_validate(
            {"id": 1, "images": ["https://cdn.example.com/a.jpg"], "categories": ["Yoga"]}
        )

        assert article.image_urls == ["https://cdn.example.com/a.jpg"]
        assert article.category_names == ["Yoga"]

    def test_blank_names_and_urls_are_dropped(self):
        article = Article.model_validate(
            {
                "id": 1,
                "categories": [{"name": ""}, {"name": None}, {"name": "Yoga"}],
                "images": [{"url": ""}, {}, {"url": "https://cdn.example.com/b.jpg"}],
            }
        )

        assert article.category_names == ["Yoga"]
        assert article.image_urls == ["https://cdn.example.com/b.jpg"]

    def test_numeric_text_fields_are_coerced(self):
        article = Article.model_validate({"id": "42", "title": 2024})

        assert article.title == "2024"

    def test_non_object_list_items_are_skipped(self):
        """Numbers or nulls inside a list must not fail the whole record."""
        article = Article.model_validate(
            {
                "id": 1,
                "categories": [1, None, {"name": "Yoga"}],
                "healthConditions": [True, "Stress"],
                "images": [7, "https://cdn.example.com/a.jpg"],
            }
        )

        assert article.category_names == ["Yoga"]
        assert article.health_condition_names == ["Stress"]
        assert article.image_urls == ["https://cdn.example.com/a.jpg"]


class TestResolvedSlug:
    """Tests for slug resolution."""

    def test_explicit_slug_is_used(self):
        assert Article(id=1, slug="morning-flow").resolved_slug == "morning-flow"

    @pytest.mark.parametrize("slug", [None, "", "   "])
    def test_missing_slug_falls_back_to_id(self, slug):
        assert Article(id=12, slug=slug).resolved_slug == "article-12"

    @pytest.mark.parametrize("slug", ["../etc", "a/b", "a\\b", "..", "."])
    def test_unsafe_slug_falls_back_to_id(self, slug):
        assert Article(id=5, slug=slug).resolved_slug == "article-5"

    def test_missing_slug_and_id_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="knowledge_site.models"):
            slug = Article(slug=None).resolved_slug

        assert slug == "article-None"
        assert "neither a usable slug nor an id" in caplog.text

    def test_missing_slug_with_id_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="knowledge_site.models"):
            Article(id=3).resolved_slug

        assert caplog.text == ""


class TestTipModel:
    """Tests for the Tip Pydantic model."""

    def test_tip_with_category(self):
        tip = Tip.model_validate(
            {"content": "Drink water", "category": {"name": "Hydration"}, "createdAt": "2024-01-01"}
        )

        assert tip.category is not None
        assert tip.category.name == "Hydration"

    def test_tip_without_category(self):
        tip = Tip.model_validate({"content": "Stretch daily"})

        assert tip.category is None

    def test_non_object_category_is_ignored(self):
        tip = Tip.model_validate({"content": "Rest", "category": "Sleep"})

        assert tip.category is None


class TestRenderedPage:
    def test_rendered_page_requires_slug(self):
        with pytest.raises(ValidationError) as exc_info:
            RenderedPage(
                title="T",
                url_dir="/knowledge/articles/t/",
                url_file="/knowledge/articles/t.html",
                last_modified="2024-01-01T00:00:00.000Z",
            )

        assert "slug" in str(exc_info.value)
