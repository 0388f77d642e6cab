"""Orchestrator for the content-API-to-static-site pipeline."""

import logging
from datetime import datetime, timezone
from typing import Any

from knowledge_site.config import Config
from knowledge_site.content_client import ContentClient
from knowledge_site.listing import render_articles_list, render_tips_list
from knowledge_site.models import Article, RenderedPage, Tip
from knowledge_site.renderer import ArticleRenderer
from knowledge_site.sitemap import build_sitemap_entries, cname, robots_txt, serialize_sitemap
from knowledge_site.templates import (
    ARTICLE_TEMPLATES,
    ARTICLES_LIST_TEMPLATES,
    TIPS_LIST_TEMPLATES,
    TemplateLoader,
)
from knowledge_site.writer import write_text, write_text_best_effort

logger = logging.getLogger(__name__)


def run(
    config: Config,
    client: ContentClient | Any | None = None,
    loader: TemplateLoader | Any | None = None,
    now: datetime | None = None,
) -> dict[str, int]:
    """Execute the generation pipeline.

    Args:
        config: Generator configuration.
        client: ContentClient instance (or mock for testing).
        loader: TemplateLoader instance (or mock for testing).
        now: Run timestamp; defaults to the current UTC time.

    Returns:
        Dictionary with 'articles_written', 'tips_written' and
        'sitemap_entries' counts.

    Raises:
        FetchError: If the content API cannot be read.
        TemplateNotFoundError: If a required template is missing.
        OSError: If a primary output file cannot be written.
    """
    if client is None:
        client = ContentClient(config.content_api_base, timeout=config.request_timeout)
    if loader is None:
        loader = TemplateLoader(config.templates_dir)
    if now is None:
        now = datetime.now(timezone.utc)

    logger.info("Generating articles & tips...")

    articles: list[Article] = client.fetch_articles()
    tips: list[Tip] = client.fetch_tips()

    article_template = loader.load(ARTICLE_TEMPLATES)
    articles_list_template = loader.load(ARTICLES_LIST_TEMPLATES)
    tips_list_template = loader.load(TIPS_LIST_TEMPLATES)

    config.articles_dir.mkdir(parents=True, exist_ok=True)
    config.tips_dir.mkdir(parents=True, exist_ok=True)

    renderer = ArticleRenderer(article_template, config, now)
    pages: list[RenderedPage] = [renderer.write(article) for article in articles]

    articles_list = render_articles_list(
        articles_list_template, articles, pages, config.default_author
    )
    write_text(config.articles_dir / "index.html", articles_list)
    write_text_best_effort(config.knowledge_dir / "articles.html", articles_list)
    logger.info("Wrote articles list")

    tips_list = render_tips_list(tips_list_template, tips)
    write_text(config.tips_dir / "index.html", tips_list)
    write_text_best_effort(config.knowledge_dir / "tips.html", tips_list)
    logger.info("Wrote tips list")

    entries = build_sitemap_entries(config.static_paths, pages, now)
    write_text(config.output_dir / "sitemap.xml", serialize_sitemap(entries, config.site_base_url))
    logger.info("Wrote sitemap.xml")

    write_text(config.output_dir / "robots.txt", robots_txt(config.site_base_url))
    logger.info("Wrote robots.txt")

    write_text(config.output_dir / "CNAME", cname(config.custom_domain))
    logger.info("Wrote CNAME")

    logger.info("Generation complete.")

    return {
        "articles_written": len(pages),
        "tips_written": len(tips),
        "sitemap_entries": len(entries),
    }
