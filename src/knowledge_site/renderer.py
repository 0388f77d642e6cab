"""Article detail page rendering."""

import logging
import re
from datetime import datetime

from knowledge_site.config import Config
from knowledge_site.formatting import (
    collapse_whitespace,
    escape_html,
    format_display_date,
    format_iso,
    merge_keywords,
    text_to_html,
    to_iso,
    youtube_id_from_url,
)
from knowledge_site.models import Article, RenderedPage
from knowledge_site.templates import render_template
from knowledge_site.writer import write_text

logger = logging.getLogger(__name__)

ARTICLES_URL_PREFIX = "/knowledge/articles"
META_DESCRIPTION_LENGTH = 150
DEFAULT_TITLE = "Article"
DEFAULT_CATEGORY = "General"

CAROUSEL_ID_STRIP = re.compile(r"[^a-z0-9_-]", re.IGNORECASE)

SINGLE_IMAGE_HTML = (
    '<div class="mb-3 article-carousel">'
    '<img src="{src}" alt="{alt}" class="img-fluid rounded" /></div>'
)

CAROUSEL_HTML = """
<div id="{cid}" class="carousel slide mb-3 article-carousel" data-bs-ride="carousel">
  <div class="carousel-indicators">
    {indicators}
  </div>
  <div class="carousel-inner">
    {items}
  </div>
  <button class="carousel-control-prev" type="button" data-bs-target="#{cid}" data-bs-slide="prev">
    <span class="carousel-control-prev-icon" aria-hidden="true"></span>
    <span class="visually-hidden">Previous</span>
  </button>
  <button class="carousel-control-next" type="button" data-bs-target="#{cid}" data-bs-slide="next">
    <span class="carousel-control-next-icon" aria-hidden="true"></span>
    <span class="visually-hidden">Next</span>
  </button>
</div>"""

VIDEO_EMBED_HTML = """
<div class="article-video ratio ratio-16x9">
  <iframe src="https://www.youtube.com/embed/{video_id}" title="{title}" allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" allowfullscreen></iframe>
</div>"""


def carousel_id(slug: str) -> str:
    return "carousel-" + CAROUSEL_ID_STRIP.sub("", slug)


def images_html(image_urls: list[str], slug: str, title: str) -> str:
    """Render no block, a single image, or a carousel depending on the image count."""
    if not image_urls:
        return ""

    alt = escape_html(title)
    if len(image_urls) == 1:
        return SINGLE_IMAGE_HTML.format(src=escape_html(image_urls[0]), alt=alt)

    cid = carousel_id(slug)
    indicators = []
    items = []
    for idx, url in enumerate(image_urls):
        active_attrs = 'class="active" aria-current="true"' if idx == 0 else ""
        indicators.append(
            f'<button type="button" data-bs-target="#{cid}" data-bs-slide-to="{idx}" '
            f'{active_attrs} aria-label="Slide {idx + 1}"></button>'
        )
        active_class = " active" if idx == 0 else ""
        items.append(
            f'<div class="carousel-item{active_class}">'
            f'<img src="{escape_html(url)}" class="d-block w-100" alt="{alt}"></div>'
        )

    return CAROUSEL_HTML.format(
        cid=cid,
        indicators="\n".join(indicators),
        items="\n".join(items),
    )


def video_html(video_url: str | None, title: str) -> str:
    """Render a YouTube embed, or nothing if no video id is recognised."""
    video_id = youtube_id_from_url(video_url)
    if not video_id:
        return ""
    return VIDEO_EMBED_HTML.format(video_id=escape_html(video_id), title=escape_html(title))


class ArticleRenderer:
    """Renders article detail pages from the article template."""

    def __init__(self, template: str, config: Config, now: datetime) -> None:
        """
        Args:
            template: The article detail template text.
            config: Generator configuration.
            now: Run timestamp used wherever an article date is missing or invalid.
        """
        self.template = template
        self.config = config
        self.now = now

    def placeholder_values(self, article: Article, slug: str) -> dict[str, str]:
        """Compute the value of every article template placeholder."""
        title = article.title or DEFAULT_TITLE
        created_raw = article.createdAt or article.updatedAt
        modified_raw = article.updatedAt or article.createdAt
        category_names = article.category_names

        if self.config.media_enabled:
            carousel = images_html(article.image_urls, slug, title)
            video = video_html(article.videoUrl, title)
        else:
            carousel = ""
            video = ""

        return {
            "TITLE": escape_html(title),
            "META_DESC": escape_html(
                collapse_whitespace(article.content)[:META_DESCRIPTION_LENGTH]
            ),
            "KEYWORDS": escape_html(
                merge_keywords(category_names, article.health_condition_names)
            ),
            "URL": escape_html(self.config.site_base_url + self.url_dir(slug)),
            "IMAGE": self.config.site_image_url,
            "DATE": format_iso(created_raw, self.now),
            "DATE_MODIFIED": format_iso(modified_raw, self.now),
            "DATE_PRETTY": escape_html(format_display_date(created_raw or to_iso(self.now))),
            "CONTENT": text_to_html(article.content),
            "AUTHOR": escape_html(article.author or self.config.default_author),
            "CATEGORIES": escape_html(", ".join(category_names) or DEFAULT_CATEGORY),
            "SLUG": escape_html(slug),
            "IMAGES_CAROUSEL": carousel,
            "VIDEO_EMBED": video,
        }

    @staticmethod
    def url_dir(slug: str) -> str:
        return f"{ARTICLES_URL_PREFIX}/{slug}/"

    @staticmethod
    def url_file(slug: str) -> str:
        return f"{ARTICLES_URL_PREFIX}/{slug}.html"

    def render(self, article: Article) -> tuple[str, RenderedPage]:
        """Fill the template for one article.

        Returns:
            The HTML document and the page record for list and sitemap use.
        """
        slug = article.resolved_slug
        values = self.placeholder_values(article, slug)
        document = render_template(self.template, values)
        image_urls = article.image_urls

        page = RenderedPage(
            slug=slug,
            title=article.title or DEFAULT_TITLE,
            url_dir=self.url_dir(slug),
            url_file=self.url_file(slug),
            last_modified=values["DATE_MODIFIED"],
            updated_at=format_iso(article.updatedAt, self.now) if article.updatedAt else None,
            first_image=image_urls[0] if image_urls else "",
        )
        return document, page

    def write(self, article: Article) -> RenderedPage:
        """Render an article and write it as <slug>/index.html and <slug>.html.

        Raises:
            OSError: If either file cannot be written. The first file is
                left in place if the second write fails.
        """
        document, page = self.render(article)
        articles_dir = self.config.articles_dir

        write_text(articles_dir / page.slug / "index.html", document)
        write_text(articles_dir / f"{page.slug}.html", document)

        logger.info(f"Wrote article: {page.slug}")
        return page
