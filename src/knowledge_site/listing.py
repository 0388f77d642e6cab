"""Articles and tips list pages."""

from collections.abc import Sequence

from knowledge_site.formatting import escape_html, excerpt_text, format_display_date
from knowledge_site.models import Article, RenderedPage, Tip
from knowledge_site.templates import render_template

CARD_EXCERPT_LENGTH = 240

ARTICLE_CARD_HTML = """
  <div class="col-12 col-md-6 col-lg-4">
    <div class="card h-100">
      {image}
      <div class="card-body d-flex flex-column">
        <h5 class="card-title">{title}</h5>
        <p class="card-text text-muted small fst-italic">By {author} · {date}</p>
        <p class="card-text flex-grow-1">{excerpt}</p>
        {badges}
        <a href="{href}" class="btn btn-sm btn-primary mt-3"><b>Read article</b></a>
      </div>
    </div>
  </div>
        """

TIP_ROW_HTML = """
  <div class="list-group-item d-flex justify-content-between align-items-start">
    <div>
      <div class="mb-1">{content}</div>
      {category}
    </div>
    <small class="text-muted ms-3">{date}</small>
  </div>"""


def article_card_html(article: Article, page: RenderedPage, default_author: str) -> str:
    """One card for the articles grid."""
    title = escape_html(page.title)
    image = ""
    if page.first_image:
        image = f'<img src="{escape_html(page.first_image)}" alt="{title}" class="card-img-top">'

    badges = "".join(
        f'<span class="badge rounded-pill bg-secondary me-1 mb-1">{escape_html(name)}</span>'
        for name in article.category_names
    )
    if badges:
        badges = f'<div class="d-flex flex-wrap gap-1 mt-1">{badges}</div>'

    return ARTICLE_CARD_HTML.format(
        image=image,
        title=title,
        author=escape_html(article.author or default_author),
        date=escape_html(format_display_date(article.createdAt)),
        excerpt=escape_html(excerpt_text(article.content, CARD_EXCERPT_LENGTH)),
        badges=badges,
        href=escape_html(page.url_dir),
    )


def tip_row_html(tip: Tip) -> str:
    """One list-group item for the tips page."""
    category_name = tip.category.name if tip.category else None
    category = f'<small class="text-muted">{escape_html(category_name)}</small>' if category_name else ""
    return TIP_ROW_HTML.format(
        content=escape_html(tip.content),
        category=category,
        date=escape_html(format_display_date(tip.createdAt)),
    )


def render_articles_list(
    template: str,
    articles: Sequence[Article],
    pages: Sequence[RenderedPage],
    default_author: str,
) -> str:
    """Fill {{ARTICLE_ROWS}} with one card per article, in the given order.

    Raises:
        ValueError: If articles and pages differ in length.
    """
    if len(articles) != len(pages):
        raise ValueError("articles and pages must be the same length")
    rows = "\n".join(
        article_card_html(article, page, default_author)
        for article, page in zip(articles, pages)
    )
    return render_template(template, {"ARTICLE_ROWS": rows})


def render_tips_list(template: str, tips: Sequence[Tip]) -> str:
    """Fill {{TIP_ROWS}} with one item per tip, in the given order."""
    rows = "\n".join(tip_row_html(tip) for tip in tips)
    return render_template(template, {"TIP_ROWS": rows})
