"""sitemap.xml, robots.txt and CNAME content."""

from collections.abc import Iterable, Sequence
from datetime import datetime
from xml.sax.saxutils import escape

from knowledge_site.formatting import to_iso
from knowledge_site.models import RenderedPage, SitemapEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap_entries(
    static_paths: Iterable[str],
    pages: Sequence[RenderedPage],
    now: datetime,
) -> list[SitemapEntry]:
    """Static paths first, then the pretty and flat URL of every article.

    Article entries use the article's update time when it has one; every
    other entry is stamped with `now`.
    """
    run_time = to_iso(now)
    entries = [SitemapEntry(loc=path, lastmod=run_time) for path in static_paths]
    for page in pages:
        lastmod = page.updated_at or run_time
        entries.append(SitemapEntry(loc=page.url_dir, lastmod=lastmod))
        entries.append(SitemapEntry(loc=page.url_file, lastmod=lastmod))
    return entries


def serialize_sitemap(entries: Iterable[SitemapEntry], base_url: str) -> str:
    urls = "\n".join(
        f"<url><loc>{escape(base_url + entry.loc)}</loc><lastmod>{escape(entry.lastmod)}</lastmod></url>"
        for entry in entries
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{urls}\n"
        "</urlset>\n"
    )


def robots_txt(base_url: str) -> str:
    return f"User-agent: *\nAllow: /\nSitemap: {base_url}/sitemap.xml\n"


def cname(custom_domain: str) -> str:
    return f"{custom_domain}\n"
