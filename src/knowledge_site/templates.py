"""Template file lookup and placeholder substitution."""

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from knowledge_site.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)

# Candidate names tolerate plural/singular drift between template versions.
ARTICLE_TEMPLATES = ("article.html",)
ARTICLES_LIST_TEMPLATES = ("articles-list.html", "article-list.html", "articles-list.tpl.html")
TIPS_LIST_TEMPLATES = ("tips-list.html", "tips-list.tpl.html")

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Z0-9_]+)\}\}")


class TemplateLoader:
    """Reads HTML templates from a directory."""

    def __init__(self, templates_dir: str | Path) -> None:
        self.templates_dir = Path(templates_dir)

    def load(self, candidates: Sequence[str]) -> str:
        """Return the contents of the first candidate file that exists.

        Args:
            candidates: File names to try, in order.

        Returns:
            The template text.

        Raises:
            TemplateNotFoundError: If no candidate exists.
        """
        for name in candidates:
            path = self.templates_dir / name
            if path.is_file():
                logger.info(f"Loaded template {path}")
                return path.read_text(encoding="utf-8")
        raise TemplateNotFoundError(candidates)


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Replace each {{NAME}} token with values[NAME] in a single pass.

    Unknown tokens are left as they are. Substituted values are not scanned
    again, so a value that itself contains a token is emitted literally.
    """

    def replace(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(replace, template)
