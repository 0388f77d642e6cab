"""Command-line interface for the knowledge site generator."""

import logging
import sys

import click

from knowledge_site.config import Config
from knowledge_site.content_client import ContentClient
from knowledge_site.exceptions import FetchError, TemplateNotFoundError
from knowledge_site.orchestrator import run
from knowledge_site.templates import TemplateLoader


def setup_logging() -> None:
    """Configure standard logging format for the CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@click.command()
def main() -> None:
    """Fetch articles and tips from the content API and write the static site.

    Settings come from environment variables (CONTENT_API_BASE, OUTPUT_DIR,
    SITE_BASE_URL, TEMPLATES_DIR, ...).
    """
    setup_logging()

    try:
        config = Config()
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        client = ContentClient(config.content_api_base, timeout=config.request_timeout)
        loader = TemplateLoader(config.templates_dir)

        result = run(config=config, client=client, loader=loader)

        click.echo(f"Wrote {result['articles_written']} articles and {result['tips_written']} tips")
        click.echo(f"Sitemap has {result['sitemap_entries']} entries under {config.output_dir}")

    except FetchError as e:
        click.echo(f"Content API error: {e}", err=True)
        sys.exit(1)

    except TemplateNotFoundError as e:
        click.echo(f"Template error: {e}", err=True)
        sys.exit(1)

    except OSError as e:
        click.echo(f"Write failed: {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
