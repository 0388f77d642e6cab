"""Client for the site's content API."""

import logging
from typing import Any

import httpx

from knowledge_site.exceptions import FetchError, InvalidResponseError
from knowledge_site.models import Article, Tip

logger = logging.getLogger(__name__)


class ContentClient:
    """Client for reading article and tip collections from the content API."""

    def __init__(self, api_base: str, timeout: float = 30.0) -> None:
        """Initialize client with the API base URL.

        Args:
            api_base: Base URL of the content API, e.g. "https://api.example.com".
            timeout: Per-request timeout in seconds.

        Raises:
            ValueError: If api_base is empty or whitespace-only.
        """
        if not api_base or not api_base.strip():
            raise ValueError("API base URL must not be empty")
        self._api_base = api_base.strip().rstrip("/")
        self._timeout = timeout

    def fetch_articles(self) -> list[Article]:
        """Fetch all articles.

        Returns:
            Articles in the order the API returned them.

        Raises:
            FetchError: If the request fails or the API returns an error status.
        """
        return [Article.model_validate(item) for item in self._get_collection("articles")]

    def fetch_tips(self) -> list[Tip]:
        """Fetch all tips.

        Returns:
            Tips in the order the API returned them.

        Raises:
            FetchError: If the request fails or the API returns an error status.
        """
        return [Tip.model_validate(item) for item in self._get_collection("tips")]

    def _get_collection(self, name: str) -> list[dict[str, Any]]:
        """GET a collection endpoint and return its JSON objects.

        A body that is not a JSON array yields an empty list. Array items
        that are not objects are skipped.
        """
        url = f"{self._api_base}/{name}"

        try:
            response = httpx.get(url, timeout=self._timeout, follow_redirects=True)
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch {url}: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseError(url) from e

        if not isinstance(data, list):
            logger.warning(f"Expected a list from {url}, got {type(data).__name__}; using empty list")
            return []

        records = [item for item in data if isinstance(item, dict)]
        skipped = len(data) - len(records)
        if skipped:
            logger.warning(f"Skipped {skipped} non-object records from {url}")

        logger.info(f"Fetched {len(records)} {name}")
        return records
