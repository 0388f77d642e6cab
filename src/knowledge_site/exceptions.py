"""Custom exceptions for the knowledge site generator."""

from collections.abc import Sequence


class FetchError(Exception):
    """Raised when the content API cannot be read."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class InvalidResponseError(FetchError):
    """Raised when the content API returns a body that is not JSON."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Response from {url} is not valid JSON", url=url)


class TemplateNotFoundError(Exception):
    """Raised when none of the candidate template files exist."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(f"None of the templates found: {self.candidates}")
