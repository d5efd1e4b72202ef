"""
HTTP boundary for the catalog pipeline.

``SourceTextFetcher`` is the only component that touches the network. It is
created once per run and handed explicitly to every pass that needs remote
text; it owns a pooled ``requests.Session`` sized for the worker limit.
"""

import logging
from typing import Optional, Protocol

import requests
from requests.adapters import HTTPAdapter

from core.errors import FetchError
from fetching.config import HTTP_TIMEOUT, MAX_WORKERS, USER_AGENT

logger = logging.getLogger(__name__)


class TextSource(Protocol):
    """Anything that can GET a URL and return its body as text."""

    def fetch(self, url: str) -> str:
        ...


class SourceTextFetcher:
    """Retrieve raw text over HTTP, failing loudly on any non-success.

    No retries are attempted: a failed request raises ``FetchError`` and
    aborts the run.

    Example:
        >>> with SourceTextFetcher() as fetcher:
        ...     text = fetcher.fetch("https://example.org/ErrorCode.cs")
    """

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT,
        pool_size: int = MAX_WORKERS,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            session.headers["User-Agent"] = USER_AGENT
        self._session = session

    def fetch(self, url: str) -> str:
        """GET ``url`` and return the decoded body.

        Args:
            url: Absolute URL of the resource.

        Returns:
            Response body as text (UTF-8 unless the server says otherwise).

        Raises:
            FetchError: On connection errors, timeouts, or non-2xx status.
        """
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        if not response.ok:
            raise FetchError(url, response.reason or "request failed", response.status_code)

        if response.encoding is None:
            response.encoding = "utf-8"
        text = response.text
        logger.debug("Fetched %s (%d chars)", url, len(text))
        return text

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "SourceTextFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
