"""
Per-code documentation excerpts.

Each documented code has a markdown page with a YAML front-matter preamble
and an H1 title; the excerpt is everything after the title.
"""

import logging
from typing import Dict, Iterable

from core.tasks import run_concurrently
from extraction.config import DOC_HEADING_PREFIX
from fetching.client import TextSource
from fetching.config import DOC_BASE_URL, MAX_WORKERS, doc_page_url

logger = logging.getLogger(__name__)


def extract_doc_excerpt(page: str) -> str:
    """Strip the preamble, the first ``# `` heading and the blank lines after it.

    Returns "" when the page has no heading.

    Example:
        >>> extract_doc_excerpt("---\\ntitle: x\\n---\\n# CS0001\\n\\nBody\\nMore")
        'Body\\nMore'
    """
    lines = page.split("\n")
    index = 0
    while index < len(lines) and not lines[index].startswith(DOC_HEADING_PREFIX):
        index += 1
    index += 1
    while index < len(lines) and not lines[index].strip():
        index += 1
    return "\n".join(lines[index:])


def fetch_doc_details(
    fetcher: TextSource,
    codes: Iterable[int],
    enabled: bool = True,
    base_url: str = DOC_BASE_URL,
    max_workers: int = MAX_WORKERS,
) -> Dict[int, str]:
    """Fetch the documentation page of each code and keep its excerpt.

    Args:
        fetcher: Transport used for every page.
        codes: Codes that have a documentation page.
        enabled: When False nothing is fetched and an empty table returned.
        base_url: Raw documentation folder holding ``cs{code:04d}.md``.
        max_workers: Upper bound on concurrent requests.

    Returns:
        Mapping from numeric code to excerpt text.

    Raises:
        FetchError: If any page cannot be retrieved. Pending fetches are
            cancelled and no partial table is returned.
    """
    if not enabled:
        return {}

    def _page_task(code: int):
        return lambda: extract_doc_excerpt(fetcher.fetch(doc_page_url(code, base_url)))

    tasks = {code: _page_task(code) for code in sorted(set(codes))}
    if not tasks:
        return {}

    logger.info("Fetching %d documentation pages (workers=%d)", len(tasks), max_workers)
    details = run_concurrently(tasks, max_workers=max_workers)
    logger.info("Collected %d documentation excerpts", len(details))
    return details
