"""
End-to-end catalog generation.

Phase 1 ("extract") fetches and parses the four independent sources
concurrently: the ErrorCode enum, the GetWarningLevel switch, the resource
strings and the documentation TOC. Phase 2 ("details") fetches per-code
documentation pages for the codes in the link table. Phase 3 ("build") joins
everything into catalog entries. Any failure aborts the run before a
catalog exists.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List

from catalog.builder import SourceTables, build_catalog
from catalog.models import CatalogEntry
from core.structured_logging import phase_scope
from core.tasks import run_concurrently
from extraction.doc_details import fetch_doc_details
from extraction.doc_index import extract_doc_links
from extraction.enum_members import extract_enum_members
from extraction.resources import extract_resource_dictionary
from extraction.warning_levels import extract_warning_levels
from fetching import config
from fetching.client import TextSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogOptions:
    """Inputs of one catalog run.

    Detail pages are fetched for the codes in the link table, so
    ``include_details`` has no effect unless ``include_links`` is also set.
    """

    include_links: bool = config.INCLUDE_LINKS
    include_details: bool = config.INCLUDE_DETAILS
    max_workers: int = config.MAX_WORKERS
    error_codes_url: str = config.ERROR_CODES_URL
    error_facts_url: str = config.ERROR_FACTS_URL
    resources_url: str = config.RESOURCES_URL
    doc_base_url: str = config.DOC_BASE_URL
    doc_url_template: str = config.DOC_URL_TEMPLATE


def _doc_index_pass(fetcher: TextSource, options: CatalogOptions) -> Dict[int, str]:
    if not options.include_links:
        return {}
    toc = fetcher.fetch(config.doc_toc_url(options.doc_base_url))
    return extract_doc_links(toc, url_template=options.doc_url_template)


def generate_catalog(fetcher: TextSource, options: CatalogOptions) -> List[CatalogEntry]:
    """Fetch, extract and join all sources into the ordered catalog.

    Args:
        fetcher: Transport shared by every fetch in the run.
        options: Feature flags, worker bound and source URLs.

    Returns:
        Catalog entries in ``ErrorCode`` declaration order, sentinels included.

    Raises:
        CatalogError: On any fetch failure, missing declaration, or malformed
            resource document.
    """
    t0 = time.time()

    with phase_scope("extract"):
        logger.info(
            "Fetching sources (links=%s, details=%s, workers=%d)",
            options.include_links,
            options.include_details,
            options.max_workers,
        )
        passes = run_concurrently(
            {
                "members": lambda: extract_enum_members(
                    fetcher.fetch(options.error_codes_url)
                ),
                "warning_levels": lambda: extract_warning_levels(
                    fetcher.fetch(options.error_facts_url)
                ),
                "messages": lambda: extract_resource_dictionary(
                    fetcher.fetch(options.resources_url)
                ),
                "doc_index": lambda: _doc_index_pass(fetcher, options),
            },
            max_workers=options.max_workers,
        )

    doc_links = passes["doc_index"]

    with phase_scope("details"):
        doc_details = fetch_doc_details(
            fetcher,
            doc_links.keys(),
            enabled=options.include_details,
            base_url=options.doc_base_url,
            max_workers=options.max_workers,
        )

    with phase_scope("build"):
        tables = SourceTables(
            messages=passes["messages"],
            warning_levels=passes["warning_levels"],
            doc_links=doc_links,
            doc_details=doc_details,
        )
        entries = build_catalog(passes["members"], tables)

    logger.info("Catalog generated in %.2fs", time.time() - t0)
    return entries
