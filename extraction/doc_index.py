"""
Documentation link harvesting from the compiler-messages table of contents.
"""

import logging
from typing import Dict

from extraction.config import DOC_TOC_PATTERN
from fetching.config import DOC_URL_TEMPLATE, doc_link_for_code

logger = logging.getLogger(__name__)


def extract_doc_links(
    toc: str,
    enabled: bool = True,
    url_template: str = DOC_URL_TEMPLATE,
) -> Dict[int, str]:
    """Map every code referenced as ``href: cs<NNNN>.md`` to its public doc URL.

    Args:
        toc: Table-of-contents text (YAML, scanned with a regex).
        enabled: When False the TOC is ignored and an empty table returned.
        url_template: Link template with a ``{code}`` placeholder.

    Returns:
        Mapping from numeric code to documentation URL. The first reference
        to a code wins.
    """
    links: Dict[int, str] = {}
    if not enabled:
        return links

    for match in DOC_TOC_PATTERN.finditer(toc):
        code = int(match.group("code"))
        if code in links:
            logger.debug("Duplicate TOC entry for CS%04d ignored", code)
            continue
        links[code] = doc_link_for_code(code, url_template)

    logger.info("Found %d documented codes in table of contents", len(links))
    return links
