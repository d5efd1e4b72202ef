"""
Localized-message extraction from a .resx resource document.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict

from core.errors import ResourceFormatError

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def extract_resource_dictionary(document: str) -> Dict[str, str]:
    """Map each ``<data name="X"><value>...</value></data>`` to ``X -> text``.

    Only ``data`` elements directly under the root are read. Values keep
    embedded newlines; an empty ``<value/>`` maps to "". Duplicate names
    resolve to the last occurrence.

    Args:
        document: Full resource document text.

    Returns:
        Mapping from resource name to resource text.

    Raises:
        ResourceFormatError: If the XML is malformed or a ``data`` element lacks
            its ``name`` attribute or ``value`` child.
    """
    try:
        root = ET.fromstring(document.lstrip(_BOM))
    except ET.ParseError as e:
        raise ResourceFormatError(f"Resource document is not well-formed XML: {e}") from e

    resources: Dict[str, str] = {}
    for element in root.findall("data"):
        name = element.get("name")
        if name is None:
            raise ResourceFormatError("Resource <data> element has no 'name' attribute")
        value = element.find("value")
        if value is None:
            raise ResourceFormatError(f"Resource '{name}' has no <value> element")
        resources[name] = value.text or ""

    logger.info("Extracted %d resource strings", len(resources))
    return resources
