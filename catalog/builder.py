"""
Catalog builder: joins the extracted tables into catalog entries.

Each enum member becomes one ``CatalogEntry``. Lookups against the other
tables are explicit ``dict.get`` calls with the fallback chain spelled out
per field; a missing key never raises.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from catalog.models import CatalogEntry, Severity, parse_severity
from extraction.config import DESCRIPTION_SUFFIX, SENTINEL_NAMES, TITLE_SUFFIX
from extraction.models import EnumMember
from extraction.parser import parse_integer_literal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceTables:
    """Read-only lookup tables produced by the extraction passes.

    Attributes:
        messages: Resource name -> text.
        warning_levels: Enum member name -> warning level.
        doc_links: Numeric code -> documentation URL.
        doc_details: Numeric code -> documentation excerpt.
    """

    messages: Mapping[str, str] = field(default_factory=dict)
    warning_levels: Mapping[str, int] = field(default_factory=dict)
    doc_links: Mapping[int, str] = field(default_factory=dict)
    doc_details: Mapping[int, str] = field(default_factory=dict)


def sentinel_entry(name: str) -> CatalogEntry:
    """Placeholder entry for the ``Void``/``Unknown`` enum members."""
    return CatalogEntry(name=name, numeric_code=0, severity=Severity.Unknown)


def _first_present(table: Mapping, *keys) -> Optional[str]:
    for key in keys:
        value = table.get(key)
        if value is not None:
            return value
    return None


def build_entry(member: EnumMember, tables: SourceTables) -> CatalogEntry:
    """Merge one enum member with the lookup tables.

    Args:
        member: Enum member as extracted from ``ErrorCode``.
        tables: Message, warning-level, link and detail tables.

    Returns:
        The merged, immutable entry.
    """
    name = member.name
    if name in SENTINEL_NAMES:
        return sentinel_entry(name)

    severity = parse_severity(name[:3])
    numeric_code = parse_integer_literal(member.literal_text)
    if numeric_code is None:
        logger.warning(
            "Enum member %s has no integer literal (%r); it will have no code",
            name,
            member.literal_text,
        )

    message = _first_present(tables.messages, name + TITLE_SUFFIX, name)

    link = None
    details = None
    if numeric_code is not None:
        link = tables.doc_links.get(numeric_code)
        details = tables.doc_details.get(numeric_code)
    if details is None:
        details = tables.messages.get(name + DESCRIPTION_SUFFIX)

    return CatalogEntry(
        name=name[4:],
        numeric_code=numeric_code,
        severity=severity,
        message=message if message is not None else "",
        warning_level=tables.warning_levels.get(name, 0),
        link=link if link is not None else "",
        details=details if details is not None else "",
    )


def build_catalog(members: Iterable[EnumMember], tables: SourceTables) -> List[CatalogEntry]:
    """Build catalog entries in enum declaration order."""
    entries = [build_entry(member, tables) for member in members]
    logger.info("Built catalog with %d entries", len(entries))
    return entries


def severity_counts(entries: Iterable[CatalogEntry]) -> Dict[Severity, int]:
    """Count entries per severity, most severe first, excluding ``Unknown``."""
    counts: Dict[Severity, int] = {}
    for entry in sorted(entries, key=lambda e: e.severity, reverse=True):
        if entry.severity is Severity.Unknown:
            continue
        counts[entry.severity] = counts.get(entry.severity, 0) + 1
    return counts
