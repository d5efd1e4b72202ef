"""
Catalog data model: diagnostic severities and merged catalog entries.
"""

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any, Dict, Optional

from extraction.config import SENTINEL_NAMES


class Severity(IntEnum):
    """Diagnostic severity, ordered from least to most severe."""

    Unknown = 0
    Hidden = 1
    Info = 2
    Warning = 3
    Error = 4
    Fatal = 5

    def __str__(self) -> str:
        return self.name


_PREFIX_SEVERITY: Dict[str, Severity] = {
    "HDN": Severity.Hidden,
    "INF": Severity.Info,
    "WRN": Severity.Warning,
    "ERR": Severity.Error,
    "FTL": Severity.Fatal,
}


def parse_severity(prefix: str) -> Severity:
    """Map a 3-character identifier prefix (``ERR``, ``WRN``, ...) to a severity.

    Unrecognized prefixes map to ``Unknown``; this never raises.
    """
    return _PREFIX_SEVERITY.get(prefix, Severity.Unknown)


@dataclass(frozen=True)
class CatalogEntry:
    """A single merged diagnostic record.

    Attributes:
        name: Identifier without its severity prefix (``BadSyntax``), or the
            sentinel name itself (``Void``/``Unknown``).
        numeric_code: Diagnostic number; None when the enum member carried no
            integer literal.
        severity: Severity parsed from the identifier prefix.
        message: Title text from the resource file, or "".
        warning_level: Level returned by ``GetWarningLevel``, or 0.
        link: Public documentation URL, or "".
        details: Documentation excerpt or resource description, or "".
    """

    name: str
    numeric_code: Optional[int]
    severity: Severity
    message: str = ""
    warning_level: int = 0
    link: str = ""
    details: str = ""

    @property
    def code(self) -> str:
        """Display code such as ``CS1002``; "" when the entry has no number."""
        if self.numeric_code is None:
            return ""
        return f"CS{self.numeric_code:04d}"

    @property
    def is_sentinel(self) -> bool:
        return self.name in SENTINEL_NAMES and self.severity is Severity.Unknown

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["severity"] = str(self.severity)
        data["code"] = self.code
        return data
