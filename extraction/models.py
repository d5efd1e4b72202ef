"""
Data models for facts extracted from upstream sources.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EnumMember:
    """One member of a C# enum declaration, in declaration order.

    Attributes:
        name: Member identifier as written (e.g. ``ERR_BadSyntax``).
        literal_text: Initializer expression text verbatim, or None when the
            member has no ``= value`` clause.
    """

    name: str
    literal_text: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
