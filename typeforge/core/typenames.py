"""
Type-name helpers shared by the collector, the rules and the providers.
"""

from __future__ import annotations

import re

from typeforge.core.models.entity import UNKNOWN_TYPE_NAME

# int?, Nullable<int>, System.Nullable`1[int], Optional[int], int | None
_NULLABLE_PATTERNS = (
    re.compile(r"^(?P<inner>.+?)\s*\?$"),
    re.compile(r"^(?:System\.)?Nullable(?:`1)?[<\[](?P<inner>.+)[>\]]$"),
    re.compile(r"^(?:typing\.)?Optional\[(?P<inner>.+)\]$"),
    re.compile(r"^(?P<inner>.+?)\s*\|\s*None$"),
    re.compile(r"^None\s*\|\s*(?P<inner>.+)$"),
)


def element_type_name(type_name: str | None) -> str | None:
    """Collection element name with surrounding whitespace removed, or None."""
    return (type_name or "").strip() or None


def unwrap_nullable_name(type_name: str | None) -> str:
    """Strip nullable wrappers from a type name.

    Blank or missing names render as the ``Unknown`` placeholder.
    """
    name = (type_name or "").strip()
    changed = True
    while name and changed:
        changed = False
        for pattern in _NULLABLE_PATTERNS:
            match = pattern.match(name)
            if match:
                name = match.group("inner").strip()
                changed = True
                break
    return name or UNKNOWN_TYPE_NAME
