"""Column sorting for directory listings.

Sort state travels in the query string as ``?C=<field>;O=<direction>``:

    C=N  name           (codepoint order of the display name)
    C=M  last modified  (numeric epoch seconds)
    C=S  size           (numeric bytes)
    C=D  type           (codepoint order of the raw content type)

    O=A  ascending
    O=D  descending

Anything else falls back to name ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List

from dirlisting.entries import Entry


class SortField(str, Enum):
    NAME = "N"
    MODIFIED = "M"
    SIZE = "S"
    TYPE = "D"


class SortDirection(str, Enum):
    ASCENDING = "A"
    DESCENDING = "D"

    def inverted(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class SortSpec:
    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASCENDING

    def query(self) -> str:
        """Query string fragment for this spec, e.g. ``C=M;O=D``."""
        return f"C={self.field.value};O={self.direction.value}"


DEFAULT_SORT = SortSpec()

# Type sorts the raw content type string, not the icon class
SORT_KEYS: Dict[SortField, Callable[[Entry], Any]] = {
    SortField.NAME: lambda e: e.display_name,
    SortField.MODIFIED: lambda e: e.mtime_raw,
    SortField.SIZE: lambda e: e.size,
    SortField.TYPE: lambda e: e.content_type,
}


def parse_sort_spec(query_string: str) -> SortSpec:
    """Decode the sort state from a raw query string.

    Parameters are split on ``&`` only and never percent-decoded, so
    ``C=M;O=D`` arrives as the single parameter ``C`` with value ``M;O=D``
    while ``C=M%3BO%3DD`` matches nothing.
    """
    for param in query_string.split("&"):
        key, _, value = param.partition("=")
        if key != "C":
            continue
        field, sep, direction = value.partition(";O=")
        if not sep:
            break
        try:
            return SortSpec(SortField(field), SortDirection(direction))
        except ValueError:
            break
    return DEFAULT_SORT


def sort_entries(entries: List[Entry], spec: SortSpec) -> List[Entry]:
    """Return a new list ordered by ``spec``.

    The sort is stable in both directions: descending mirrors the comparison
    rather than reversing the ascending result, so tied entries keep their
    enumeration order either way.
    """
    key = SORT_KEYS[spec.field]
    return sorted(entries, key=key, reverse=spec.direction is SortDirection.DESCENDING)
