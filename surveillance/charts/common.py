from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Optional

NO_PERCENT = "0"


def year_key(year: str) -> int:
    """Sort key ordering 4-digit year strings numerically."""
    return int(year)


def sorted_years(years: Iterable[str]) -> list[str]:
    return sorted(years, key=year_key)


def as_count(value: Any) -> float | int:
    """Numeric cell value, 0 for absent/null/boolean entries."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def format_percent(value: float) -> str:
    """Format to one decimal place, rounding exact halves away from zero."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def percent_change(prior: float, current: float) -> tuple[float, str]:
    """
    Return ``(change, percent)`` between two totals.

    ``percent`` is ``(change / prior) * 100`` to one decimal as a string, or the
    literal ``"0"`` when ``prior`` is not positive.
    """
    change = current - prior
    if prior > 0:
        return change, format_percent(change / prior * 100)
    return change, NO_PERCENT


def lookup_name(entries: Optional[Iterable[Mapping[str, Any]]], entry_id: str) -> str:
    """Display name for an id in a ``[{id, name}]`` catalog, falling back to the id."""
    for entry in entries or []:
        if entry.get("id") == entry_id:
            return entry.get("name") or entry_id
    return entry_id
