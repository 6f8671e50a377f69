"""Schema definitions and validators for the unified surveillance document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional, Sequence


UNIFIED_REQUIRED_SECTIONS: tuple[str, ...] = (
    "metadata",
    "regions",
    "diseases",
    "data",
    "analytics",
)

UNIFIED_REQUIRED_REGION_PAYLOADS: tuple[str, ...] = (
    "jakarta",
    "cirebon",
    "bogor",
    "jatim",
)

JATIM_INSIGHT_FIELDS: tuple[str, ...] = (
    "cases2024",
    "cases2025",
    "peak2022",
    "current2024",
)


@dataclass(frozen=True)
class DiseaseCount:
    """Male/female/total triple for one disease (Jakarta-style records)."""

    laki: int = 0
    perempuan: int = 0
    total: int = 0

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]]) -> "DiseaseCount":
        if not payload:
            return cls()
        return cls(
            laki=payload.get("laki", 0) or 0,
            perempuan=payload.get("perempuan", 0) or 0,
            total=payload.get("total", 0) or 0,
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class JatimInsight:
    """
    East Java insight card.

    Every numeric field is optional and ``None`` when the document omits it:
        cases2024: case count reported for 2024.
        cases2025: case count reported for (partial) 2025.
        peak2022: peak count observed in 2022.
        current2024: latest 2024 count compared against a peak.
    """

    key: str
    description: str
    cases2024: Optional[float] = None
    cases2025: Optional[float] = None
    peak2022: Optional[float] = None
    current2024: Optional[float] = None

    @classmethod
    def from_mapping(cls, key: str, payload: Mapping[str, Any]) -> "JatimInsight":
        numeric = {name: payload.get(name) for name in JATIM_INSIGHT_FIELDS}
        return cls(key=key, description=payload.get("description", ""), **numeric)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def find_missing_keys(payload: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Return list of keys missing from a mapping."""
    return [key for key in required if key not in payload]


def validate_unified_document(payload: Any, required: Iterable[str] | None = None) -> None:
    """
    Validate that a parsed payload minimally resembles the unified document.

    Raises:
        ValueError: if the payload is not an object or required sections are missing.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"unified document must be a JSON object, got {type(payload).__name__}")

    to_check = tuple(required) if required is not None else UNIFIED_REQUIRED_SECTIONS
    missing = find_missing_keys(payload, to_check)
    if missing:
        raise ValueError(f"unified document missing sections: {missing}")

    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("unified document 'data' must be an object")
    missing_regions = find_missing_keys(data, UNIFIED_REQUIRED_REGION_PAYLOADS)
    if missing_regions:
        raise ValueError(f"unified document missing region payloads: {missing_regions}")
