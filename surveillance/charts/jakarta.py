"""Chart transformers for the Jakarta payload (year -> district -> disease triples)."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schema import DiseaseCount
from .common import lookup_name, percent_change, sorted_years

DEFAULT_DISEASE = "difteri"
DEFAULT_DISTRIBUTION_DISEASES: tuple[str, ...] = ("difteri", "pertusis")


def _jakarta_years(document: Mapping[str, Any]) -> Mapping[str, Any]:
    return document["data"]["jakarta"]


def _district_catalog(document: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    return document["regions"]["jakarta"].get("districts") or []


def get_jakarta_district_data(document: Mapping[str, Any], year: str, disease: str) -> list[dict[str, Any]]:
    """Per-district counts of one disease for one year, in the year's district order."""
    year_data = _jakarta_years(document).get(str(year))
    if not year_data:
        return []

    catalog = _district_catalog(document)
    rows: list[dict[str, Any]] = []
    for district in year_data["cases"]:
        district_id = district["district"]
        counts = DiseaseCount.from_mapping((district.get("diseases") or {}).get(disease))
        rows.append(
            {
                "name": lookup_name(catalog, district_id),
                "id": district_id,
                **counts.to_dict(),
            }
        )
    return rows


def get_jakarta_year_comparison(document: Mapping[str, Any], disease: str) -> list[dict[str, Any]]:
    """Region-wide totals of one disease for every year, ascending by year."""
    jakarta = _jakarta_years(document)
    rows: list[dict[str, Any]] = []
    for year in sorted_years(jakarta.keys()):
        year_data = jakarta[year]
        counts = DiseaseCount.from_mapping(year_data["summary"].get(disease))
        rows.append(
            {
                "year": year,
                "total": counts.total,
                "laki": counts.laki,
                "perempuan": counts.perempuan,
                "isEstimated": bool(year_data.get("isEstimated", False)),
            }
        )
    return rows


def get_jakarta_diseases(document: Mapping[str, Any], year: str) -> list[str]:
    """Disease ids reported in a year's summary."""
    year_data = _jakarta_years(document).get(str(year))
    if not year_data:
        return []
    return list(year_data.get("summary", {}).keys())


def get_jakarta_year_change(
    document: Mapping[str, Any],
    year: str,
    disease: str = DEFAULT_DISEASE,
) -> dict[str, Any]:
    """Compare a year's summary total against the previous calendar year."""
    jakarta = _jakarta_years(document)
    year = str(year)
    prior_year = str(int(year) - 1)
    if prior_year not in jakarta:
        prior_year = None

    current_summary = (jakarta.get(year) or {}).get("summary") or {}
    prior_summary = (jakarta.get(prior_year) or {}).get("summary") or {}

    total = DiseaseCount.from_mapping(current_summary.get(disease)).total
    prior_total = DiseaseCount.from_mapping(prior_summary.get(disease)).total
    change, change_percent = percent_change(prior_total, total)
    return {
        "year": year,
        "priorYear": prior_year,
        "disease": disease,
        "total": total,
        "priorTotal": prior_total,
        "change": change,
        "changePercent": change_percent,
    }


def get_jakarta_disease_distribution(
    document: Mapping[str, Any],
    year: str,
    diseases: Optional[Sequence[str]] = None,
) -> list[dict[str, Any]]:
    """Pie-chart slices of summary totals per disease for one year."""
    year_data = _jakarta_years(document).get(str(year))
    if not year_data:
        return []

    summary = year_data.get("summary") or {}
    catalog = document.get("diseases") or []
    return [
        {
            "id": disease,
            "name": lookup_name(catalog, disease),
            "value": DiseaseCount.from_mapping(summary.get(disease)).total,
        }
        for disease in (diseases or DEFAULT_DISTRIBUTION_DISEASES)
    ]


def get_jakarta_district_breakdown(document: Mapping[str, Any], year: str) -> list[dict[str, Any]]:
    """Table rows listing every reported disease per district for one year."""
    year_data = _jakarta_years(document).get(str(year))
    if not year_data:
        return []

    catalog = _district_catalog(document)
    return [
        {
            "id": district["district"],
            "name": lookup_name(catalog, district["district"]),
            "diseases": {
                disease: DiseaseCount.from_mapping(counts).to_dict()
                for disease, counts in (district.get("diseases") or {}).items()
            },
        }
        for district in year_data["cases"]
    ]
