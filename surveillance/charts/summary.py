from __future__ import annotations

from typing import Any, Mapping

from ..common.schema import DiseaseCount
from .common import percent_change

HEADLINE_CURRENT_YEAR = "2023"
HEADLINE_PRIOR_YEAR = "2022"
HEADLINE_DISEASE = "difteri"


def _jakarta_total(document: Mapping[str, Any], year: str, disease: str) -> int:
    year_data = document["data"]["jakarta"].get(year) or {}
    return DiseaseCount.from_mapping((year_data.get("summary") or {}).get(disease)).total


def get_summary_stats(document: Mapping[str, Any]) -> dict[str, Any]:
    """Headline figures for the overview cards."""
    difteri_current = _jakarta_total(document, HEADLINE_CURRENT_YEAR, HEADLINE_DISEASE)
    difteri_prior = _jakarta_total(document, HEADLINE_PRIOR_YEAR, HEADLINE_DISEASE)
    change, change_percent = percent_change(difteri_prior, difteri_current)

    cirebon = document["data"]["cirebon"]["summary"]
    bogor = document["data"]["bogor"]["summary"]
    analytics = document["analytics"]
    return {
        "jakartaDifteri2023": difteri_current,
        "jakartaDifteri2022": difteri_prior,
        "difteriChange": change,
        "difteriChangePercent": change_percent,
        "cirebonTotal": cirebon["totalAllYears"],
        "cirebonPeak": cirebon["peakCount"],
        "cirebonPeakYear": cirebon["peakYear"],
        "bogorTotal": bogor["totalAllYears"],
        "hotspots": analytics["hotspots"],
        "recommendations": analytics["recommendations"],
    }
