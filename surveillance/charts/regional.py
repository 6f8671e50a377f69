"""Chart transformers for the West Java (Cirebon, Bogor) and East Java payloads."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.schema import JatimInsight
from .common import as_count, lookup_name, sorted_years, year_key

JATIM_COMPARISON_DISEASES: tuple[str, ...] = ("diare-akut", "dengue", "pneumonia", "tifoid")
JATIM_TREND_DISEASES: tuple[str, ...] = ("dengue", "diare-akut", "campak", "pneumonia")
JATIM_TOTALS_LIMIT = 8
JATIM_NAME_NOISE: tuple[str, ...] = ("Suspek ", " / DBD")

ANIMAL_OUTBREAK_REGIONS: tuple[str, ...] = ("cirebon", "bogor")


def _outbreak_payload(document: Mapping[str, Any], region: str) -> Mapping[str, Any]:
    if region not in ANIMAL_OUTBREAK_REGIONS:
        raise KeyError(f"Unknown animal outbreak region: {region}")
    return document["data"][region]


def _yearly_trend(yearly_data: Mapping[str, Mapping[str, Any]], with_estimate: bool) -> list[dict[str, Any]]:
    rows = []
    for year, year_data in yearly_data.items():
        row: dict[str, Any] = {"year": year, "total": as_count(year_data.get("total"))}
        if with_estimate:
            row["isEstimated"] = bool(year_data.get("isEstimated", False))
        rows.append(row)
    return sorted(rows, key=lambda row: year_key(row["year"]))


def _subdistrict_totals(payload: Mapping[str, Any]) -> list[dict[str, Any]]:
    yearly_data = payload["yearlyData"]
    rows = []
    for sub in payload["subdistricts"]:
        total = sum(as_count(year_data.get(sub["id"])) for year_data in yearly_data.values())
        rows.append({"name": sub["name"], "id": sub["id"], "total": total})
    return rows


def get_cirebon_yearly_trend(document: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Yearly outbreak totals for Cirebon, ascending by year."""
    return _yearly_trend(_outbreak_payload(document, "cirebon")["yearlyData"], with_estimate=False)


def get_bogor_yearly_trend(document: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Yearly outbreak totals for Bogor with the per-year estimated flag."""
    return _yearly_trend(_outbreak_payload(document, "bogor")["yearlyData"], with_estimate=True)


def get_cirebon_by_subdistrict(document: Mapping[str, Any]) -> list[dict[str, Any]]:
    """All-year totals per Cirebon subdistrict, largest first. Zero totals are kept."""
    rows = _subdistrict_totals(_outbreak_payload(document, "cirebon"))
    return sorted(rows, key=lambda row: row["total"], reverse=True)


def get_bogor_by_subdistrict(document: Mapping[str, Any]) -> list[dict[str, Any]]:
    """All-year totals per Bogor subdistrict, largest first. Zero totals are dropped."""
    rows = [row for row in _subdistrict_totals(_outbreak_payload(document, "bogor")) if row["total"] > 0]
    return sorted(rows, key=lambda row: row["total"], reverse=True)


def get_regional_summary(document: Mapping[str, Any], region: str) -> dict[str, Any]:
    """Headline card figures for Cirebon or Bogor."""
    payload = _outbreak_payload(document, region)
    summary = payload["summary"]
    hotspot = summary.get("hotspot")
    return {
        "region": region,
        "description": payload.get("description", ""),
        "diseaseType": payload.get("diseaseType", ""),
        "totalAllYears": summary.get("totalAllYears", 0),
        "peakYear": summary.get("peakYear"),
        "peakCount": summary.get("peakCount", 0),
        "hotspot": hotspot,
        "hotspotName": lookup_name(payload.get("subdistricts"), hotspot) if hotspot else None,
    }


def get_jatim_disease_comparison(
    document: Mapping[str, Any],
    diseases: Sequence[str] = JATIM_COMPARISON_DISEASES,
) -> list[dict[str, Any]]:
    """Per-year totals of the East Java comparison diseases, ascending by year."""
    yearly_data = document["data"]["jatim"]["yearlyData"]
    rows = []
    for year in sorted_years(yearly_data.keys()):
        year_data = yearly_data[year]
        row: dict[str, Any] = {"year": year, "isPartialYear": bool(year_data.get("isPartialYear", False))}
        year_diseases = year_data.get("diseases") or {}
        for disease in diseases:
            row[disease] = as_count((year_diseases.get(disease) or {}).get("total"))
        rows.append(row)
    return rows


def get_jatim_yearly_trend(
    document: Mapping[str, Any],
    diseases: Sequence[str] = JATIM_TREND_DISEASES,
) -> list[dict[str, Any]]:
    """Per-year total cases plus selected disease columns for East Java."""
    yearly_data = document["data"]["jatim"].get("yearlyData") or {}
    rows = []
    for year in sorted_years(yearly_data.keys()):
        year_data = yearly_data[year] or {}
        row: dict[str, Any] = {
            "year": year,
            "total": as_count((year_data.get("summary") or {}).get("totalCases")),
            "isPartialYear": bool(year_data.get("isPartialYear", False)),
        }
        year_diseases = year_data.get("diseases") or {}
        for disease in diseases:
            row[disease] = as_count((year_diseases.get(disease) or {}).get("total"))
        rows.append(row)
    return rows


def _clean_disease_name(name: str) -> str:
    for noise in JATIM_NAME_NOISE:
        name = name.replace(noise, "", 1)
    return name


def get_jatim_disease_totals(document: Mapping[str, Any], limit: int = JATIM_TOTALS_LIMIT) -> list[dict[str, Any]]:
    """All-year totals for the first ``limit`` catalogued East Java diseases, largest first."""
    jatim = document["data"]["jatim"]
    yearly_data = jatim["yearlyData"]
    rows = []
    for disease in jatim["diseaseTypes"][:limit]:
        total = sum(
            as_count(((year_data.get("diseases") or {}).get(disease["id"]) or {}).get("total"))
            for year_data in yearly_data.values()
        )
        if total > 0:
            rows.append({"id": disease["id"], "name": _clean_disease_name(disease["name"]), "total": total})
    return sorted(rows, key=lambda row: row["total"], reverse=True)


def get_jatim_insights(document: Mapping[str, Any]) -> list[JatimInsight]:
    insights = document["data"]["jatim"].get("insights") or {}
    return [JatimInsight.from_mapping(key, payload) for key, payload in insights.items()]
