from __future__ import annotations

from typing import Any

from surveillance import charts

from ..extensions import get_document_cache

OVERVIEW_YEAR = "2023"
DEFAULT_JAKARTA_YEAR = "2023"
DEFAULT_JAKARTA_DISEASE = "difteri"


def load_document() -> dict[str, Any]:
    """Return the cached unified document, fetching it on first use."""
    return get_document_cache().get()


def get_metadata() -> dict[str, Any]:
    document = load_document()
    return {
        "metadata": document["metadata"],
        "regions": document["regions"],
        "diseases": document["diseases"],
    }


def get_overview() -> dict[str, Any]:
    """Cards and chart series for the overview page."""
    document = load_document()
    jatim_summary = document["data"]["jatim"].get("summary") or {}
    return {
        "lastUpdated": document["metadata"].get("lastUpdated"),
        "stats": charts.get_summary_stats(document),
        "jatim": {
            "totalAllYears": jatim_summary.get("totalAllYears", 0),
            "mainDiseases": (jatim_summary.get("mainDiseases") or [])[:2],
            "trend": charts.get_jatim_yearly_trend(document, diseases=("dengue", "diare-akut")),
        },
        "jakartaDistricts": charts.get_jakarta_district_data(document, OVERVIEW_YEAR, DEFAULT_JAKARTA_DISEASE),
        "cirebonTrend": charts.get_cirebon_yearly_trend(document),
        "diseaseDistribution": charts.get_jakarta_disease_distribution(document, OVERVIEW_YEAR),
    }


def get_summary() -> dict[str, Any]:
    return charts.get_summary_stats(load_document())


def get_jakarta_view(year: str | None = None, disease: str | None = None) -> dict[str, Any]:
    """Jakarta detail page: per-district chart, yearly comparison and change card."""
    document = load_document()
    year = year or DEFAULT_JAKARTA_YEAR
    disease = disease or DEFAULT_JAKARTA_DISEASE
    return {
        "years": sorted(document["data"]["jakarta"].keys(), key=int),
        "year": year,
        "disease": disease,
        "diseases": charts.get_jakarta_diseases(document, year),
        "change": charts.get_jakarta_year_change(document, year, disease),
        "districts": charts.get_jakarta_district_data(document, year, disease),
        "comparison": charts.get_jakarta_year_comparison(document, disease),
    }


def get_jakarta_districts(year: str | None = None) -> list[dict[str, Any]]:
    return charts.get_jakarta_district_breakdown(load_document(), year or DEFAULT_JAKARTA_YEAR)


def get_jakarta_comparison(disease: str | None = None) -> list[dict[str, Any]]:
    return charts.get_jakarta_year_comparison(load_document(), disease or DEFAULT_JAKARTA_DISEASE)


def get_cirebon_view() -> dict[str, Any]:
    document = load_document()
    return {
        "summary": charts.get_regional_summary(document, "cirebon"),
        "trend": charts.get_cirebon_yearly_trend(document),
        "subdistricts": charts.get_cirebon_by_subdistrict(document),
    }


def get_bogor_view() -> dict[str, Any]:
    document = load_document()
    return {
        "summary": charts.get_regional_summary(document, "bogor"),
        "trend": charts.get_bogor_yearly_trend(document),
        "subdistricts": charts.get_bogor_by_subdistrict(document),
    }


def get_jatim_view() -> dict[str, Any]:
    document = load_document()
    jatim = document["data"]["jatim"]
    return {
        "description": jatim.get("description", ""),
        "source": jatim.get("source", ""),
        "summary": jatim.get("summary") or {},
        "trend": charts.get_jatim_yearly_trend(document),
        "comparison": charts.get_jatim_disease_comparison(document),
        "diseaseTotals": charts.get_jatim_disease_totals(document),
        "insights": [insight.to_dict() for insight in charts.get_jatim_insights(document)],
    }
