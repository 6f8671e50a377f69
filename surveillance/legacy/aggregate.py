"""Aggregations over decoded legacy records (pre-unified schema)."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Sequence

import pandas as pd

from ..charts.common import percent_change
from .records import AnimalOutbreakRecord, JakartaCaseRecord, JatimCaseRecord, parse_count

REGION_PREFIXES: tuple[str, ...] = ("KOTA ADM. ", "KAB. ADM. ")
DIPHTHERIA = "difteri"


def _clean_region_name(name: str) -> str:
    for prefix in REGION_PREFIXES:
        name = name.replace(prefix, "", 1)
    return name


def _to_frame(records: Sequence[Any]) -> pd.DataFrame:
    return pd.DataFrame([asdict(record) for record in records])


def aggregate_by_region(records: Sequence[JakartaCaseRecord], disease_type: str) -> list[dict[str, Any]]:
    """
    Sum Jakarta cases per region split by sex.

    Rows are kept when their case type contains ``disease_type`` (case-insensitive);
    the 2022 diphtheria file has no case type, so exactly ``difteri`` keeps every row.
    """
    needle = disease_type.lower()
    matched = [
        record
        for record in records
        if disease_type == DIPHTHERIA or (record.case_type and needle in record.case_type.lower())
    ]
    if not matched:
        return []

    df = _to_frame(matched)
    df["laki"] = df["count"].where([record.is_male for record in matched], 0)
    df["perempuan"] = df["count"] - df["laki"]
    df["name"] = df["region"].map(_clean_region_name)

    grouped = df.groupby("name", sort=True)[["laki", "perempuan"]].sum().reset_index()
    grouped["total"] = grouped["laki"] + grouped["perempuan"]
    return [
        {
            "name": row["name"],
            "laki": int(row["laki"]),
            "perempuan": int(row["perempuan"]),
            "total": int(row["total"]),
        }
        for row in grouped.to_dict(orient="records")
    ]


def aggregate_by_year(records: Sequence[AnimalOutbreakRecord]) -> list[dict[str, Any]]:
    """Sum outbreak counts per year, ascending by year."""
    if not records:
        return []

    totals = _to_frame(records).groupby("year", sort=False)["count"].sum()
    return [
        {"year": year, "total": int(totals[year])}
        for year in sorted(totals.index, key=parse_count)
    ]


def aggregate_by_month(records: Sequence[JatimCaseRecord], disease_name: str) -> list[dict[str, Any]]:
    """Sum East Java counts per update period for diseases matching ``disease_name``."""
    needle = disease_name.lower()
    matched = [record for record in records if needle in record.disease.lower()]
    if not matched:
        return []

    totals = _to_frame(matched).groupby("period_update", sort=True)["count"].sum()
    return [{"month": month, "total": int(total)} for month, total in totals.items()]


def unique_values(records: Sequence[Any], field: str = "disease") -> list[str]:
    """Sorted distinct values of one record attribute."""
    return sorted({getattr(record, field) for record in records})


def compute_year_over_year(
    prior: Sequence[JakartaCaseRecord],
    current: Sequence[JakartaCaseRecord],
) -> dict[str, Any]:
    """Diphtheria totals of two legacy Jakarta years and their change."""
    total_prior = sum(record.diphtheria_count for record in prior)
    total_current = sum(record.reported_count for record in current)
    change, change_percent = percent_change(total_prior, total_current)
    return {
        "totalPrior": total_prior,
        "totalCurrent": total_current,
        "change": change,
        "changePercent": change_percent,
    }
