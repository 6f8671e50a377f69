from __future__ import annotations

from typing import Any

from flask import current_app

from surveillance import legacy

from ..extensions import get_data_loader

OUTBREAK_DECODERS = {
    "cirebon": legacy.decode_cirebon_rows,
    "bogor": legacy.decode_bogor_rows,
}


def _jakarta_records(year: str):
    payload = get_data_loader().fetch_legacy_json_by_year(year)
    return legacy.decode_jakarta_rows(payload["data"])


def get_legacy_jakarta_regions(year: str, disease_type: str) -> list[dict[str, Any]]:
    """Per-region totals from the pre-unified Jakarta files."""
    return legacy.aggregate_by_region(_jakarta_records(year), disease_type)


def get_legacy_jakarta_summary(prior_year: str = "2022", current_year: str = "2023") -> dict[str, Any]:
    return legacy.compute_year_over_year(_jakarta_records(prior_year), _jakarta_records(current_year))


def get_legacy_yearly(dataset: str) -> list[dict[str, Any]]:
    """Yearly totals of a Cirebon/Bogor CSV export."""
    decoder = OUTBREAK_DECODERS.get(dataset)
    if decoder is None:
        raise KeyError(dataset)
    rows = get_data_loader().fetch_delimited_text(dataset)
    current_app.logger.debug("Legacy %s rows loaded: %d", dataset, len(rows))
    return legacy.aggregate_by_year(decoder(rows))


def get_legacy_jatim_monthly(disease_name: str) -> list[dict[str, Any]]:
    rows = get_data_loader().fetch_delimited_text("jatim")
    return legacy.aggregate_by_month(legacy.decode_jatim_rows(rows), disease_name)


def get_legacy_jatim_diseases() -> list[str]:
    rows = get_data_loader().fetch_delimited_text("jatim")
    return legacy.unique_values(legacy.decode_jatim_rows(rows), "disease")
