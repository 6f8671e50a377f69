"""Readers and aggregations for the row-oriented datasets predating the unified document."""

from .aggregate import (
    aggregate_by_month,
    aggregate_by_region,
    aggregate_by_year,
    compute_year_over_year,
    unique_values,
)
from .records import (
    decode_bogor_rows,
    decode_cirebon_rows,
    decode_jakarta_rows,
    decode_jatim_rows,
    parse_count,
)

__all__ = [
    "aggregate_by_month",
    "aggregate_by_region",
    "aggregate_by_year",
    "compute_year_over_year",
    "decode_bogor_rows",
    "decode_cirebon_rows",
    "decode_jakarta_rows",
    "decode_jatim_rows",
    "parse_count",
    "unique_values",
]
