"""Pure transformers turning the unified document into chart-ready records."""

from .common import percent_change
from .jakarta import (
    get_jakarta_disease_distribution,
    get_jakarta_diseases,
    get_jakarta_district_breakdown,
    get_jakarta_district_data,
    get_jakarta_year_change,
    get_jakarta_year_comparison,
)
from .regional import (
    get_bogor_by_subdistrict,
    get_bogor_yearly_trend,
    get_cirebon_by_subdistrict,
    get_cirebon_yearly_trend,
    get_jatim_disease_comparison,
    get_jatim_disease_totals,
    get_jatim_insights,
    get_jatim_yearly_trend,
    get_regional_summary,
)
from .summary import get_summary_stats

__all__ = [
    "get_bogor_by_subdistrict",
    "get_bogor_yearly_trend",
    "get_cirebon_by_subdistrict",
    "get_cirebon_yearly_trend",
    "get_jakarta_disease_distribution",
    "get_jakarta_diseases",
    "get_jakarta_district_breakdown",
    "get_jakarta_district_data",
    "get_jakarta_year_change",
    "get_jakarta_year_comparison",
    "get_jatim_disease_comparison",
    "get_jatim_disease_totals",
    "get_jatim_insights",
    "get_jatim_yearly_trend",
    "get_regional_summary",
    "get_summary_stats",
    "percent_change",
]
