import pytest

from surveillance.charts import get_summary_stats, percent_change
from surveillance.charts.common import format_percent


class TestPercentChange:

    def test_increase(self):
        assert percent_change(15, 22) == (7, "46.7")

    def test_zero_prior_reports_literal_zero(self):
        change, percent = percent_change(0, 5)

        assert change == 5
        assert percent == "0"

    def test_no_change(self):
        assert percent_change(10, 10) == (0, "0.0")

    @pytest.mark.parametrize(
        "value, expected",
        [(0.25, "0.3"), (-0.25, "-0.3"), (12.0, "12.0"), (46.666, "46.7"), (-0.04, "-0.0")],
    )
    def test_format_rounds_halves_away_from_zero(self, value, expected):
        assert format_percent(value) == expected


class TestSummaryStats:

    def test_headline_figures(self, document):
        stats = get_summary_stats(document)

        assert stats["jakartaDifteri2023"] == 22
        assert stats["jakartaDifteri2022"] == 15
        assert stats["difteriChange"] == 7
        assert stats["difteriChangePercent"] == "46.7"
        assert stats["cirebonTotal"] == 11
        assert stats["cirebonPeak"] == 5
        assert stats["cirebonPeakYear"] == 2020
        assert stats["bogorTotal"] == 8
        assert stats["hotspots"][0]["region"] == "Jakarta Utara"
        assert len(stats["recommendations"]) == 2

    def test_missing_prior_year(self, document):
        del document["data"]["jakarta"]["2022"]
        document["data"]["jakarta"]["2023"]["summary"]["difteri"] = {"laki": 3, "perempuan": 2, "total": 5}

        stats = get_summary_stats(document)

        assert stats["jakartaDifteri2022"] == 0
        assert stats["difteriChange"] == 5
        assert stats["difteriChangePercent"] == "0"

    def test_minimal_end_to_end_document(self, document):
        document["data"]["jakarta"] = {
            "2022": {"cases": [], "summary": {"difteri": {"laki": 10, "perempuan": 5, "total": 15}}},
            "2023": {"cases": [], "summary": {"difteri": {"laki": 14, "perempuan": 8, "total": 22}}},
        }

        stats = get_summary_stats(document)

        assert stats["difteriChange"] == 7
        assert stats["difteriChangePercent"] == "46.7"
