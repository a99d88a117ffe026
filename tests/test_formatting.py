"""
Tests for ma_dashboard/ui/components/formatting.py and the KPI card builder.
"""
import pytest

from ma_dashboard.data.aggregation import KpiSummary
from ma_dashboard.ui.components.formatting import (
    PLACEHOLDER,
    format_delta,
    format_number,
    format_percent,
)
from ma_dashboard.ui.components.kpi import enrollment_kpi_cards


class TestFormatNumber:
    def test_grouping(self):
        assert format_number(1234567) == "1,234,567"

    def test_float_integral(self):
        assert format_number(1900.0) == "1,900"

    def test_fraction_trimmed(self):
        assert format_number(1234.5) == "1,234.5"

    def test_fraction_rounded_to_three_digits(self):
        assert format_number(0.12345) == "0.123"

    def test_negative(self):
        assert format_number(-2500) == "-2,500"

    def test_none(self):
        assert format_number(None) == PLACEHOLDER == "—"

    def test_non_numeric(self):
        assert format_number("abc") == PLACEHOLDER  # type: ignore[arg-type]


class TestFormatPercent:
    def test_one_decimal(self):
        assert format_percent(12.345) == "12.3%"

    def test_none(self):
        assert format_percent(None) == PLACEHOLDER


class TestFormatDelta:
    def test_increase(self):
        assert format_delta(120, 100) == "20 (20.0%)"

    def test_decrease(self):
        assert format_delta(90, 120) == "-30 (-25.0%)"

    def test_zero_baseline_omits_percentage(self):
        assert format_delta(50, 0) == "50"

    @pytest.mark.parametrize("current, baseline", [(None, 100), (100, None), (None, None)])
    def test_missing_side(self, current, baseline):
        assert format_delta(current, baseline) == PLACEHOLDER

    def test_large_values(self):
        assert format_delta(1_900, 1_580) == "320 (20.3%)"


class TestEnrollmentKpiCards:
    def test_labels_and_values(self):
        cards = enrollment_kpi_cards(KpiSummary(current=1900.0, prior=1580.0, year_ago=None))
        assert [card.label for card in cards] == ["Current Enrollment", "MoM Change", "YoY Change"]
        assert cards[0].value == 1900.0
        assert cards[1].value_display == "320 (20.3%)"
        assert cards[2].value_display == PLACEHOLDER

    def test_no_data(self):
        cards = enrollment_kpi_cards(KpiSummary(None, None, None))
        assert cards[0].value is None
        assert cards[1].value_display == PLACEHOLDER
