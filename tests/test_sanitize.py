"""Tests for raw form coercion."""
import pytest

from parttime_training_duration.models import ErrorCode, Rounding
from parttime_training_duration.sanitize import (
    calculate_from_raw,
    coerce_form_values,
    sanitize_positive_decimal,
    to_number,
)


class TestSanitizePositiveDecimal:

    @pytest.mark.parametrize("raw,text", [
        ("37,5", "37.5"),
        ("40", "40"),
        (40, "40"),
        ("40.", "40."),
        ("12.345", "12.3"),
        ("1.2.3", "1.2"),
        (" 3 8 h", "38"),
    ])
    def test_normalises(self, raw, text):
        sanitized = sanitize_positive_decimal(raw)
        assert sanitized.ok
        assert sanitized.text == text

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_is_fine_while_typing(self, raw):
        sanitized = sanitize_positive_decimal(raw)
        assert sanitized.ok
        assert sanitized.text == ""

    @pytest.mark.parametrize("raw", ["abc", ".5", "-"])
    def test_rejects_non_numbers(self, raw):
        sanitized = sanitize_positive_decimal(raw)
        assert not sanitized.ok
        assert sanitized.text == ""


class TestToNumber:

    def test_german_decimal_comma(self):
        assert to_number("37,5") == 37.5

    @pytest.mark.parametrize("raw", ["", None, "x", float("nan")])
    def test_fallback(self, raw):
        assert to_number(raw) == 0.0
        assert to_number(raw, fallback=5) == 5


class TestCoerceFormValues:

    def test_strings_become_numbers(self):
        form = coerce_form_values({
            "weekly_full": "40",
            "weekly_part": "30",
            "full_duration_months": "36",
            "manual_reduction_months": "2",
        })

        assert form.weekly_full == 40.0
        assert form.weekly_part == 30.0
        assert form.full_duration_months == 36.0
        assert form.manual_reduction_months == 2.0
        assert form.max_total_reduction == 12
        assert form.min_duration_months == 18
        assert form.rounding == Rounding.ROUND

    def test_degree_id_is_resolved_through_catalog(self):
        form = coerce_form_values({"school_degree_id": "mr"})
        assert form.degree_reduction_months == 6
        assert form.school_degree_label_key == "reductionOptions.mr"

    def test_explicit_degree_months_win(self):
        form = coerce_form_values({"school_degree_id": "mr", "degree_reduction_months": "3"})
        assert form.degree_reduction_months == 3.0

    def test_rounding_string(self):
        assert coerce_form_values({"rounding": "floor"}).rounding == Rounding.FLOOR
        assert coerce_form_values({"rounding": "nonsense"}).rounding == Rounding.ROUND


class TestCalculateFromRaw:

    def test_raw_form_with_degree(self):
        result = calculate_from_raw({
            "weekly_full": "40",
            "weekly_part": "30",
            "full_duration_months": "36",
            "school_degree_id": "mr",
        })
        assert result.allowed
        assert result.parttime_final_months == 42

    def test_empty_fulltime_field_is_rejected(self):
        result = calculate_from_raw({
            "weekly_full": "",
            "weekly_part": "30",
            "full_duration_months": "36",
        })
        assert result.error_code == ErrorCode.INVALID_HOURS

    def test_empty_parttime_field_fails_fifty_percent_rule(self):
        result = calculate_from_raw({
            "weekly_full": "40",
            "weekly_part": "",
            "full_duration_months": "36",
        })
        assert result.error_code == ErrorCode.MIN_FACTOR
