from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from business_manager.common.datetime_utils import add_months, end_of_day_exclusive
from business_manager.common.validators import (
    optional_int,
    optional_text,
    require_amount,
    require_date,
    require_mapping,
    require_non_empty,
    require_range_end,
)
from business_manager.core.exceptions import ValidationError


def test_require_amount_keeps_decimal_precision():
    assert require_amount(0.1, "x") == Decimal("0.10")
    assert require_amount("19.999", "x") == Decimal("20.00")
    assert require_amount(0, "x") == Decimal("0.00")


def test_require_non_empty_strips():
    assert require_non_empty("  a ", "x") == "a"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "x")
    with pytest.raises(ValidationError):
        require_non_empty(5, "x")


def test_optional_text_and_int():
    assert optional_text("  ") is None
    assert optional_int("", "x") is None
    assert optional_int("7", "x") == 7
    with pytest.raises(ValidationError):
        optional_int("seven", "x")


def test_require_date():
    assert require_date("2024-02-29", "x") == date(2024, 2, 29)
    with pytest.raises(ValidationError):
        require_date("2023-02-29", "x")


def test_require_mapping():
    with pytest.raises(ValidationError):
        require_mapping("text")


def test_add_months_clamps():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)
    assert add_months(date(2024, 5, 15), 12) == date(2025, 5, 15)


def test_end_of_day_exclusive():
    assert end_of_day_exclusive(date(2024, 12, 31)).date() == date(2025, 1, 1)


def test_require_range_end_rejects_last_representable_date():
    assert require_range_end(date(9999, 12, 30), "x") == date(9999, 12, 30)
    with pytest.raises(ValidationError):
        require_range_end(date.max, "x")
