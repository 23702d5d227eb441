from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import end_of_day_exclusive, start_of_day
from ..common.validators import (
    optional_date,
    optional_int,
    optional_text,
    require_amount,
    require_choice,
    require_mapping,
    require_non_empty,
    require_range_end,
)
from ..core.enums import IncomeType
from ..core.exceptions import ValidationError
from .model import DateRange, NewExpenseEntry, NewIncomeEntry


def parse_new_income(payload: Any, *, receipt_url: Optional[str] = None) -> NewIncomeEntry:
    """Build an income entry from JSON or multipart form fields.

    `printType` is required for print income and discarded for anything else.
    """
    data = require_mapping(payload)
    income_type = require_choice(data.get("type"), IncomeType, "نوع الدخل")

    print_type = None
    if income_type == IncomeType.PRINTS:
        print_type = require_non_empty(data.get("printType"), "نوع الطباعة")

    return NewIncomeEntry(
        type=income_type,
        amount=require_amount(data.get("amount"), "المبلغ"),
        print_type=print_type,
        customer_id=optional_int(data.get("customerId"), "العميل"),
        receipt_url=receipt_url,
        description=optional_text(data.get("description")),
    )


def parse_new_expense(payload: Any) -> NewExpenseEntry:
    data = require_mapping(payload)
    return NewExpenseEntry(
        amount=require_amount(data.get("amount"), "المبلغ"),
        reason=require_non_empty(data.get("reason"), "السبب"),
        description=optional_text(data.get("description")),
    )


def parse_date_range(args: Mapping[str, Any]) -> DateRange:
    """`startDate`/`endDate` query params; the end date counts as a whole day."""
    start = optional_date(args.get("startDate"), "تاريخ البداية")
    end = optional_date(args.get("endDate"), "تاريخ النهاية")
    if end:
        require_range_end(end, "تاريخ النهاية")
    if start and end and start > end:
        raise ValidationError("تاريخ البداية يجب أن يكون قبل تاريخ النهاية")
    return DateRange(
        start=start_of_day(start) if start else None,
        end=end_of_day_exclusive(end) if end else None,
    )
