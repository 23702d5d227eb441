from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Mapping, Optional, TypeVar

from ..core.constants import MAX_AMOUNT, MONEY_PLACES
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"حقل {field_name} مطلوب")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} يجب أن يكون {min_len} أحرف على الأقل")
    return value


def optional_text(value: Any) -> Optional[str]:
    """Blank strings are stored as NULL."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"حقل {field_name} يجب أن يكون تاريخاً بصيغة YYYY-MM-DD")


def require_range_end(value: date, field_name: str) -> date:
    """An inclusive end date; its following midnight must still be representable."""
    if value >= date.max:
        raise ValidationError(f"حقل {field_name} خارج النطاق المسموح")
    return value


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_date(value, field_name)


def require_amount(value: Any, field_name: str) -> Decimal:
    """Parse a non-negative money value with two decimal places.

    Floats are converted through `str` so 0.1 stays 0.1.
    """
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"حقل {field_name} مطلوب")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"حقل {field_name} يجب أن يكون رقماً")
    if not amount.is_finite():
        raise ValidationError(f"حقل {field_name} يجب أن يكون رقماً")
    if amount < 0:
        raise ValidationError(f"حقل {field_name} لا يمكن أن يكون سالباً")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"قيمة {field_name} أكبر من الحد المسموح")
    return amount.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def require_choice(value: Any, enum_cls: type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = "، ".join(member.value for member in enum_cls)
        raise ValidationError(f"قيمة {field_name} غير صحيحة (المسموح: {allowed})")


def optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"حقل {field_name} يجب أن يكون رقماً صحيحاً")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"حقل {field_name} يجب أن يكون رقماً صحيحاً")


def require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("بيانات الطلب غير صحيحة")
    return payload
