from __future__ import annotations

from typing import Any

from ..common.validators import optional_text, require_date, require_mapping, require_non_empty
from ..core.enums import SubscriptionType
from ..core.exceptions import InvalidSubscriptionType, ValidationError
from .model import NewCustomer


def parse_subscription_type(value: Any) -> SubscriptionType:
    if value is None or value == "":
        raise ValidationError("حقل نوع الاشتراك مطلوب")
    try:
        return SubscriptionType(value)
    except ValueError:
        raise InvalidSubscriptionType(f"نوع الاشتراك غير صحيح: {value}")


def parse_new_customer(payload: Any) -> NewCustomer:
    data = require_mapping(payload)
    return NewCustomer(
        name=require_non_empty(data.get("name"), "اسم العميل"),
        menu_url=optional_text(data.get("menuUrl")),
        join_date=require_date(data.get("joinDate"), "تاريخ الانضمام"),
        subscription_type=parse_subscription_type(data.get("subscriptionType")),
    )


def parse_days(value: Any) -> int:
    try:
        days = int(value)
    except (TypeError, ValueError):
        raise ValidationError("عدد الأيام يجب أن يكون رقماً صحيحاً")
    if days < 0:
        raise ValidationError("عدد الأيام لا يمكن أن يكون سالباً")
    return days
