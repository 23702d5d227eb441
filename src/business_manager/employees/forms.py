from __future__ import annotations

from typing import Any

from ..common.validators import optional_text, require_amount, require_mapping, require_non_empty
from .model import NewEmployee


def parse_new_employee(payload: Any) -> NewEmployee:
    data = require_mapping(payload)
    return NewEmployee(
        name=require_non_empty(data.get("name"), "اسم الموظف"),
        position=optional_text(data.get("position")),
        salary=require_amount(data.get("salary"), "الراتب"),
    )
