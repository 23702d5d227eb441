from __future__ import annotations

from typing import Any

from ..common.validators import require_choice, require_date, require_mapping, require_range_end
from ..core.enums import ReportType
from ..core.exceptions import ValidationError
from .model import ReportRequest


def parse_report_request(payload: Any) -> ReportRequest:
    data = require_mapping(payload)
    start = require_date(data.get("startDate"), "تاريخ البداية")
    end = require_range_end(require_date(data.get("endDate"), "تاريخ النهاية"), "تاريخ النهاية")
    if start > end:
        raise ValidationError("تاريخ البداية يجب أن يكون قبل تاريخ النهاية")
    return ReportRequest(
        start=start,
        end=end,
        report_type=require_choice(data.get("reportType"), ReportType, "نوع التقرير"),
    )
