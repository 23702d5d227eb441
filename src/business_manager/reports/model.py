from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Sequence

from ..core.enums import ReportType


@dataclass(frozen=True)
class ReportRequest:
    start: date
    end: date
    report_type: ReportType

    @property
    def period(self) -> str:
        return f"{self.start.isoformat()} إلى {self.end.isoformat()}"


@dataclass(frozen=True)
class ReportSection:
    """One table of the report; becomes one worksheet on export."""

    key: str
    title: str
    columns: Sequence[str]
    rows: List[Sequence[Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ReportData:
    request: ReportRequest
    generated_at: datetime
    sections: List[ReportSection]
    summary: ReportSection


@dataclass(frozen=True)
class ReportDescriptor:
    message: str
    download_url: str
    period: str
    report_type: ReportType
    generated_at: datetime
