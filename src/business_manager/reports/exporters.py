from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path

import pandas as pd

from .model import ReportData, ReportSection


class ReportExporter(ABC):
    """Exporter interface (Strategy Pattern for report output)."""

    extension: str = ""

    @abstractmethod
    def export(self, data: ReportData, folder: str | Path) -> str:
        """Write the report into `folder` and return the file name."""
        raise NotImplementedError

    def _filename(self, data: ReportData) -> str:
        req = data.request
        return (
            f"report-{req.report_type.value}-{req.start.isoformat()}-{req.end.isoformat()}"
            f"-{uuid.uuid4().hex[:8]}{self.extension}"
        )


def _cell(value):
    # Spreadsheets hold floats; two decimals survive the conversion.
    if isinstance(value, Decimal):
        return float(value)
    return value


def section_frame(section: ReportSection) -> pd.DataFrame:
    rows = [[_cell(v) for v in row] for row in section.rows]
    return pd.DataFrame(rows, columns=list(section.columns))


class ExcelReportExporter(ReportExporter):
    """One worksheet per section, summary first."""

    extension = ".xlsx"

    def export(self, data: ReportData, folder: str | Path) -> str:
        folder = Path(folder)
        folder.mkdir(parents=True, exist_ok=True)
        filename = self._filename(data)

        with pd.ExcelWriter(folder / filename, engine="openpyxl") as writer:
            for section in [data.summary, *data.sections]:
                # Excel caps sheet names at 31 characters.
                section_frame(section).to_excel(writer, index=False, sheet_name=section.title[:31])

        return filename
