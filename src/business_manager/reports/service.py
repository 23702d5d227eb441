from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from ..common.datetime_utils import end_of_day_exclusive, now_local, start_of_day, today_local
from ..core.enums import IncomeType, ReportType
from ..customers.repository import CustomerRepository
from ..customers.rules import is_expired, is_expiring_soon
from ..employees.repository import EmployeeRepository
from ..ledger.model import DateRange
from ..ledger.repository import ExpenseRepository, IncomeRepository
from .exporters import ExcelReportExporter, ReportExporter
from .model import ReportData, ReportDescriptor, ReportRequest, ReportSection

logger = logging.getLogger(__name__)

INCOME_TYPE_LABELS = {"prints": "طباعة", "subscription": "اشتراك"}
SUBSCRIPTION_LABELS = {"annual": "سنوي", "semi-annual": "نصف سنوي", "quarterly": "ربع سنوي"}

_SECTIONS_BY_TYPE = {
    ReportType.FINANCIAL: ("income", "expenses"),
    ReportType.CUSTOMERS: ("customers",),
    ReportType.EMPLOYEES: ("employees",),
    ReportType.PRINTS: ("prints",),
    ReportType.COMPREHENSIVE: ("income", "expenses", "customers", "employees", "prints"),
}


def _customer_state(expiry: date, today: date) -> str:
    if is_expired(expiry, today):
        return "منتهي"
    if is_expiring_soon(expiry, today):
        return "ينتهي قريباً"
    return "فعال"


class ReportService:
    def __init__(
        self,
        income: IncomeRepository,
        expenses: ExpenseRepository,
        customers: CustomerRepository,
        employees: EmployeeRepository,
        *,
        output_folder: str | Path,
        exporter: Optional[ReportExporter] = None,
    ):
        self._income = income
        self._expenses = expenses
        self._customers = customers
        self._employees = employees
        self._output_folder = Path(output_folder)
        self._exporter = exporter or ExcelReportExporter()

    @property
    def output_folder(self) -> Path:
        return self._output_folder

    def build(self, request: ReportRequest, *, today: Optional[date] = None) -> ReportData:
        today = today or today_local()
        window = DateRange(start=start_of_day(request.start), end=end_of_day_exclusive(request.end))

        income = self._income.list_in_range(window)
        expenses = self._expenses.list_in_range(window)
        prints = [e for e in income if e.type == IncomeType.PRINTS]
        employees = self._employees.list_active()

        total_income = sum((e.amount for e in income), Decimal("0"))
        total_expenses = sum((e.amount for e in expenses), Decimal("0"))
        print_income = sum((e.amount for e in prints), Decimal("0"))
        total_salaries = sum((e.salary for e in employees), Decimal("0"))

        builders = {
            "income": lambda: ReportSection(
                key="income",
                title="الدخل",
                columns=["التاريخ", "النوع", "نوع الطباعة", "المبلغ", "العميل", "الوصف"],
                rows=[
                    [
                        e.created_at.strftime("%Y-%m-%d"),
                        INCOME_TYPE_LABELS.get(e.type.value, e.type.value),
                        e.print_type or "",
                        e.amount,
                        e.customer_id or "",
                        e.description or "",
                    ]
                    for e in income
                ],
            ),
            "expenses": lambda: ReportSection(
                key="expenses",
                title="المصروفات",
                columns=["التاريخ", "المبلغ", "السبب", "الوصف"],
                rows=[
                    [e.created_at.strftime("%Y-%m-%d"), e.amount, e.reason, e.description or ""]
                    for e in expenses
                ],
            ),
            "customers": lambda: ReportSection(
                key="customers",
                title="العملاء",
                columns=["الاسم", "نوع الاشتراك", "تاريخ الانضمام", "تاريخ الانتهاء", "الحالة"],
                rows=[
                    [
                        c.name,
                        SUBSCRIPTION_LABELS.get(c.subscription_type.value, c.subscription_type.value),
                        c.join_date.isoformat(),
                        c.expiry_date.isoformat(),
                        _customer_state(c.expiry_date, today) if c.is_active else "غير فعال",
                    ]
                    for c in self._customers.list_all()
                ],
            ),
            "employees": lambda: ReportSection(
                key="employees",
                title="الموظفون",
                columns=["الاسم", "المنصب", "الراتب"],
                rows=[[e.name, e.position or "", e.salary] for e in employees],
            ),
            "prints": lambda: ReportSection(
                key="prints",
                title="الطباعة",
                columns=["التاريخ", "نوع الطباعة", "المبلغ"],
                rows=[[e.created_at.strftime("%Y-%m-%d"), e.print_type, e.amount] for e in prints],
            ),
        }
        sections: List[ReportSection] = [builders[key]() for key in _SECTIONS_BY_TYPE[request.report_type]]

        summary = ReportSection(
            key="summary",
            title="الملخص",
            columns=["البند", "القيمة"],
            rows=[
                ["الفترة", request.period],
                ["إجمالي الدخل", total_income],
                ["إجمالي المصروفات", total_expenses],
                ["صافي الربح", total_income - total_expenses],
                ["دخل الطباعة", print_income],
                ["إجمالي الرواتب", total_salaries],
            ],
        )

        return ReportData(request=request, generated_at=now_local(), sections=sections, summary=summary)

    def generate(self, request: ReportRequest, *, today: Optional[date] = None) -> ReportDescriptor:
        data = self.build(request, today=today)
        filename = self._exporter.export(data, self._output_folder)
        logger.info("report %s generated for %s", filename, request.period)
        return ReportDescriptor(
            message="تم إنشاء التقرير بنجاح",
            download_url=f"/api/reports/download/{filename}",
            period=request.period,
            report_type=request.report_type,
            generated_at=data.generated_at,
        )
