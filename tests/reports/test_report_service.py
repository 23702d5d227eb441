from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pandas as pd
import pytest

from business_manager.core.enums import IncomeType, ReportType, SubscriptionType
from business_manager.core.exceptions import ValidationError
from business_manager.reports.forms import parse_report_request
from business_manager.reports.model import ReportRequest


@pytest.fixture
def seeded(repos):
    for when, income_type, print_type, amount in [
        (datetime(2024, 12, 31, 10), IncomeType.SUBSCRIPTION, None, "999"),
        (datetime(2025, 1, 5, 10), IncomeType.SUBSCRIPTION, None, "300"),
        (datetime(2025, 1, 31, 18), IncomeType.PRINTS, "flyers", "120.50"),
    ]:
        repos.income.now = when
        repos.income.create(
            type=income_type,
            amount=Decimal(amount),
            print_type=print_type,
            customer_id=None,
            receipt_url=None,
            description=None,
        )
    repos.expenses.now = datetime(2025, 1, 20, 9)
    repos.expenses.create(amount=Decimal("20.50"), reason="paper", description=None)
    repos.employees.create(name="a", position="designer", salary=Decimal("400"))
    repos.customers.create(
        name="c",
        menu_url=None,
        join_date=date(2024, 1, 1),
        subscription_type=SubscriptionType.ANNUAL,
        expiry_date=date(2025, 1, 1),
    )
    return repos


def _request(report_type: ReportType) -> ReportRequest:
    return ReportRequest(start=date(2025, 1, 1), end=date(2025, 1, 31), report_type=report_type)


def test_financial_report_sections_and_summary(container, seeded):
    data = container.report_service.build(_request(ReportType.FINANCIAL), today=date(2025, 1, 15))

    assert [s.key for s in data.sections] == ["income", "expenses"]
    assert len(data.sections[0].rows) == 2
    summary = dict((row[0], row[1]) for row in data.summary.rows)
    assert summary["إجمالي الدخل"] == Decimal("420.50")
    assert summary["إجمالي المصروفات"] == Decimal("20.50")
    assert summary["صافي الربح"] == Decimal("400.00")
    assert summary["دخل الطباعة"] == Decimal("120.50")
    assert summary["إجمالي الرواتب"] == Decimal("400")


def test_comprehensive_report_has_every_section(container, seeded):
    data = container.report_service.build(_request(ReportType.COMPREHENSIVE), today=date(2025, 1, 15))

    assert [s.key for s in data.sections] == ["income", "expenses", "customers", "employees", "prints"]
    customers = data.sections[2]
    assert customers.rows[0][-1] == "منتهي"


def test_generate_writes_excel_workbook(container, seeded, tmp_path):
    descriptor = container.report_service.generate(_request(ReportType.PRINTS), today=date(2025, 1, 15))

    filename = descriptor.download_url.rsplit("/", 1)[-1]
    path = tmp_path / "reports" / filename
    assert path.exists()
    assert descriptor.period == "2025-01-01 إلى 2025-01-31"

    sheets = pd.read_excel(path, sheet_name=None, engine="openpyxl")
    assert list(sheets) == ["الملخص", "الطباعة"]
    prints = sheets["الطباعة"]
    assert list(prints["نوع الطباعة"]) == ["flyers"]
    assert float(prints["المبلغ"].iloc[0]) == pytest.approx(120.5)


def test_parse_report_request():
    req = parse_report_request({"startDate": "2025-01-01", "endDate": "2025-01-31", "reportType": "customers"})
    assert req.report_type is ReportType.CUSTOMERS

    with pytest.raises(ValidationError):
        parse_report_request({"startDate": "2025-02-01", "endDate": "2025-01-31", "reportType": "customers"})
    with pytest.raises(ValidationError):
        parse_report_request({"startDate": "2025-01-01", "endDate": "2025-01-31", "reportType": "pdf"})
