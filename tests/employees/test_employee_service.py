from __future__ import annotations

from decimal import Decimal

import pytest

from business_manager.core.enums import ActivityType
from business_manager.core.exceptions import NotFoundError, ValidationError
from business_manager.employees.forms import parse_new_employee
from business_manager.employees.model import NewEmployee


def test_create_employee_logs_activity(container, repos):
    employee = container.employee_service.create_employee(
        NewEmployee(name="أحمد", position="مصمم", salary=Decimal("750.00"))
    )

    assert employee.is_active
    logged = repos.activities.of_type(ActivityType.EMPLOYEE_ADDED)
    assert [a.related_id for a in logged] == [employee.employee_id]
    assert logged[0].description == "تم إضافة موظف جديد: أحمد"


def test_remove_employee_is_idempotent(container, repos):
    employee = container.employee_service.create_employee(NewEmployee(name="a", salary=Decimal("1")))

    container.employee_service.remove_employee(employee.employee_id)
    container.employee_service.remove_employee(employee.employee_id)

    assert not repos.employees.get_by_id(employee.employee_id).is_active
    assert len(repos.activities.of_type(ActivityType.EMPLOYEE_REMOVED)) == 1
    assert container.employee_service.list_active() == []


def test_remove_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.employee_service.remove_employee(42)


def test_list_active_newest_first(container):
    first = container.employee_service.create_employee(NewEmployee(name="first", salary=Decimal("1")))
    second = container.employee_service.create_employee(NewEmployee(name="second", salary=Decimal("2")))

    assert [e.employee_id for e in container.employee_service.list_active()] == [
        second.employee_id,
        first.employee_id,
    ]


def test_parse_new_employee():
    data = parse_new_employee({"name": "x", "position": " ", "salary": "1200.5"})
    assert data.salary == Decimal("1200.50")
    assert data.position is None

    with pytest.raises(ValidationError):
        parse_new_employee({"name": "x", "salary": "-1"})
    with pytest.raises(ValidationError):
        parse_new_employee({"salary": "10"})
