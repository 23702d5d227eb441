from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .activities.mysql_activity_repository import MySQLActivityRepository
from .activities.repository import ActivityRepository
from .activities.service import ActivityLog
from .customers.mysql_customer_repository import MySQLCustomerRepository
from .customers.repository import CustomerRepository
from .customers.service import CustomerService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection, TransactionManager
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .ledger.mysql_ledger_repository import MySQLExpenseRepository, MySQLIncomeRepository
from .ledger.repository import ExpenseRepository, IncomeRepository
from .ledger.service import LedgerService
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    transactions: TransactionManager

    users_repo: UserRepository
    customers_repo: CustomerRepository
    income_repo: IncomeRepository
    expenses_repo: ExpenseRepository
    employees_repo: EmployeeRepository
    activities_repo: ActivityRepository

    activity_log: ActivityLog
    auth_service: AuthService
    user_service: UserService
    customer_service: CustomerService
    ledger_service: LedgerService
    employee_service: EmployeeService
    dashboard_service: DashboardService
    report_service: ReportService


def wire(
    *,
    transactions: TransactionManager,
    users_repo: UserRepository,
    customers_repo: CustomerRepository,
    income_repo: IncomeRepository,
    expenses_repo: ExpenseRepository,
    employees_repo: EmployeeRepository,
    activities_repo: ActivityRepository,
    reports_folder: str | Path,
) -> Container:
    """Build services on top of any set of repositories (MySQL or in-memory)."""
    activity_log = ActivityLog(activities_repo)

    return Container(
        transactions=transactions,
        users_repo=users_repo,
        customers_repo=customers_repo,
        income_repo=income_repo,
        expenses_repo=expenses_repo,
        employees_repo=employees_repo,
        activities_repo=activities_repo,
        activity_log=activity_log,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo, activity_log, transactions),
        customer_service=CustomerService(customers_repo, activity_log, transactions),
        ledger_service=LedgerService(income_repo, expenses_repo, customers_repo, activity_log, transactions),
        employee_service=EmployeeService(employees_repo, activity_log, transactions),
        dashboard_service=DashboardService(customers_repo, income_repo, expenses_repo, employees_repo),
        report_service=ReportService(
            income_repo,
            expenses_repo,
            customers_repo,
            employees_repo,
            output_folder=reports_folder,
        ),
    )


def build_container(*, db_config: dict[str, Any], reports_folder: str | Path) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return wire(
        transactions=conn,
        users_repo=MySQLUserRepository(conn),
        customers_repo=MySQLCustomerRepository(conn),
        income_repo=MySQLIncomeRepository(conn),
        expenses_repo=MySQLExpenseRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        activities_repo=MySQLActivityRepository(conn),
        reports_folder=reports_folder,
    )
