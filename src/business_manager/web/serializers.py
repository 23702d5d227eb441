"""Domain objects -> JSON-ready dicts.

Keys are camelCase, money is a decimal string, dates are ISO-8601.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..activities.model import Activity
from ..core.constants import MONEY_PLACES
from ..core.permissions import Permission
from ..customers.model import Customer
from ..customers.rules import is_expired, is_expiring_soon
from ..dashboard.rules import DashboardStats
from ..employees.model import Employee
from ..ledger.model import ExpenseEntry, IncomeEntry
from ..reports.model import ReportDescriptor
from ..users.model import User


def money(value: Optional[Decimal]) -> Optional[str]:
    if value is None:
        return None
    return str(Decimal(value).quantize(MONEY_PLACES))


def iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def customer_to_json(customer: Customer, today: date) -> dict:
    return {
        "id": customer.customer_id,
        "name": customer.name,
        "menuUrl": customer.menu_url,
        "joinDate": iso(customer.join_date),
        "subscriptionType": customer.subscription_type.value,
        "expiryDate": iso(customer.expiry_date),
        "isActive": customer.is_active,
        "isExpired": is_expired(customer.expiry_date, today),
        "isExpiringSoon": is_expiring_soon(customer.expiry_date, today),
        "createdAt": iso(customer.created_at),
        "updatedAt": iso(customer.updated_at),
    }


def income_to_json(entry: IncomeEntry) -> dict:
    return {
        "id": entry.income_id,
        "type": entry.type.value,
        "printType": entry.print_type,
        "amount": money(entry.amount),
        "customerId": entry.customer_id,
        "receiptUrl": entry.receipt_url,
        "description": entry.description,
        "createdAt": iso(entry.created_at),
    }


def expense_to_json(entry: ExpenseEntry) -> dict:
    return {
        "id": entry.expense_id,
        "amount": money(entry.amount),
        "reason": entry.reason,
        "description": entry.description,
        "createdAt": iso(entry.created_at),
    }


def employee_to_json(employee: Employee) -> dict:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "position": employee.position,
        "salary": money(employee.salary),
        "isActive": employee.is_active,
        "createdAt": iso(employee.created_at),
        "updatedAt": iso(employee.updated_at),
    }


def activity_to_json(activity: Activity) -> dict:
    return {
        "id": activity.activity_id,
        "type": activity.type.value,
        "description": activity.description,
        "relatedId": activity.related_id,
        "createdAt": iso(activity.created_at),
    }


def user_to_json(user: User, *, permissions: Optional[Iterable[Permission]] = None) -> dict:
    # Never include password_hash.
    out = {
        "id": user.user_id,
        "username": user.username,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "profileImageUrl": user.profile_image_url,
        "role": user.role.value,
        "isManualUser": user.is_manual_user,
        "createdAt": iso(user.created_at),
        "updatedAt": iso(user.updated_at),
    }
    if permissions is not None:
        out["permissions"] = sorted(p.value for p in permissions)
    return out


def stats_to_json(stats: DashboardStats) -> dict:
    return {
        "totalCustomers": stats.total_customers,
        "monthlyIncome": money(stats.monthly_income),
        "expiredSubscriptions": stats.expired_subscriptions,
        "currentInventory": money(stats.current_inventory),
        "totalSalaries": money(stats.total_salaries),
        "financialStatus": stats.financial_status.value,
    }


def report_descriptor_to_json(descriptor: ReportDescriptor) -> dict:
    return {
        "message": descriptor.message,
        "downloadUrl": descriptor.download_url,
        "data": {
            "period": descriptor.period,
            "type": descriptor.report_type.value,
            "generatedAt": iso(descriptor.generated_at),
        },
    }
