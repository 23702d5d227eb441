from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, mapped to a permission set in core.permissions."""

    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


class SubscriptionType(str, Enum):
    """Subscription cadence, decides the initial expiry offset."""

    ANNUAL = "annual"
    SEMI_ANNUAL = "semi-annual"
    QUARTERLY = "quarterly"


class IncomeType(str, Enum):
    PRINTS = "prints"
    SUBSCRIPTION = "subscription"


class ActivityType(str, Enum):
    """Mutating domain events recorded in the activity feed."""

    CUSTOMER_ADDED = "customer_added"
    SUBSCRIPTION_RENEWED = "subscription_renewed"
    INCOME_ADDED = "income_added"
    EXPENSE_ADDED = "expense_added"
    EMPLOYEE_ADDED = "employee_added"
    EMPLOYEE_REMOVED = "employee_removed"
    USER_CREATED = "user_created"


class FinancialStatus(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class ReportType(str, Enum):
    FINANCIAL = "financial"
    CUSTOMERS = "customers"
    EMPLOYEES = "employees"
    PRINTS = "prints"
    COMPREHENSIVE = "comprehensive"
