from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..activities.service import ActivityLog
from ..common.datetime_utils import today_local
from ..core.enums import ActivityType
from ..core.exceptions import InternalError, NotFoundError, ValidationError
from ..database.connection import TransactionManager
from .model import Customer, NewCustomer
from .repository import CustomerRepository
from .rules import compute_expiry, renewed_expiry

logger = logging.getLogger(__name__)


class CustomerService:
    """Use cases around customers and their subscriptions."""

    def __init__(self, customers: CustomerRepository, activity_log: ActivityLog, transactions: TransactionManager):
        self._customers = customers
        self._activity_log = activity_log
        self._tx = transactions

    def create_customer(self, data: NewCustomer) -> Customer:
        expiry_date = compute_expiry(data.join_date, data.subscription_type)

        with self._tx.transaction():
            customer_id = self._customers.create(
                name=data.name,
                menu_url=data.menu_url,
                join_date=data.join_date,
                subscription_type=data.subscription_type,
                expiry_date=expiry_date,
            )
            self._activity_log.record(
                ActivityType.CUSTOMER_ADDED,
                f"تم إضافة عميل جديد: {data.name}",
                customer_id,
            )
            customer = self._customers.get_by_id(customer_id)

        if not customer:
            raise InternalError("تعذر قراءة العميل بعد إنشائه")
        logger.info("customer %s created, expires %s", customer_id, expiry_date.isoformat())
        return customer

    def list_customers(self) -> Sequence[Customer]:
        return self._customers.list_all()

    def renew_subscription(self, customer_id: int) -> Customer:
        with self._tx.transaction():
            customer = self._customers.get_by_id(customer_id)
            if not customer:
                raise NotFoundError("العميل غير موجود")

            new_expiry = renewed_expiry(customer.expiry_date)
            self._customers.update_subscription(customer_id, expiry_date=new_expiry, is_active=True)
            self._activity_log.record(
                ActivityType.SUBSCRIPTION_RENEWED,
                f"تم تجديد اشتراك العميل: {customer.name}",
                customer_id,
            )
            renewed = self._customers.get_by_id(customer_id)

        logger.info(
            "customer %s renewed: %s -> %s",
            customer_id,
            customer.expiry_date.isoformat(),
            new_expiry.isoformat(),
        )
        return renewed

    def list_expiring(self, days: int, *, today: Optional[date] = None) -> Sequence[Customer]:
        """Active customers expiring within `days`, already expired ones included."""
        if days < 0:
            raise ValidationError("عدد الأيام لا يمكن أن يكون سالباً")
        today = today or today_local()
        try:
            cutoff = today + timedelta(days=days)
        except OverflowError:
            # A window past year 9999 covers every stored expiry.
            cutoff = date.max
        return self._customers.list_active_expiring_by(cutoff)
