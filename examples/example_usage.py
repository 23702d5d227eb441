"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from dotenv import load_dotenv

from business_manager.config import get_settings_module
from business_manager.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, reports_folder=settings.REPORTS_FOLDER)

    stats = container.dashboard_service.snapshot()
    print(f"customers={stats.total_customers} inventory={stats.current_inventory} status={stats.financial_status.value}")
    for customer in container.customer_service.list_expiring(30):
        print(f"expiring: {customer.name} ({customer.expiry_date.isoformat()})")


if __name__ == "__main__":
    main()
