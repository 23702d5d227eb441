"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_SESSION_DAYS = 7
DEFAULT_ACTIVITY_LIMIT = 10
MAX_ACTIVITY_LIMIT = 100

EXPIRING_SOON_DAYS = 30
RENEWAL_MONTHS = 12

# Inventory below salaries * this factor is a warning.
WARNING_SALARY_FACTOR = Decimal("1.5")

MONEY_PLACES = Decimal("0.01")
# Largest value a DECIMAL(12,2) column holds.
MAX_AMOUNT = Decimal("9999999999.99")
CURRENCY_LABEL = "د.ع"

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
