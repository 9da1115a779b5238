"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

STANDARD_DAILY_HOURS = Decimal("8")
OVERTIME_MULTIPLIER = Decimal("1.5")
MONTHLY_HOURS = Decimal("160")

MONEY_PLACES = Decimal("0.01")
