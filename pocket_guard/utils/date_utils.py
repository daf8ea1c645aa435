"""Date manipulation utilities"""

from datetime import date
from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Advance by calendar months, clamping the day to the target month's length (Jan 31 + 1 -> Feb 28/29)"""
    return from_date + relativedelta(months=months)


def today() -> date:
    """Current local date, the default anchor for loans without a start date"""
    return date.today()
