from datetime import datetime, timezone

from models import MonthWindow, TargetMonth

WINDOW_SIZE = 3


def get_month_window(now: datetime | None = None) -> MonthWindow:
    """
    Months checked in a run: the current UTC month and the next two.

    December rolls over to January and February of the following year.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    months = []
    for offset in range(WINDOW_SIZE):
        index = now.month - 1 + offset
        months.append(TargetMonth(year=now.year + index // 12, month=index % 12 + 1))

    return MonthWindow(months=tuple(months))
