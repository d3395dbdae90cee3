from __future__ import annotations

from datetime import date

from workforce_payroll.payroll.records import Holiday

from .models import PublicHoliday


def holiday_calendar(start: date, end: date) -> list[Holiday]:
    """Per-date holidays between ``start`` and ``end`` (inclusive).

    Multi-day holidays are expanded into one entry per date, clipped to the
    requested range.
    """

    if end < start:
        return []

    rows = PublicHoliday.objects.filter(start_date__lte=end, end_date__gte=start)
    holidays = [
        Holiday(date=day, name=row.name)
        for row in rows
        for day in row.dates_between(start, end)
    ]
    holidays.sort(key=lambda holiday: (holiday.date, holiday.name))
    return holidays
