from datetime import date
from datetime import timedelta

from django.db import models
from django.utils.translation import gettext_lazy as _


class PublicHoliday(models.Model):
    """A gazetted holiday; every covered date is paid at the holiday rates."""

    name = models.CharField(max_length=100, help_text=_("e.g. Labour Day"))
    start_date = models.DateField(help_text=_("First holiday date"))
    end_date = models.DateField(help_text=_("Last holiday date, inclusive"))
    year = models.IntegerField(help_text=_("Year of the first date"), db_index=True)

    class Meta:
        ordering = ["start_date", "name"]

    def __str__(self):
        if self.start_date == self.end_date:
            return f"{self.name} ({self.start_date:%Y-%m-%d})"
        return f"{self.name} ({self.start_date:%Y-%m-%d} to {self.end_date:%Y-%m-%d})"

    def dates_between(self, start: date, end: date):
        """Yield the holiday's dates that fall inside ``start``..``end``."""
        day = max(self.start_date, start)
        last = min(self.end_date, end)
        while day <= last:
            yield day
            day += timedelta(days=1)
