from django.contrib import admin

from workforce_payroll.leaves.models import PublicHoliday


@admin.register(PublicHoliday)
class PublicHolidayAdmin(admin.ModelAdmin):
    list_display = ["name", "start_date", "end_date", "year"]
    list_filter = ["year"]
    date_hierarchy = "start_date"
    readonly_fields = ["year"]

    def save_model(self, request, obj, form, change):
        obj.year = obj.start_date.year
        super().save_model(request, obj, form, change)
