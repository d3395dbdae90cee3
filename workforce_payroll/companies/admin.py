from django.contrib import admin

from workforce_payroll.companies import models


@admin.register(models.CompanySettings)
class CompanySettingsAdmin(admin.ModelAdmin):
    list_display = ["id", "org_id", "updated_at"]
    search_fields = ["org_id"]
    readonly_fields = ["updated_at"]
