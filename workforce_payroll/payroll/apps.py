from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PayrollConfig(AppConfig):
    name = "workforce_payroll.payroll"
    verbose_name = _("Payroll")

    def ready(self):
        import workforce_payroll.payroll.signals  # noqa: F401, PLC0415
