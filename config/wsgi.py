"""
WSGI config for the workforce payroll project.

Exposes the module-level ``application`` used by Django's development server
and any production WSGI deployment. Once Django is set up, the process-wide
payroll calculator is bound to the default company's stored configuration.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.base")

application = get_wsgi_application()

from workforce_payroll.payroll.binding import bind_company_calculator  # noqa: E402

bind_company_calculator()
