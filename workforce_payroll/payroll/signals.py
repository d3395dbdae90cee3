import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from workforce_payroll.companies.models import CompanySettings

from .binding import bind_company_calculator
from .binding import default_org_id

logger = logging.getLogger(__name__)


@receiver(post_save, sender=CompanySettings)
def rebind_payroll_calculator(sender, instance, **kwargs):
    if instance.org_id != default_org_id():
        return
    logger.debug("Company settings for org %s saved; rebinding", instance.org_id)
    bind_company_calculator(instance.org_id)
