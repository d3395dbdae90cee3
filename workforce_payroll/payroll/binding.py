from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError

from workforce_payroll.companies.configuration import ConfigurationError
from workforce_payroll.companies.service import get_company_configuration

from .calculator import PayrollCalculator
from .registry import initialize_payroll_calculator

logger = logging.getLogger(__name__)


def default_org_id() -> int:
    return int(getattr(settings, "PAYROLL_DEFAULT_ORG_ID", 1))


def calculator_for_org(org_id: int) -> PayrollCalculator:
    """A calculator bound to ``org_id``'s stored configuration."""

    return PayrollCalculator(get_company_configuration(org_id))


def bind_company_calculator(org_id: int | None = None) -> PayrollCalculator | None:
    """Bind the process-wide calculator to a company's stored configuration.

    Returns ``None`` (and leaves the registry untouched) when the settings
    table is not there yet or the stored document is unusable.
    """

    org_id = default_org_id() if org_id is None else org_id
    try:
        config = get_company_configuration(org_id)
    except DatabaseError:
        logger.warning("Company settings unavailable; payroll calculator not bound")
        return None
    except ConfigurationError:
        logger.exception("Stored configuration for org %s is invalid", org_id)
        return None
    return initialize_payroll_calculator(config)
