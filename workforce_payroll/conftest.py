import pytest
from django.contrib.auth.models import Group

from workforce_payroll.companies.configuration import CompanyConfiguration
from workforce_payroll.companies.defaults import get_fallback_document
from workforce_payroll.payroll.calculator import PayrollCalculator
from workforce_payroll.payroll.registry import reset_payroll_calculator
from workforce_payroll.users.tests.factories import UserFactory


@pytest.fixture(autouse=True)
def _unbound_payroll_calculator():
    reset_payroll_calculator()
    yield
    reset_payroll_calculator()


@pytest.fixture
def user(db):
    return UserFactory()


@pytest.fixture
def payroll_user(db):
    group, _ = Group.objects.get_or_create(name="Payroll")
    return UserFactory(groups=[group])


@pytest.fixture
def fallback_config() -> CompanyConfiguration:
    return CompanyConfiguration.from_document(get_fallback_document())


@pytest.fixture
def calculator(fallback_config) -> PayrollCalculator:
    return PayrollCalculator(fallback_config)
