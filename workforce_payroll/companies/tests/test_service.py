from decimal import Decimal

import pytest

from workforce_payroll.companies.configuration import ConfigurationError
from workforce_payroll.companies.configuration import OvertimeTier
from workforce_payroll.companies.models import CompanySettings
from workforce_payroll.companies.service import apply_industry_template
from workforce_payroll.companies.service import get_company_configuration
from workforce_payroll.companies.service import get_configuration_document
from workforce_payroll.companies.service import save_configuration_document
from workforce_payroll.companies.service import save_configuration_section
from workforce_payroll.companies.templates import require_industry_template


@pytest.mark.django_db
def test_unsaved_company_reads_the_baseline():
    doc = get_configuration_document(7)

    assert doc["baseSalaryStructure"]["defaultMonthlySalary"] == 17710
    assert not CompanySettings.objects.filter(org_id=7).exists()


@pytest.mark.django_db
def test_stored_document_is_merged_over_the_baseline():
    CompanySettings.objects.create(
        org_id=3,
        document={
            "companyName": "Acme",
            "mealAllowance": {"amount": 175},
        },
    )

    doc = get_configuration_document(3)
    config = get_company_configuration(3)

    assert doc["mealAllowance"]["amount"] == 175
    assert doc["mealAllowance"]["minimumHours"] == 10
    assert config.company_name == "Acme"
    assert config.meal_allowance.amount == Decimal(175)


@pytest.mark.django_db
def test_save_document_stamps_updated_at():
    config = save_configuration_document(2, {"companyName": "Acme"})

    row = CompanySettings.objects.get(org_id=2)
    assert config.company_name == "Acme"
    assert row.document["updatedAt"]
    assert config.updated_at == row.document["updatedAt"]


@pytest.mark.django_db
def test_invalid_document_is_not_stored():
    with pytest.raises(ConfigurationError):
        save_configuration_document(
            2, {"baseSalaryStructure": {"workingDaysPerMonth": 0}}
        )

    assert not CompanySettings.objects.filter(org_id=2).exists()


@pytest.mark.django_db
def test_save_section_keeps_other_sections():
    save_configuration_document(4, {"companyName": "Acme"})

    config = save_configuration_section(
        4, "overtimeRules", {"ot1_5": {"enabled": False, "rate": 127}}
    )

    assert config.company_name == "Acme"
    assert config.overtime_rules.is_enabled(OvertimeTier.OT_1_5) is False


@pytest.mark.django_db
def test_apply_template_keeps_existing_identity():
    save_configuration_document(5, {"companyName": "Acme", "employeeCount": 12})

    config = apply_industry_template(5, require_industry_template("services"))

    assert config.company_name == "Acme"
    assert config.employee_count == 12
    assert config.industry == "services"
    assert config.base_salary_structure.default_monthly_salary == Decimal(30000)


@pytest.mark.django_db
def test_apply_template_with_new_identity():
    config = apply_industry_template(
        6,
        require_industry_template("delivery"),
        company_name="Fast Parcels",
        employee_count=30,
    )

    assert config.company_name == "Fast Parcels"
    assert config.employee_count == 30
    assert get_company_configuration(6).company_name == "Fast Parcels"
