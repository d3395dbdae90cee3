import pytest
from rest_framework import status
from rest_framework.test import APIClient

from workforce_payroll.companies.models import CompanySettings
from workforce_payroll.leaves.models import PublicHoliday
from workforce_payroll.payroll.api.views import ShiftPayView


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.mark.django_db
def test_calculator_endpoints_require_auth():
    client = APIClient()

    res = client.post("/api/v1/payroll/shift-pay/", {}, format="json")

    assert res.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
def test_shift_pay_regular_day(api_client):
    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {"work_date": "2024-01-08", "time_in": "08:00", "time_out": "16:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_200_OK
    body = res.json()
    assert body["regularPay"] == 638.58
    assert body["totalPay"] == 638.58
    assert body["otRate"] == "Regular Day"


@pytest.mark.django_db
def test_shift_pay_uses_stored_holidays(api_client):
    PublicHoliday.objects.create(
        name="Independence Day",
        start_date="2024-03-12",
        end_date="2024-03-12",
        year=2024,
    )

    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {"work_date": "2024-03-12", "time_in": "08:00", "time_out": "16:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_200_OK
    assert res.json()["overtimePay"] == 1275.00


@pytest.mark.django_db
def test_shift_pay_uses_posted_holidays(api_client):
    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {
            "work_date": "2024-01-09",
            "time_in": "08:00",
            "time_out": "16:00",
            "holidays": ["2024-01-09"],
        },
        format="json",
    )

    assert res.json()["otRate"] == "OT 2.0 (Rs170/hr)"


@pytest.mark.django_db
def test_shift_pay_uses_company_configuration(api_client):
    CompanySettings.objects.create(
        org_id=3, document={"overtimeRules": {"ot2_0": {"rate": 200}}}
    )

    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {
            "org_id": 3,
            "work_date": "2024-01-07",
            "time_in": "08:00",
            "time_out": "16:00",
        },
        format="json",
    )

    assert res.json()["overtimePay"] == 1500.00


@pytest.mark.django_db
def test_shift_pay_with_employee_salary(api_client):
    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {
            "work_date": "2024-01-08",
            "time_in": "08:00",
            "time_out": "16:00",
            "monthly_salary": "26000",
        },
        format="json",
    )

    assert res.json()["regularPay"] == 937.50


@pytest.mark.django_db
def test_shift_pay_rejects_reversed_times(api_client):
    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {"work_date": "2024-01-08", "time_in": "16:00", "time_out": "08:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert "not after" in res.json()["detail"]


@pytest.mark.django_db
def test_shift_pay_rejects_malformed_time(api_client):
    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {"work_date": "2024-01-08", "time_in": "8am", "time_out": "16:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert "time_in" in res.json()


@pytest.mark.django_db
def test_invalid_stored_configuration_is_400(api_client):
    CompanySettings.objects.create(
        org_id=5, document={"baseSalaryStructure": {"workingDaysPerMonth": 0}}
    )

    res = api_client.post(
        "/api/v1/payroll/leave-deduction/",
        {"org_id": 5, "total_days": 1},
        format="json",
    )

    assert res.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
def test_leave_deduction(api_client):
    res = api_client.post(
        "/api/v1/payroll/leave-deduction/", {"total_days": 2}, format="json"
    )

    assert res.status_code == status.HTTP_200_OK
    assert res.json() == {"deduction": 1362.31}


@pytest.mark.django_db
def test_leave_deduction_needs_days_or_hours(api_client):
    res = api_client.post("/api/v1/payroll/leave-deduction/", {}, format="json")

    assert res.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
def test_contributions_for_compliant_company(api_client):
    CompanySettings.objects.create(
        org_id=1,
        document={
            "features": {"mauritiusCompliance": True},
            "mauritiusSettings": {
                "statutoryContributions": {
                    "employeeCSG": {"enabled": False, "rate": 1},
                },
            },
        },
    )

    res = api_client.post(
        "/api/v1/payroll/contributions/", {"gross_salary": "20000"}, format="json"
    )

    assert res.status_code == status.HTTP_200_OK
    body = res.json()
    assert body["employeeContributions"]["total"] == 1100.00
    assert body["netSalary"] == 18900.00


@pytest.mark.django_db
def test_contributions_without_compliance(api_client):
    res = api_client.post(
        "/api/v1/payroll/contributions/", {"gross_salary": "20000"}, format="json"
    )

    assert res.json()["netSalary"] == 20000.00


@pytest.mark.django_db
def test_calculator_factory_can_be_swapped(api_client, calculator, monkeypatch):
    calls = []

    def factory(org_id):
        calls.append(org_id)
        return calculator

    monkeypatch.setattr(ShiftPayView, "calculator_factory", staticmethod(factory))

    res = api_client.post(
        "/api/v1/payroll/shift-pay/",
        {"work_date": "2024-01-08", "time_in": "08:00", "time_out": "16:00"},
        format="json",
    )

    assert res.status_code == status.HTTP_200_OK
    assert calls == [1]
