from http import HTTPStatus

import pytest
from django.db import connection as dj_conn

from workforce_payroll.companies.models import CompanySettings


class DummyDbError(Exception):
    """Synthetic DB error for testing."""


@pytest.mark.django_db
def test_health_ok_on_fallback(client):
    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["status"] == "ok"
    assert data["components"]["db"]["ok"] is True
    engine = data["components"]["payroll_engine"]
    assert engine["ok"] is True
    assert engine["fallback"] is True
    assert engine["company"] == "Fallback Company"


@pytest.mark.django_db
def test_health_reports_bound_company(client):
    CompanySettings.objects.create(org_id=1, document={"companyName": "Acme"})

    data = client.get("/health/").json()

    engine = data["components"]["payroll_engine"]
    assert engine["fallback"] is False
    assert engine["company"] == "Acme"


@pytest.mark.django_db
def test_health_degraded_when_db_fails(client, monkeypatch):
    msg = "db down"

    def raise_cursor():
        raise DummyDbError(msg)

    monkeypatch.setattr(dj_conn, "cursor", raise_cursor, raising=True)
    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    data = resp.json()
    assert data["components"]["db"]["ok"] is False
    assert data["status"] == "degraded"
