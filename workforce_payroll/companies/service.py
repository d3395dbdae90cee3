from __future__ import annotations

import copy
from typing import Any

from django.utils import timezone

from .configuration import CompanyConfiguration
from .defaults import get_baseline_document
from .models import CompanySettings
from .templates import IndustryTemplate
from .templates import create_company_document_from_template


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into base (dict-only), returning a new dict."""

    out: dict[str, Any] = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if key in out and isinstance(out[key], dict) and isinstance(value, dict):
            out[key] = _deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def get_configuration_document(org_id: int = 1) -> dict[str, Any]:
    """Return the configuration document for `org_id`.

    - If a settings row exists, return the baseline merged with the stored
      document.
    - Otherwise return the baseline document.
    """

    baseline = get_baseline_document()

    row = CompanySettings.objects.filter(org_id=org_id).first()
    if not row or not isinstance(row.document, dict):
        return baseline

    return _deep_merge(baseline, row.document)


def get_company_configuration(org_id: int = 1) -> CompanyConfiguration:
    return CompanyConfiguration.from_document(get_configuration_document(org_id))


def save_configuration_document(
    org_id: int, document: dict[str, Any]
) -> CompanyConfiguration:
    """Validate and store ``document`` as the company's whole configuration.

    Raises ``ConfigurationError`` (and stores nothing) when the merged
    document does not describe a usable configuration.
    """

    document = copy.deepcopy(document)
    document["updatedAt"] = timezone.now().isoformat()
    config = CompanyConfiguration.from_document(
        _deep_merge(get_baseline_document(), document)
    )
    CompanySettings.objects.update_or_create(
        org_id=org_id, defaults={"document": document}
    )
    return config


def save_configuration_section(
    org_id: int, section: str, value: Any
) -> CompanyConfiguration:
    document = get_configuration_document(org_id)
    document[section] = value
    return save_configuration_document(org_id, document)


def apply_industry_template(
    org_id: int,
    template: IndustryTemplate,
    *,
    company_name: str | None = None,
    employee_count: int | None = None,
) -> CompanyConfiguration:
    current = get_configuration_document(org_id)
    if employee_count is None:
        employee_count = current.get("employeeCount", 0)
    document = create_company_document_from_template(
        template,
        company_name or current.get("companyName") or "My Company",
        employee_count,
    )
    return save_configuration_document(org_id, document)
