from __future__ import annotations

from typing import Any

from django.db import connection
from django.db import transaction
from django.http import JsonResponse

from workforce_payroll.payroll.registry import payroll_calculator_registry


def check_db() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def check_payroll_engine() -> dict[str, Any]:
    registry = payroll_calculator_registry()
    bound = registry.is_initialized
    try:
        calculator = registry.current()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    return {
        "ok": True,
        "company": calculator.config.company_name,
        "fallback": not bound,
    }


@transaction.non_atomic_requests
def health(request):
    db = check_db()
    engine = check_payroll_engine()
    components = {"db": db, "payroll_engine": engine}

    all_ok = all(v.get("ok", False) for v in components.values())
    some_ok = any(v.get("ok", False) for v in components.values())

    status = "ok" if all_ok else ("degraded" if some_ok else "down")
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )
