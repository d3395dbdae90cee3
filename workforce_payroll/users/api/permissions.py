from rest_framework.permissions import SAFE_METHODS
from rest_framework.permissions import BasePermission

# Groups allowed to change payroll settings.
PAYROLL_EDITOR_GROUPS = ("Admin", "Manager", "Payroll")


def can_edit_payroll_settings(user) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
        return True
    names = set(user.groups.values_list("name", flat=True))
    return bool(names.intersection(PAYROLL_EDITOR_GROUPS))


class IsPayrollEditorOrReadOnly(BasePermission):
    """Any authenticated user may read; only payroll editors may write."""

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        if not (u and getattr(u, "is_authenticated", False)):
            return False
        if request.method in SAFE_METHODS:
            return True
        return can_edit_payroll_settings(u)
