from django.db import models
from django.utils.translation import gettext_lazy as _


class CompanySettings(models.Model):
    """Stored company configuration document.

    ``document`` holds the camelCase configuration the settings screens
    edit. It is read back merged over the baseline document, so it may hold
    only the keys a company changed. Saves replace it wholesale.
    """

    org_id = models.PositiveIntegerField(unique=True, default=1)
    document = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["org_id"]
        verbose_name = _("company settings")
        verbose_name_plural = _("company settings")

    def __str__(self) -> str:  # pragma: no cover - trivial
        name = (self.document or {}).get("companyName") or "-"
        return f"CompanySettings(org_id={self.org_id}, {name})"
