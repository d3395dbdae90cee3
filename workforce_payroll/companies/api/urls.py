from django.urls import path

from .views import ApplyIndustryTemplateView
from .views import CompanyConfigurationSectionView
from .views import CompanyConfigurationView
from .views import IndustryTemplateDetailView
from .views import IndustryTemplateListView

urlpatterns = [
    path(
        "companies/<int:org_id>/configuration/",
        CompanyConfigurationView.as_view(),
        name="company-configuration",
    ),
    path(
        "companies/<int:org_id>/configuration/apply-template/",
        ApplyIndustryTemplateView.as_view(),
        name="company-configuration-apply-template",
    ),
    path(
        "companies/<int:org_id>/configuration/<str:section>/",
        CompanyConfigurationSectionView.as_view(),
        name="company-configuration-section",
    ),
    path(
        "industry-templates/",
        IndustryTemplateListView.as_view(),
        name="industry-templates",
    ),
    path(
        "industry-templates/<str:template_id>/",
        IndustryTemplateDetailView.as_view(),
        name="industry-template-detail",
    ),
]
