from django.urls import include
from django.urls import path

app_name = "api"
urlpatterns = [
    path("", include("workforce_payroll.companies.api.urls")),
    path("payroll/", include("workforce_payroll.payroll.api.urls")),
    path("leaves/", include("workforce_payroll.leaves.api.urls")),
]
