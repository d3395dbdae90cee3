from django.urls import path

from .views import ContributionsView
from .views import LeaveDeductionView
from .views import ShiftPayView

urlpatterns = [
    path("shift-pay/", ShiftPayView.as_view(), name="payroll-shift-pay"),
    path(
        "leave-deduction/",
        LeaveDeductionView.as_view(),
        name="payroll-leave-deduction",
    ),
    path("contributions/", ContributionsView.as_view(), name="payroll-contributions"),
]
