from django.urls import include
from django.urls import path
from rest_framework.routers import SimpleRouter

from workforce_payroll.leaves.api.views import PublicHolidayViewSet

router = SimpleRouter()
router.register("public-holidays", PublicHolidayViewSet)

urlpatterns = [
    path("", include(router.urls)),
]
