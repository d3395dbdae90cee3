from datetime import date

from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from workforce_payroll.leaves.models import PublicHoliday
from workforce_payroll.leaves.services import holiday_calendar
from workforce_payroll.users.api.permissions import IsPayrollEditorOrReadOnly

from .serializers import HolidayCalendarEntrySerializer
from .serializers import PublicHolidaySerializer


def _parse_iso_date(value) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


@extend_schema_view(
    list=extend_schema(tags=["Leaves • Public holidays"]),
    retrieve=extend_schema(tags=["Leaves • Public holidays"]),
    create=extend_schema(tags=["Leaves • Public holidays"]),
    update=extend_schema(tags=["Leaves • Public holidays"]),
    partial_update=extend_schema(tags=["Leaves • Public holidays"]),
    destroy=extend_schema(tags=["Leaves • Public holidays"]),
)
class PublicHolidayViewSet(viewsets.ModelViewSet):
    queryset = PublicHoliday.objects.all()
    serializer_class = PublicHolidaySerializer
    permission_classes = [IsPayrollEditorOrReadOnly]

    def get_queryset(self):
        qs = super().get_queryset()
        year = self.request.query_params.get("year")
        if year and year.isdigit():
            qs = qs.filter(year=int(year))
        return qs

    @action(detail=False, methods=["get"], url_path="calendar")
    @extend_schema(
        tags=["Leaves • Public holidays"],
        parameters=[
            OpenApiParameter(name="start", required=True, type=str),
            OpenApiParameter(name="end", required=True, type=str),
        ],
        responses={200: HolidayCalendarEntrySerializer(many=True)},
    )
    def calendar(self, request):
        start = _parse_iso_date(request.query_params.get("start"))
        end = _parse_iso_date(request.query_params.get("end"))
        if not start or not end:
            return Response(
                {"detail": "start and end are required (YYYY-MM-DD)"}, status=400
            )
        entries = holiday_calendar(start, end)
        data = HolidayCalendarEntrySerializer(entries, many=True).data
        return Response(data, status=200)
