from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from workforce_payroll.companies.configuration import ConfigurationError
from workforce_payroll.leaves.services import holiday_calendar
from workforce_payroll.payroll.binding import calculator_for_org
from workforce_payroll.payroll.binding import default_org_id
from workforce_payroll.payroll.calculator import InvalidShiftError
from workforce_payroll.payroll.records import Employee
from workforce_payroll.payroll.records import Holiday

from .serializers import ContributionsRequestSerializer
from .serializers import LeaveDeductionRequestSerializer
from .serializers import ShiftPayRequestSerializer


class CalculatorView(APIView):
    """Base for endpoints computing against a company's stored configuration.

    ``calculator_factory`` maps an org id to a calculator; tests and callers
    that already hold one can swap it.
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = None
    calculator_factory = staticmethod(calculator_for_org)

    def compute(self, calculator, data):
        raise NotImplementedError

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            org_id = data.get("org_id") or default_org_id()
            calculator = self.calculator_factory(org_id)
            result = self.compute(calculator, data)
        except (ConfigurationError, InvalidShiftError) as exc:
            return Response({"detail": str(exc)}, status=400)
        return Response(result, status=200)


@extend_schema(
    tags=["Payroll • Calculator"],
    request=ShiftPayRequestSerializer,
    responses={200: {"type": "object"}},
)
class ShiftPayView(CalculatorView):
    """Pay breakdown for one shift.

    Holidays are the stored public holidays for the work date plus any
    dates passed in ``holidays``.
    """

    serializer_class = ShiftPayRequestSerializer

    def compute(self, calculator, data):
        work_date = data["work_date"]
        holidays = holiday_calendar(work_date, work_date)
        holidays += [Holiday(date=day) for day in data["holidays"]]
        employee = Employee(
            employee_id="",
            monthly_salary=data.get("monthly_salary"),
        )
        pay = calculator.calculate_shift_pay(
            employee,
            work_date,
            data["time_in"],
            data["time_out"],
            holidays,
            part_time_weekday_off=data["part_time_weekday_off"],
        )
        return pay.as_dict()


@extend_schema(
    tags=["Payroll • Calculator"],
    request=LeaveDeductionRequestSerializer,
    responses={200: {"type": "object"}},
)
class LeaveDeductionView(CalculatorView):
    serializer_class = LeaveDeductionRequestSerializer

    def compute(self, calculator, data):
        deduction = calculator.calculate_leave_deduction(
            data.get("total_days"),
            data.get("total_hours"),
            monthly_salary=data.get("monthly_salary"),
        )
        return {"deduction": deduction}


@extend_schema(
    tags=["Payroll • Calculator"],
    request=ContributionsRequestSerializer,
    responses={200: {"type": "object"}},
)
class ContributionsView(CalculatorView):
    serializer_class = ContributionsRequestSerializer

    def compute(self, calculator, data):
        split = calculator.calculate_mauritius_contributions(data["gross_salary"])
        return split.as_dict()
