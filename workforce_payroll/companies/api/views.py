from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from workforce_payroll.companies.configuration import ConfigurationError
from workforce_payroll.companies.service import apply_industry_template
from workforce_payroll.companies.service import get_configuration_document
from workforce_payroll.companies.service import save_configuration_document
from workforce_payroll.companies.service import save_configuration_section
from workforce_payroll.companies.templates import INDUSTRY_TEMPLATES
from workforce_payroll.companies.templates import get_industry_template
from workforce_payroll.users.api.permissions import can_edit_payroll_settings

from .serializers import ApplyTemplateSerializer
from .serializers import IndustryTemplateSerializer
from .serializers import IndustryTemplateSummarySerializer


def _template_payload(template, *, detail: bool) -> dict:
    payload = template.summary()
    if detail:
        payload["configuration"] = template.configuration
    return payload


@extend_schema(tags=["Companies • Configuration"])
class CompanyConfigurationView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, org_id: int):
        return Response(get_configuration_document(org_id=org_id), status=200)

    def put(self, request, org_id: int):
        if not can_edit_payroll_settings(request.user):
            return Response({"detail": "Forbidden"}, status=403)
        if not isinstance(request.data, dict):
            return Response({"detail": "Expected JSON object"}, status=400)

        try:
            save_configuration_document(org_id, request.data)
        except ConfigurationError as exc:
            return Response({"detail": str(exc)}, status=400)
        return Response(get_configuration_document(org_id=org_id), status=200)


@extend_schema(tags=["Companies • Configuration"])
class CompanyConfigurationSectionView(APIView):
    permission_classes = [IsAuthenticated]

    _allowed_sections = {
        "workingSchedule",
        "baseSalaryStructure",
        "overtimeRules",
        "mealAllowance",
        "transportAllowance",
        "leaveManagement",
        "attendanceSettings",
        "features",
        "mauritiusSettings",
        "localization",
        "customFields",
        "workflows",
    }

    def get(self, request, org_id: int, section: str):
        if section not in self._allowed_sections:
            return Response({"detail": "Unknown section"}, status=404)
        doc = get_configuration_document(org_id=org_id)
        return Response({section: doc.get(section)}, status=200)

    def put(self, request, org_id: int, section: str):
        if section not in self._allowed_sections:
            return Response({"detail": "Unknown section"}, status=404)
        if not can_edit_payroll_settings(request.user):
            return Response({"detail": "Forbidden"}, status=403)
        if not isinstance(request.data, dict):
            return Response({"detail": "Expected JSON object"}, status=400)

        # Accepts either { [section]: value } or the bare section value.
        section_payload = request.data.get(section, request.data)
        try:
            save_configuration_section(org_id, section, section_payload)
        except ConfigurationError as exc:
            return Response({"detail": str(exc)}, status=400)
        return Response(get_configuration_document(org_id=org_id), status=200)


@extend_schema(tags=["Companies • Configuration"])
class ApplyIndustryTemplateView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=ApplyTemplateSerializer, responses={200: {"type": "object"}}
    )
    def post(self, request, org_id: int):
        if not can_edit_payroll_settings(request.user):
            return Response({"detail": "Forbidden"}, status=403)
        serializer = ApplyTemplateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        template = get_industry_template(data["template_id"])
        if template is None:
            return Response({"detail": "Unknown industry template"}, status=404)

        apply_industry_template(
            org_id,
            template,
            company_name=data.get("company_name"),
            employee_count=data.get("employee_count"),
        )
        return Response(get_configuration_document(org_id=org_id), status=200)


@extend_schema(tags=["Companies • Industry templates"])
class IndustryTemplateListView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: IndustryTemplateSummarySerializer(many=True)})
    def get(self, request):
        data = [_template_payload(t, detail=False) for t in INDUSTRY_TEMPLATES]
        return Response(data, status=200)


@extend_schema(tags=["Companies • Industry templates"])
class IndustryTemplateDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: IndustryTemplateSerializer})
    def get(self, request, template_id: str):
        template = get_industry_template(template_id)
        if template is None:
            return Response({"detail": "Unknown industry template"}, status=404)
        return Response(_template_payload(template, detail=True), status=200)
