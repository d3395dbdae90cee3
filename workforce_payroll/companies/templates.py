"""Industry template catalog and template merge."""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from django.utils import timezone

from .configuration import CompanyConfiguration
from .defaults import get_baseline_document

# Sections merged key-by-key with the template winning; any other
# top-level key in a template fragment replaces the baseline value.
MERGED_SECTIONS = (
    "workingSchedule",
    "baseSalaryStructure",
    "overtimeRules",
    "mealAllowance",
    "transportAllowance",
    "leaveManagement",
    "attendanceSettings",
    "features",
    "localization",
    "customFields",
    "workflows",
)

# Always taken from the freshly built baseline, never from a template.
IDENTITY_FIELDS = (
    "id",
    "companyName",
    "employeeCount",
    "createdAt",
    "updatedAt",
    "createdBy",
)


@dataclass(frozen=True)
class IndustryTemplate:
    id: str
    name: str
    industry: str
    description: str
    configuration: dict[str, Any] = field(default_factory=dict)
    features: tuple[str, ...] = ()
    benefits: tuple[str, ...] = ()

    def summary(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "industry": self.industry,
            "description": self.description,
            "features": list(self.features),
            "benefits": list(self.benefits),
        }


def _features(**enabled: bool) -> dict[str, bool]:
    flags = {
        "supervisorRoster": True,
        "fieldOperations": False,
        "qrKiosk": False,
        "aiAssistant": True,
        "advancedReporting": True,
        "gpsTracking": False,
        "photographicVerification": False,
        "shiftSwapping": True,
        "performanceBonuses": True,
        "mauritiusCompliance": False,
        "customFields": False,
        "bulkOperations": False,
        "apiAccess": False,
        "auditTrail": False,
    }
    flags.update(enabled)
    return flags


def _tier(rate, description, conditions, breaks, *, trigger_hours=0, triggers=None):
    tier = {
        "enabled": True,
        "rate": rate,
        "triggerHours": trigger_hours,
        "triggerConditions": list(conditions),
        "breakDeductions": list(breaks),
        "description": description,
    }
    if triggers is not None:
        tier["triggers"] = list(triggers)
    return tier


def _schedule(days, hours, lunch, start, end, *, flex=False):
    return {
        "workingDays": list(days),
        "workingHoursPerDay": hours,
        "lunchBreakMinutes": lunch,
        "dinnerBreakMinutes": 30,
        "teaBreakMinutes": 15,
        "flexTimeAllowed": flex,
        "coreWorkingHours": {"start": start, "end": end},
    }


def _categories(*rows):
    return [
        {"name": name, "dailyRate": rate, "description": description}
        for name, rate, description in rows
    ]


_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")
_SIX_DAYS = (*_WEEKDAYS, "saturday")
_ALL_DAYS = (*_SIX_DAYS, "sunday")

INDUSTRY_TEMPLATES: tuple[IndustryTemplate, ...] = (
    IndustryTemplate(
        id="construction",
        name="Construction & Engineering",
        industry="construction",
        description=(
            "Perfect for construction companies, engineering firms, "
            "and project-based organizations"
        ),
        features=(
            "Site-based attendance with GPS verification",
            "Safety compliance tracking",
            "Equipment assignment management",
            "Weather-related leave policies",
            "Project-based cost tracking",
            "Higher transport allowances for site work",
        ),
        benefits=(
            "Ensure workers are at correct job sites",
            "Track safety incidents and compliance",
            "Manage equipment efficiently",
            "Handle weather delays automatically",
        ),
        configuration={
            "address": "Construction Site Office",
            "workingSchedule": _schedule(_SIX_DAYS, 8, 45, "07:00", "15:00"),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 25000,
                "workingDaysPerMonth": 26,
                "standardWorkingHours": 8,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "minimumWage": 12000,
                "salaryReviewCycle": "annually",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    120,
                    "Voluntary weekend work",
                    ["voluntary_weekend"],
                    ["30min lunch"],
                ),
                "ot1_5": _tier(
                    150,
                    "Standard overtime after 8 hours",
                    ["standard_overtime"],
                    ["30min lunch"],
                    trigger_hours=8,
                ),
                "ot2_0": _tier(
                    200,
                    "Weekend and holiday work",
                    ["weekend", "holiday"],
                    ["45min lunch", "30min dinner if >10h"],
                    triggers=["weekend", "holiday"],
                ),
                "ot3_0": _tier(
                    300,
                    "Emergency and night shift premiums",
                    ["emergency_callout", "night_shift"],
                    ["1h total breaks"],
                    triggers=["emergency_callout", "night_shift"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Site Worker", 300, "Construction site workers"),
                    ("Supervisor", 400, "Site supervisors and foremen"),
                    ("Engineer", 350, "Project engineers"),
                    ("Office Staff", 200, "Office-based personnel"),
                ),
                "taxiPolicy": "reduced_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 8000,
                "gpsMandatory": True,
                "receiptRequired": True,
            },
            "mealAllowance": {
                "amount": 200,
                "minimumHours": 9,
                "enabled": True,
                "description": "Construction site meal allowance",
                "taxable": False,
            },
            "leaveManagement": {
                "leaveTypes": [
                    {
                        "id": "annual",
                        "name": "Annual Leave",
                        "isPaid": True,
                        "requiresApproval": True,
                        "allowPartialDay": False,
                        "allowTimeSelection": False,
                        "annualQuota": 28,
                        "carryForward": True,
                        "maxCarryForwardDays": 7,
                        "approvalWorkflow": ["supervisor", "admin"],
                        "salaryDeductionMethod": "daily_rate",
                        "color": "bg-blue-100 text-blue-800",
                        "icon": "Calendar",
                        "description": "Annual vacation leave",
                    },
                    {
                        "id": "sick",
                        "name": "Sick Leave",
                        "isPaid": True,
                        "requiresApproval": False,
                        "allowPartialDay": False,
                        "allowTimeSelection": False,
                        "annualQuota": 14,
                        "carryForward": False,
                        "medicalCertRequired": 3,
                        "approvalWorkflow": ["supervisor"],
                        "salaryDeductionMethod": "daily_rate",
                        "color": "bg-red-100 text-red-800",
                        "icon": "Heart",
                        "description": "Medical sick leave",
                    },
                    {
                        "id": "safety",
                        "name": "Safety Incident Leave",
                        "isPaid": True,
                        "requiresApproval": False,
                        "allowPartialDay": True,
                        "allowTimeSelection": True,
                        "carryForward": False,
                        "approvalWorkflow": [],
                        "salaryDeductionMethod": "hourly_rate",
                        "color": "bg-orange-100 text-orange-800",
                        "icon": "Shield",
                        "description": "Work-related safety incident",
                    },
                ],
                "unpaidLeaveCalculation": {
                    "divisorDays": 26,
                    "includeAllowances": False,
                    "includeOvertime": False,
                },
                "advanceLeaveRequests": True,
                "maxAdvanceRequestDays": 90,
                "blackoutPeriods": [
                    {
                        "start": "12-20",
                        "end": "01-05",
                        "reason": "Holiday season construction halt",
                    }
                ],
            },
            "attendanceSettings": {
                "geofenceRadius": 50,
                "lateThresholdMinutes": 10,
                "gracePeriodMinutes": 5,
                "requirePhotos": True,
                "allowManualOverride": False,
                "multipleCheckInsPerDay": True,
                "autoClockOut": {"enabled": True, "afterHours": 12},
                "breakDeductionRules": {
                    "lunch": {"duration": 30, "threshold": 8},
                    "dinner": {"duration": 45, "threshold": 10},
                    "tea": {"duration": 15, "threshold": 4},
                },
            },
            "features": _features(
                fieldOperations=True,
                gpsTracking=True,
                photographicVerification=True,
                customFields=True,
                bulkOperations=True,
                auditTrail=True,
            ),
            "customFields": {
                "employee": [
                    {
                        "name": "Safety Certification",
                        "type": "dropdown",
                        "options": ["Basic", "Advanced", "Expert"],
                        "required": True,
                    },
                    {"name": "Equipment License", "type": "text", "required": False},
                ],
                "attendance": [
                    {
                        "name": "Site Conditions",
                        "type": "dropdown",
                        "options": ["Good", "Poor Weather", "Equipment Issues"],
                        "required": False,
                    }
                ],
                "leave": [],
            },
        },
    ),
    IndustryTemplate(
        id="delivery",
        name="Delivery & Logistics",
        industry="delivery",
        description=(
            "Optimized for delivery companies, logistics providers, "
            "and courier services"
        ),
        features=(
            "Vehicle assignment tracking",
            "Route optimization integration",
            "Fuel allowance calculations",
            "Per-delivery bonus structures",
            "Real-time GPS tracking mandatory",
            "Customer delivery confirmation",
        ),
        benefits=(
            "Track delivery performance in real-time",
            "Optimize routes and reduce fuel costs",
            "Automate delivery bonuses",
            "Ensure driver safety and compliance",
        ),
        configuration={
            "address": "Distribution Center",
            "workingSchedule": _schedule(_SIX_DAYS, 9, 30, "08:00", "17:00", flex=True),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 20000,
                "workingDaysPerMonth": 26,
                "standardWorkingHours": 9,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "salaryReviewCycle": "annually",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    100,
                    "Voluntary extra routes",
                    ["voluntary_extra_route"],
                    ["30min lunch"],
                ),
                "ot1_5": _tier(
                    130,
                    "Standard delivery overtime",
                    ["standard_overtime"],
                    ["30min lunch"],
                    trigger_hours=9,
                ),
                "ot2_0": _tier(
                    180,
                    "Weekend/holiday/express deliveries",
                    ["weekend", "holiday", "express_delivery"],
                    ["30min lunch"],
                    triggers=["weekend", "holiday", "express_delivery"],
                ),
                "ot3_0": _tier(
                    250,
                    "Emergency and night deliveries",
                    ["emergency_delivery", "night_delivery"],
                    ["45min total"],
                    triggers=["emergency_delivery", "night_delivery"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Motorcycle Rider", 250, "Motorcycle delivery riders"),
                    ("Van Driver", 350, "Van and truck drivers"),
                    ("Warehouse Staff", 150, "Warehouse and sorting staff"),
                    ("Dispatcher", 200, "Route dispatchers"),
                ),
                "taxiPolicy": "no_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 6000,
                "gpsMandatory": True,
                "receiptRequired": False,
            },
            "features": _features(
                fieldOperations=True,
                gpsTracking=True,
                customFields=True,
                bulkOperations=True,
                apiAccess=True,
            ),
        },
    ),
    IndustryTemplate(
        id="manufacturing",
        name="Manufacturing & Production",
        industry="manufacturing",
        description=(
            "Designed for manufacturing plants, factories, and production facilities"
        ),
        features=(
            "3-shift scheduling system",
            "Production target integration",
            "Machine operator assignments",
            "Quality control tracking",
            "Safety incident reporting",
            "Productivity bonus calculations",
        ),
        benefits=(
            "Optimize production schedules",
            "Track machine efficiency",
            "Ensure safety compliance",
            "Reward productivity improvements",
        ),
        configuration={
            "address": "Manufacturing Plant",
            "workingSchedule": _schedule(_WEEKDAYS, 8, 45, "06:00", "22:00"),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 22000,
                "workingDaysPerMonth": 26,
                "standardWorkingHours": 8,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "salaryReviewCycle": "quarterly",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    110,
                    "Voluntary extra hours",
                    ["voluntary_overtime"],
                    ["30min lunch"],
                ),
                "ot1_5": _tier(
                    140,
                    "Standard production overtime",
                    ["standard_overtime"],
                    ["45min lunch"],
                    trigger_hours=8,
                ),
                "ot2_0": _tier(
                    190,
                    "Night and weekend shifts",
                    ["night_shift", "weekend"],
                    ["45min lunch", "30min dinner if >10h"],
                    triggers=["night_shift", "weekend"],
                ),
                "ot3_0": _tier(
                    280,
                    "Emergency production runs",
                    ["emergency_production", "holiday"],
                    ["1h total breaks"],
                    triggers=["emergency_production", "holiday"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Production Worker", 180, "Factory floor workers"),
                    ("Machine Operator", 220, "Certified machine operators"),
                    ("Quality Inspector", 200, "Quality control staff"),
                    ("Supervisor", 300, "Production supervisors"),
                    ("Maintenance", 250, "Maintenance technicians"),
                ),
                "taxiPolicy": "reduced_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 5000,
                "gpsMandatory": False,
                "receiptRequired": True,
            },
            "features": _features(
                qrKiosk=True,
                photographicVerification=True,
                mauritiusCompliance=True,
                customFields=True,
                bulkOperations=True,
                auditTrail=True,
            ),
        },
    ),
    IndustryTemplate(
        id="retail",
        name="Retail & Customer Service",
        industry="retail",
        description=(
            "Perfect for retail stores, shopping centers, "
            "and customer service operations"
        ),
        features=(
            "Flexible part-time scheduling",
            "Commission-based pay structures",
            "Customer service metrics tracking",
            "Sales target bonus calculations",
            "Inventory responsibility tracking",
            "Peak-time premium rates",
        ),
        benefits=(
            "Handle flexible retail schedules",
            "Track sales performance",
            "Reward customer service excellence",
            "Manage seasonal workforce changes",
        ),
        configuration={
            "address": "Retail Store",
            "workingSchedule": _schedule(_ALL_DAYS, 8, 30, "10:00", "18:00", flex=True),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 18000,
                "workingDaysPerMonth": 26,
                "standardWorkingHours": 8,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "salaryReviewCycle": "annually",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    90,
                    "Part-time weekend shifts",
                    ["part_time_weekend"],
                    ["15min break"],
                ),
                "ot1_5": _tier(
                    120,
                    "Standard retail overtime",
                    ["standard_overtime"],
                    ["30min lunch"],
                    trigger_hours=8,
                ),
                "ot2_0": _tier(
                    160,
                    "Weekend and peak season work",
                    ["weekend", "holiday", "peak_season"],
                    ["30min lunch"],
                    triggers=["weekend", "holiday", "peak_season"],
                ),
                "ot3_0": _tier(
                    240,
                    "Special event and inventory work",
                    ["black_friday", "inventory_night"],
                    ["1h total breaks"],
                    triggers=["black_friday", "inventory_night"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Sales Associate", 150, "Floor sales staff"),
                    ("Cashier", 140, "Checkout cashiers"),
                    ("Store Manager", 250, "Store management"),
                    ("Security", 160, "Security personnel"),
                ),
                "taxiPolicy": "reduced_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 4000,
                "gpsMandatory": False,
                "receiptRequired": False,
            },
            "features": _features(qrKiosk=True, bulkOperations=True),
        },
    ),
    IndustryTemplate(
        id="services",
        name="Professional Services",
        industry="services",
        description=(
            "Ideal for consulting firms, agencies, and professional service providers"
        ),
        features=(
            "Project-based time tracking",
            "Client billing integration",
            "Flexible remote work policies",
            "Professional development tracking",
            "Performance-based compensation",
            "Meeting and travel time tracking",
        ),
        benefits=(
            "Track billable hours accurately",
            "Support remote and hybrid work",
            "Measure project profitability",
            "Reward client satisfaction",
        ),
        configuration={
            "address": "Corporate Office",
            "workingSchedule": _schedule(_WEEKDAYS, 8, 60, "09:00", "17:00", flex=True),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 30000,
                "workingDaysPerMonth": 22,
                "standardWorkingHours": 8,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "minimumWage": 18000,
                "salaryReviewCycle": "quarterly",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    140,
                    "Training and development time",
                    ["training", "development"],
                    ["1h lunch"],
                ),
                "ot1_5": _tier(
                    180,
                    "Standard professional overtime",
                    ["standard_overtime"],
                    ["1h lunch"],
                    trigger_hours=8,
                ),
                "ot2_0": _tier(
                    240,
                    "Client deadline and weekend work",
                    ["client_deadline", "weekend"],
                    ["1h lunch"],
                    triggers=["client_deadline", "weekend"],
                ),
                "ot3_0": _tier(
                    360,
                    "Emergency client support",
                    ["emergency_client_work"],
                    ["1h lunch", "30min dinner"],
                    triggers=["emergency_client_work"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Consultant", 400, "Senior consultants"),
                    ("Analyst", 300, "Business analysts"),
                    ("Project Manager", 450, "Project managers"),
                    ("Support Staff", 200, "Administrative support"),
                ),
                "taxiPolicy": "full_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 12000,
                "gpsMandatory": False,
                "receiptRequired": True,
            },
            "features": _features(customFields=True, apiAccess=True, auditTrail=True),
        },
    ),
    IndustryTemplate(
        id="mauritius_standard",
        name="Mauritius Standard Template",
        industry="other",
        description=(
            "Pre-configured for Mauritius labor laws, tax compliance, "
            "and local business practices"
        ),
        features=(
            "Full Mauritius labor law compliance",
            "NPF, NSF, CSG automatic calculations",
            "13th month salary tracking",
            "End-of-year bonus calculations",
            "Mauritius public holidays pre-loaded",
            "Local currency and date formats",
        ),
        benefits=(
            "Instant compliance with Mauritius laws",
            "Automatic tax calculations",
            "Pre-loaded public holidays",
            "Local business practices built-in",
        ),
        configuration={
            "address": "Port Louis, Mauritius",
            "workingSchedule": _schedule(_WEEKDAYS, 8, 60, "09:00", "17:00", flex=True),
            "baseSalaryStructure": {
                "defaultMonthlySalary": 17710,
                "workingDaysPerMonth": 26,
                "standardWorkingHours": 8,
                "currency": "MUR",
                "currencySymbol": "Rs",
                "calculationMethod": "monthly",
                "minimumWage": 11000,
                "salaryReviewCycle": "annually",
            },
            "overtimeRules": {
                "ot1_0": _tier(
                    85,
                    "Part-time Sunday work (Mauritius compliant)",
                    ["part_time_sunday"],
                    ["30min lunch"],
                ),
                "ot1_5": _tier(
                    127,
                    "Standard overtime (Mauritius compliant)",
                    ["standard_overtime"],
                    ["30min lunch"],
                    trigger_hours=8,
                ),
                "ot2_0": _tier(
                    170,
                    "Weekend/holiday work (Mauritius compliant)",
                    ["weekend", "holiday"],
                    ["30min lunch"],
                    triggers=["weekend", "holiday"],
                ),
                "ot3_0": _tier(
                    255,
                    "Extended weekend/holiday work",
                    ["extended_weekend", "extended_holiday"],
                    ["1h total breaks"],
                    triggers=["extended_weekend", "extended_holiday"],
                ),
            },
            "transportAllowance": {
                "enabled": True,
                "categories": _categories(
                    ("Promoter", 200, "Promotional staff"),
                    ("Retail", 180, "Retail workers"),
                    ("Supervisor", 300, "Supervisory roles"),
                    ("HR", 280, "HR staff"),
                    ("Director", 350, "Management staff"),
                ),
                "taxiPolicy": "reduced_allowance",
                "monthlyCapEnabled": True,
                "monthlyCap": 10000,
                "gpsMandatory": True,
                "receiptRequired": False,
            },
            "mealAllowance": {
                "amount": 150,
                "minimumHours": 10,
                "enabled": True,
                "description": "Meal allowance for long shifts",
                "taxable": False,
            },
            "features": _features(
                fieldOperations=True,
                qrKiosk=True,
                gpsTracking=True,
                photographicVerification=True,
                mauritiusCompliance=True,
                bulkOperations=True,
                auditTrail=True,
            ),
            "mauritiusSettings": {
                "enabled": True,
                "statutoryContributions": {
                    "employeeNPF": {"enabled": True, "rate": 3.0},
                    "employeeNSF": {"enabled": True, "rate": 2.5},
                    "employeeCSG": {"enabled": True, "rate": 1.0},
                    "employerNPF": {"enabled": True, "rate": 6.0},
                    "employerNSF": {"enabled": True, "rate": 2.5},
                    "employerCSG": {"enabled": True, "rate": 2.0},
                    "trainingLevy": {"enabled": True, "rate": 1.5},
                },
                "thirteenthSalary": {
                    "enabled": True,
                    "paymentMonth": 12,
                    "calculationBase": "basic_salary",
                    "proRated": True,
                },
                "eyb": {
                    "enabled": True,
                    "minimumServiceMonths": 12,
                    "calculationFormula": "basic_salary / 12",
                },
                "overtimeLimits": {
                    "maxOvertimePerWeek": 10,
                    "maxOvertimePerMonth": 60,
                    "enforceCompliance": True,
                },
            },
        },
    ),
)

_BASE_LEAVE_TYPES = (
    {
        "id": "unpaid",
        "name": "Unpaid Leave",
        "isPaid": False,
        "requiresApproval": True,
        "allowPartialDay": True,
        "carryForward": False,
        "color": "bg-red-100 text-red-800",
        "icon": "DollarSign",
    },
    {
        "id": "paid_sick",
        "name": "Paid Sick Leave",
        "isPaid": True,
        "annualQuota": 10,
        "requiresApproval": True,
        "allowPartialDay": False,
        "carryForward": False,
        "color": "bg-blue-100 text-blue-800",
        "icon": "Heart",
    },
    {
        "id": "vacation",
        "name": "Annual Vacation",
        "isPaid": True,
        "annualQuota": 28,
        "requiresApproval": True,
        "allowPartialDay": False,
        "carryForward": True,
        "color": "bg-yellow-100 text-yellow-800",
        "icon": "Plane",
    },
)

_INDUSTRY_LEAVE_TYPES = {
    "construction": (
        {
            "id": "weather_delay",
            "name": "Weather Delay",
            "isPaid": True,
            "requiresApproval": False,
            "allowPartialDay": True,
            "carryForward": False,
            "color": "bg-gray-100 text-gray-800",
            "icon": "Cloud",
        },
        {
            "id": "safety_incident",
            "name": "Safety Incident Leave",
            "isPaid": True,
            "requiresApproval": False,
            "allowPartialDay": False,
            "carryForward": False,
            "color": "bg-orange-100 text-orange-800",
            "icon": "Shield",
        },
    ),
    "delivery": (
        {
            "id": "vehicle_breakdown",
            "name": "Vehicle Breakdown",
            "isPaid": True,
            "requiresApproval": False,
            "allowPartialDay": True,
            "carryForward": False,
            "color": "bg-orange-100 text-orange-800",
            "icon": "Truck",
        },
    ),
}


def get_industry_template(template_id: str) -> IndustryTemplate | None:
    for template in INDUSTRY_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def require_industry_template(template_id: str) -> IndustryTemplate:
    template = get_industry_template(template_id)
    if template is None:
        msg = f"Unknown industry template: {template_id}"
        raise LookupError(msg)
    return template


def _baseline_for(
    template: IndustryTemplate, company_name: str, employee_count: int
) -> dict[str, Any]:
    now = timezone.now().isoformat()
    doc = get_baseline_document()
    doc.update(
        {
            "id": f"company_{uuid.uuid4().hex[:12]}",
            "companyName": company_name,
            "industry": template.industry,
            "employeeCount": employee_count,
            "address": template.configuration.get("address") or "Company Address",
            "createdAt": now,
            "updatedAt": now,
            "createdBy": "system",
        }
    )
    return doc


def create_company_document_from_template(
    template: IndustryTemplate, company_name: str, employee_count: int
) -> dict[str, Any]:
    """Merge ``template`` over the baseline and return the complete document.

    Sections in ``MERGED_SECTIONS`` are merged one level deep (template keys
    win). Identity fields always come from the baseline, so re-applying a
    template never changes who the company is.
    """

    base = _baseline_for(template, company_name, employee_count)
    fragment = copy.deepcopy(template.configuration)

    merged = {**base, **fragment}
    for section in MERGED_SECTIONS:
        merged[section] = {**base.get(section, {}), **(fragment.get(section) or {})}
    for key in IDENTITY_FIELDS:
        merged[key] = base[key]
    return merged


def create_company_config_from_template(
    template: IndustryTemplate, company_name: str, employee_count: int
) -> CompanyConfiguration:
    return CompanyConfiguration.from_document(
        create_company_document_from_template(template, company_name, employee_count)
    )


def get_default_leave_types(industry: str) -> list[dict[str, Any]]:
    extras = _INDUSTRY_LEAVE_TYPES.get(industry, ())
    return copy.deepcopy([*_BASE_LEAVE_TYPES, *extras])


def get_default_configuration() -> CompanyConfiguration:
    """Configuration for a company that has not been through setup yet."""

    template = get_industry_template("mauritius_standard") or INDUSTRY_TEMPLATES[0]
    return create_company_config_from_template(template, "Demo Company", 50)
