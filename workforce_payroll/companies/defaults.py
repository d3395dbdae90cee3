"""Default configuration documents.

``get_baseline_document`` is the complete document every industry template
is merged over. ``get_fallback_document`` is the minimal Mauritius-rate
document used when no company configuration was ever bound.
"""

from __future__ import annotations

import copy
from typing import Any

_WORKING_DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]

_BASELINE: dict[str, Any] = {
    "primaryColor": "#1f2937",
    "workingSchedule": {
        "workingDays": _WORKING_DAYS,
        "workingHoursPerDay": 8,
        "lunchBreakMinutes": 30,
        "dinnerBreakMinutes": 30,
        "teaBreakMinutes": 15,
        "flexTimeAllowed": False,
        "coreWorkingHours": {"start": "09:00", "end": "17:00"},
    },
    "baseSalaryStructure": {
        "defaultMonthlySalary": 17710,
        "workingDaysPerMonth": 26,
        "standardWorkingHours": 8,
        "currency": "MUR",
        "currencySymbol": "Rs",
        "calculationMethod": "monthly",
        "salaryReviewCycle": "annually",
    },
    "overtimeRules": {
        "ot1_0": {
            "enabled": True,
            "rate": 85,
            "triggerHours": 0,
            "triggerConditions": ["part_time_sunday"],
            "breakDeductions": ["30min lunch"],
            "description": "Part-time Sunday work",
        },
        "ot1_5": {
            "enabled": True,
            "rate": 127,
            "triggerHours": 8,
            "triggerConditions": ["standard_overtime"],
            "breakDeductions": ["30min lunch"],
            "description": "Standard overtime",
        },
        "ot2_0": {
            "enabled": True,
            "rate": 170,
            "triggerHours": 0,
            "triggers": ["weekend", "holiday"],
            "triggerConditions": ["weekend", "holiday"],
            "breakDeductions": ["30min lunch"],
            "description": "Weekend/holiday work",
        },
        "ot3_0": {
            "enabled": True,
            "rate": 255,
            "triggerHours": 0,
            "triggers": ["extended_weekend", "extended_holiday"],
            "triggerConditions": ["extended_weekend", "extended_holiday"],
            "breakDeductions": ["1h total breaks"],
            "description": "Extended weekend/holiday work",
        },
    },
    "mealAllowance": {
        "amount": 150,
        "minimumHours": 10,
        "enabled": True,
        "description": "Meal allowance for extended shifts",
        "taxable": False,
    },
    "transportAllowance": {
        "enabled": True,
        "categories": [
            {"name": "Promoter", "dailyRate": 200, "description": "Promotional staff"},
            {"name": "Retail", "dailyRate": 180, "description": "Retail workers"},
            {
                "name": "Supervisor",
                "dailyRate": 300,
                "description": "Supervisory roles",
            },
            {"name": "Management", "dailyRate": 350, "description": "Management staff"},
        ],
        "taxiPolicy": "reduced_allowance",
        "monthlyCapEnabled": True,
        "monthlyCap": 10000,
        "gpsMandatory": False,
        "receiptRequired": False,
    },
    "leaveManagement": {
        "leaveTypes": [
            {
                "id": "unpaid",
                "name": "Unpaid Leave",
                "isPaid": False,
                "requiresApproval": True,
                "allowPartialDay": True,
                "allowTimeSelection": True,
                "carryForward": False,
                "approvalWorkflow": ["supervisor"],
                "salaryDeductionMethod": "hourly_rate",
                "color": "bg-red-100 text-red-800",
                "icon": "DollarSign",
                "description": "Unpaid leave with salary deduction",
            },
            {
                "id": "paid_local",
                "name": "Paid Local Leave",
                "isPaid": True,
                "annualQuota": 5,
                "requiresApproval": True,
                "allowPartialDay": False,
                "allowTimeSelection": False,
                "carryForward": False,
                "approvalWorkflow": ["supervisor"],
                "salaryDeductionMethod": "daily_rate",
                "color": "bg-green-100 text-green-800",
                "icon": "MapPin",
                "description": "Paid local leave days",
            },
            {
                "id": "vacation",
                "name": "Annual Vacation",
                "isPaid": True,
                "annualQuota": 28,
                "requiresApproval": True,
                "allowPartialDay": False,
                "allowTimeSelection": False,
                "carryForward": True,
                "maxCarryForwardDays": 7,
                "approvalWorkflow": ["supervisor", "admin"],
                "salaryDeductionMethod": "daily_rate",
                "color": "bg-blue-100 text-blue-800",
                "icon": "Plane",
                "description": "Annual vacation leave",
            },
        ],
        "unpaidLeaveCalculation": {
            "divisorDays": 26,
            "includeAllowances": False,
            "includeOvertime": False,
        },
        "advanceLeaveRequests": True,
        "maxAdvanceRequestDays": 90,
        "blackoutPeriods": [],
    },
    "attendanceSettings": {
        "geofenceRadius": 100,
        "lateThresholdMinutes": 15,
        "gracePeriodMinutes": 5,
        "requirePhotos": True,
        "allowManualOverride": True,
        "multipleCheckInsPerDay": False,
        "autoClockOut": {"enabled": False, "afterHours": 12},
        "breakDeductionRules": {
            "lunch": {"duration": 30, "threshold": 8},
            "dinner": {"duration": 30, "threshold": 10},
            "tea": {"duration": 15, "threshold": 4},
        },
    },
    "features": {
        "supervisorRoster": True,
        "fieldOperations": True,
        "qrKiosk": True,
        "aiAssistant": True,
        "advancedReporting": True,
        "gpsTracking": True,
        "photographicVerification": True,
        "shiftSwapping": True,
        "performanceBonuses": True,
        "mauritiusCompliance": False,
        "customFields": False,
        "bulkOperations": False,
        "apiAccess": False,
        "auditTrail": False,
    },
    "customFields": {"employee": [], "attendance": [], "leave": []},
    "workflows": {
        "leaveApproval": {
            "steps": [{"role": "supervisor", "canSkip": False}],
            "escalation": [{"afterDays": 3, "toRole": "admin"}],
        },
        "overtimeApproval": {
            "required": False,
            "threshold": 10,
            "approver": "supervisor",
        },
        "attendanceCorrection": {
            "allowSelfCorrection": True,
            "requireManagerApproval": True,
            "maxDaysBack": 7,
        },
    },
    "localization": {
        "currency": "MUR",
        "currencySymbol": "Rs",
        "dateFormat": "DD/MM/YYYY",
        "timeFormat": "24h",
        "weekStart": "monday",
        "timezone": "Indian/Mauritius",
        "language": "en",
        "numberFormat": "US",
        "fiscalYearStart": 1,
    },
}

_FALLBACK: dict[str, Any] = {
    "companyName": "Fallback Company",
    "baseSalaryStructure": {
        "defaultMonthlySalary": 17710,
        "workingDaysPerMonth": 26,
        "standardWorkingHours": 8,
        "currency": "MUR",
        "currencySymbol": "Rs",
    },
    "overtimeRules": {
        "ot1_0": {"enabled": True, "rate": 85, "breakDeductions": ["30min lunch"]},
        "ot1_5": {
            "enabled": True,
            "rate": 127,
            "triggerHours": 8,
            "breakDeductions": ["30min lunch"],
        },
        "ot2_0": {
            "enabled": True,
            "rate": 170,
            "triggers": ["weekend", "holiday"],
            "breakDeductions": ["30min lunch"],
        },
        "ot3_0": {
            "enabled": True,
            "rate": 255,
            "triggers": ["extended_weekend"],
            "breakDeductions": ["1h total breaks"],
        },
    },
    "mealAllowance": {"enabled": True, "amount": 150, "minimumHours": 10},
    "workingSchedule": {
        "lunchBreakMinutes": 30,
        "dinnerBreakMinutes": 30,
        "teaBreakMinutes": 15,
    },
    "attendanceSettings": {
        "breakDeductionRules": {
            "lunch": {"duration": 30, "threshold": 8},
            "dinner": {"duration": 30, "threshold": 10},
            "tea": {"duration": 15, "threshold": 4},
        },
    },
    "features": {"mauritiusCompliance": False},
}


def get_baseline_document() -> dict[str, Any]:
    """Return a fresh copy of the baseline configuration sections."""

    return copy.deepcopy(_BASELINE)


def get_fallback_document() -> dict[str, Any]:
    return copy.deepcopy(_FALLBACK)
