from rest_framework import serializers

CLOCK_TIME_REGEX = r"^([01]?\d|2[0-3]):[0-5]\d$"


class CompanyScopedSerializer(serializers.Serializer):
    org_id = serializers.IntegerField(required=False, min_value=1)


class ShiftPayRequestSerializer(CompanyScopedSerializer):
    work_date = serializers.DateField()
    time_in = serializers.RegexField(CLOCK_TIME_REGEX)
    time_out = serializers.RegexField(CLOCK_TIME_REGEX)
    monthly_salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, min_value=0
    )
    holidays = serializers.ListField(
        child=serializers.DateField(), required=False, default=list
    )
    part_time_weekday_off = serializers.BooleanField(required=False, default=False)


class LeaveDeductionRequestSerializer(CompanyScopedSerializer):
    total_days = serializers.DecimalField(
        max_digits=6, decimal_places=2, required=False, min_value=0
    )
    total_hours = serializers.DecimalField(
        max_digits=6, decimal_places=2, required=False, min_value=0
    )
    monthly_salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, min_value=0
    )

    def validate(self, attrs):
        if attrs.get("total_days") is None and attrs.get("total_hours") is None:
            msg = "Provide total_days or total_hours."
            raise serializers.ValidationError(msg)
        return attrs


class ContributionsRequestSerializer(CompanyScopedSerializer):
    gross_salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0
    )
