from rest_framework import serializers

from workforce_payroll.leaves.models import PublicHoliday


class PublicHolidaySerializer(serializers.ModelSerializer):
    class Meta:
        model = PublicHoliday
        fields = ["id", "name", "start_date", "end_date", "year"]
        read_only_fields = ["year"]

    def validate(self, attrs):
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and end < start:
            raise serializers.ValidationError(
                {"end_date": "End date cannot be before start date."}
            )
        if start:
            attrs["year"] = start.year
        return attrs


class HolidayCalendarEntrySerializer(serializers.Serializer):
    date = serializers.DateField()
    name = serializers.CharField()
