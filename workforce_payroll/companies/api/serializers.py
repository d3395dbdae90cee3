from rest_framework import serializers


class IndustryTemplateSummarySerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    industry = serializers.CharField()
    description = serializers.CharField()
    features = serializers.ListField(child=serializers.CharField())
    benefits = serializers.ListField(child=serializers.CharField())


class IndustryTemplateSerializer(IndustryTemplateSummarySerializer):
    configuration = serializers.JSONField()


class ApplyTemplateSerializer(serializers.Serializer):
    template_id = serializers.CharField()
    company_name = serializers.CharField(required=False, allow_blank=False)
    employee_count = serializers.IntegerField(required=False, min_value=0)
