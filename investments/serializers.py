from rest_framework import serializers

from core.constants import INTEREST_STATUS_CHOICES
from core.sanitizers import sanitize_line, strip_tags


class ExpressInterestSerializer(serializers.Serializer):
    idea_id = serializers.CharField(max_length=255)
    amount = serializers.CharField(max_length=100)

    def validate_amount(self, value):
        value = sanitize_line(strip_tags(value), max_length=100)
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value


class LikeBackSerializer(serializers.Serializer):
    investor_id = serializers.CharField(max_length=255)
    idea_id = serializers.CharField(max_length=255)


class InvestmentUpdateSerializer(serializers.Serializer):
    amount = serializers.CharField(max_length=100, required=False)
    status = serializers.ChoiceField(choices=INTEREST_STATUS_CHOICES, required=False)

    def validate_amount(self, value):
        return sanitize_line(strip_tags(value), max_length=100)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide an amount or a status.")
        return attrs
