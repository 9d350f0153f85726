from rest_framework import serializers

from core.sanitizers import sanitize_line, sanitize_text, strip_tags


class UpdateProfileSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, min_length=2, max_length=120)
    company = serializers.CharField(required=False, allow_blank=True, max_length=200)
    bio = serializers.CharField(required=False, allow_blank=True, max_length=2000)

    def validate_name(self, value):
        return sanitize_line(strip_tags(value), max_length=120)

    def validate_company(self, value):
        return sanitize_line(strip_tags(value), max_length=200) or None

    def validate_bio(self, value):
        return sanitize_text(strip_tags(value), max_length=2000) or None
