from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from core.constants import ROLE_CHOICES
from core.sanitizers import sanitize_line, sanitize_text, strip_tags


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=120)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, trim_whitespace=False)
    role = serializers.ChoiceField(choices=ROLE_CHOICES)
    company = serializers.CharField(required=False, allow_blank=True, max_length=200)
    bio = serializers.CharField(required=False, allow_blank=True, max_length=2000)

    def validate_password(self, value):
        try:
            validate_password(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return value

    def validate_name(self, value):
        return sanitize_line(strip_tags(value), max_length=120)

    def validate_company(self, value):
        return sanitize_line(strip_tags(value), max_length=200)

    def validate_bio(self, value):
        return sanitize_text(strip_tags(value), max_length=2000)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, trim_whitespace=False)
