from rest_framework import serializers

from core.constants import IDEA_CATEGORIES, IDEA_STATUS_CHOICES
from core.sanitizers import sanitize_line, sanitize_text, strip_tags


class DocumentReferenceSerializer(serializers.Serializer):
    filename = serializers.CharField(max_length=255)
    url = serializers.URLField(max_length=2048)


class IdeaCreateSerializer(serializers.Serializer):
    title = serializers.CharField(min_length=5, max_length=200)
    description = serializers.CharField(min_length=20, max_length=2000)
    category = serializers.ChoiceField(choices=IDEA_CATEGORIES)
    funding_goal = serializers.CharField(required=False, allow_blank=True, max_length=100)
    document = DocumentReferenceSerializer(required=False, allow_null=True)

    def validate_title(self, value):
        value = sanitize_line(strip_tags(value), max_length=200)
        if len(value) < 5:
            raise serializers.ValidationError("Ensure this field has at least 5 characters.")
        return value

    def validate_description(self, value):
        value = sanitize_text(strip_tags(value), max_length=2000)
        if len(value) < 20:
            raise serializers.ValidationError("Ensure this field has at least 20 characters.")
        return value

    def validate_funding_goal(self, value):
        return sanitize_line(value, max_length=100)


class IdeaUpdateSerializer(IdeaCreateSerializer):
    status = serializers.ChoiceField(choices=IDEA_STATUS_CHOICES, required=False)

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("partial", True)
        super().__init__(*args, **kwargs)


class ToggleLikeSerializer(serializers.Serializer):
    idea_id = serializers.CharField(max_length=255)
