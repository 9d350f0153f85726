from rest_framework import serializers

from core.constants import MESSAGE_MAX_LENGTH
from core.sanitizers import sanitize_text, strip_tags


class OpenChatSerializer(serializers.Serializer):
    """founder_id must match the idea's founder; investor_id defaults to the caller."""
    idea_id = serializers.CharField(max_length=255)
    founder_id = serializers.CharField(max_length=255, required=False)
    investor_id = serializers.CharField(max_length=255, required=False)


class SendMessageSerializer(serializers.Serializer):
    chat_id = serializers.CharField(max_length=512)
    body = serializers.CharField(max_length=MESSAGE_MAX_LENGTH)

    def validate_body(self, value):
        value = sanitize_text(strip_tags(value), max_length=MESSAGE_MAX_LENGTH)
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value
