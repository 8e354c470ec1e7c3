from rest_framework import serializers

from propertyhub.models import Notification, NotificationType, User


class NotificationSerializer(serializers.ModelSerializer):
    is_read = serializers.IntegerField(read_only=True)
    type = serializers.ChoiceField(choices=NotificationType.choices())

    class Meta:
        model = Notification
        fields = [
            "notification_id",
            "user",
            "title",
            "message",
            "type",
            "related_type",
            "related_id",
            "is_read",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Public view of an account, embedded in listings and appeals."""

    class Meta:
        model = User
        fields = ["user_id", "full_name", "email", "role", "organization", "phone"]
        read_only_fields = fields
