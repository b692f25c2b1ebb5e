from rest_framework import serializers
from grievances.models import Submission


class SubmissionSerializer(serializers.ModelSerializer):
    """Serializer for Submission model. Keys match the table columns."""

    class Meta:
        model = Submission
        fields = [
            "id",
            "type",
            "name",
            "phone",
            "email",
            "department",
            "category",
            "taluk",
            "firka",
            "village",
            "description",
            "urgency",
            "status",
            "photos",
            "history",
            "timestamp",
            "last_updated",
            "resolved_at",
        ]
        read_only_fields = fields


class SubmissionCreateSerializer(serializers.Serializer):
    """
    Shape of a filing request.

    Only checks types; required fields and allowed values are enforced by the
    service and the store so every caller gets the same rules.
    """

    id = serializers.CharField(required=False, allow_blank=True)
    type = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    department = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    taluk = serializers.CharField(required=False, allow_blank=True)
    firka = serializers.CharField(required=False, allow_blank=True)
    village = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    urgency = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    photos = serializers.ListField(
        child=serializers.JSONField(), required=False, allow_null=True, allow_empty=True
    )

    def validate(self, attrs):
        # Optional descriptive fields are stored as NULL rather than "".
        for field in ("email", "department", "category"):
            if field in attrs and not attrs[field]:
                attrs[field] = None
        return attrs


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True)
    response = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class DcdmLoginSerializer(serializers.Serializer):
    pin = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OfficialLoginSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    password = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
