"""Serializers for rendering domain snapshots to primitives.

Read-only: presentation collaborators use these to turn Event, Attendee,
EventDraft and RSVPSummary values into plain dicts. Mutations go through the
services, never through a serializer.
"""

from rest_framework import serializers


class GeoPointSerializer(serializers.Serializer):
    """Serializer for GeoPoint value object."""

    lat = serializers.FloatField()
    lng = serializers.FloatField()


class LocationSerializer(serializers.Serializer):
    """Serializer for Location value object."""

    name = serializers.CharField()
    address = serializers.CharField()
    coordinates = GeoPointSerializer(allow_null=True)


class AttendeeSerializer(serializers.Serializer):
    """Serializer for Attendee domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    status = serializers.CharField(source="status.value")
    notes = serializers.CharField(allow_null=True)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(allow_null=True)
    location = LocationSerializer()
    image_url = serializers.CharField(allow_null=True)
    organizer = serializers.CharField()
    is_public = serializers.BooleanField()
    attendees = AttendeeSerializer(many=True)
    created_at = serializers.DateTimeField()


class InviteeEntrySerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()


class EventDraftSerializer(serializers.Serializer):
    """Serializer for the wizard's EventDraft."""

    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = LocationSerializer()
    image_url = serializers.CharField(allow_null=True)
    organizer = serializers.CharField()
    is_public = serializers.BooleanField()
    attendees = AttendeeSerializer(many=True)
    invitee = InviteeEntrySerializer()


class RSVPSummarySerializer(serializers.Serializer):
    """Serializer for RSVPSummary, keyed by status value."""

    total = serializers.IntegerField()
    responded = serializers.IntegerField()
    counts = serializers.SerializerMethodField()
    percentages = serializers.SerializerMethodField()

    def get_counts(self, summary) -> dict[str, int]:
        return {status.value: count for status, count in summary.counts.items()}

    def get_percentages(self, summary) -> dict[str, float]:
        return {status.value: value for status, value in summary.percentages.items()}
