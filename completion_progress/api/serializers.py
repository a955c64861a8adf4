from rest_framework import serializers


class ActivityProgressSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="activity.id")
    type = serializers.CharField(source="activity.type")
    name = serializers.CharField(source="activity.name")
    expected = serializers.DateTimeField(source="activity.expected", allow_null=True)
    status = serializers.CharField()
    label = serializers.CharField()
    colour = serializers.CharField()


class UserProgressSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    percentage = serializers.IntegerField()
    activities = ActivityProgressSerializer(source="entries", many=True)
