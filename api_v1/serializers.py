from rest_framework import serializers


class ExportSerializer(serializers.BaseSerializer):
    """
    Serializes an entity as the fields it declares exportable.
    """

    def to_representation(self, instance):
        return instance.export()


class MembersQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, default=10, min_value=0, max_value=100)
    offset = serializers.IntegerField(required=False, default=0, min_value=0)
    count = serializers.BooleanField(required=False, default=False)
