from django.conf import settings
from rest_framework import serializers


def _max_length() -> int:
    return getattr(settings, 'TRANSLITERATE_MAX_LENGTH', 100)


class TransliterateSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def validate_text(self, v):
        if len(v) > _max_length():
            raise serializers.ValidationError(f'text must be at most {_max_length()} characters')
        return v


class NameTransliterateSerializer(serializers.Serializer):
    firstName = serializers.CharField(allow_blank=True, required=False, default='')
    middleName = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    surname = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    firstNameMarathi = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    middleNameMarathi = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    surnameMarathi = serializers.CharField(allow_blank=True, allow_null=True, required=False)

    def validate(self, attrs):
        for key in ('firstName', 'middleName', 'surname'):
            if len(attrs.get(key) or '') > _max_length():
                raise serializers.ValidationError({key: f'must be at most {_max_length()} characters'})
        return attrs
