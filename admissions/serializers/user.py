from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from rest_framework import serializers

User = get_user_model()


class UserCreateSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(max_length=150)
    role = serializers.ChoiceField(choices=['admin', 'staff'], default='staff')

    def validate_email(self, v):
        v = v.strip().lower()
        qs = User.objects.filter(email__iexact=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('User already exists')
        return v

    def validate_username(self, v):
        v = (v or '').strip()
        if v:
            qs = User.objects.filter(username=v)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError('Username already taken')
        return v

    def validate_password(self, v):
        try:
            validate_password(v)
        except ValidationError as e:
            raise serializers.ValidationError(e.messages)
        return v


class UserUpdateSerializer(UserCreateSerializer):
    """Same fields as creation; every field optional (partial update)."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('partial', True)
        super().__init__(*args, **kwargs)
