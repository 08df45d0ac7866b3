"""
User management endpoints (admin only).

Passwords are write-only and never appear in any response.
"""
from __future__ import annotations

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from admissions.exceptions import InvalidRequest
from admissions.models import User
from admissions.permissions import IsAdminRole
from admissions.serializers.user import UserCreateSerializer, UserUpdateSerializer
from admissions.services.audit import log_action
from admissions.services.users import serialize_user, create_user, update_user


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def users(request):
    if request.method == 'GET':
        return Response({'ok': True, 'users': [serialize_user(u) for u in User.objects.order_by('id')]})

    s = UserCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = create_user(**s.validated_data)
    log_action(user=request.user, action='user_create', object_type='user', object_id=user.id,
               detail={'role': user.role})
    return Response({'ok': True, 'user': serialize_user(user)}, status=status.HTTP_201_CREATED)


@api_view(['PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_detail(request, pk: int):
    user = get_object_or_404(User, pk=pk)
    if request.method == 'DELETE':
        if user.pk == request.user.pk:
            raise InvalidRequest('You cannot delete your own account')
        user.delete()
        log_action(user=request.user, action='user_delete', object_type='user', object_id=pk)
        return Response({'ok': True, 'message': 'User deleted successfully'})

    s = UserUpdateSerializer(user, data=request.data)
    s.is_valid(raise_exception=True)
    user = update_user(user, s.validated_data)
    log_action(user=request.user, action='user_update', object_type='user', object_id=user.id,
               detail={'fields': sorted(k for k in s.validated_data if k != 'password')})
    return Response({'ok': True, 'user': serialize_user(user)})
