"""
Admission record endpoints.

Both intake roles may list, register, edit and delete admissions.  On
create and update the Marathi name fields that arrive blank are filled
from the Latin-script name parts; values typed by the clerk are stored
as sent.
"""
from __future__ import annotations

import math

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from admissions.models import Patient
from admissions.permissions import IsStaffOrAdmin
from admissions.serializers.patient import PatientWriteSerializer, PatientListQuerySerializer
from admissions.services.audit import log_action
from admissions.services.patients import serialize_patient, search_patients, create_patient, update_patient


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def patients(request):
    if request.method == 'GET':
        q = PatientListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        page = q.validated_data['page']
        limit = q.validated_data['limit']
        rows, total = search_patients(search=(q.validated_data.get('search') or '').strip() or None,
                                      page=page, limit=limit)
        return Response({
            'ok': True,
            'patients': [serialize_patient(p) for p in rows],
            'pagination': {
                'total': total,
                'page': page,
                'limit': limit,
                'totalPages': math.ceil(total / limit) if total else 0,
            },
        })

    s = PatientWriteSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    patient = create_patient(request.user, s.to_model_fields())
    log_action(user=request.user, action='patient_create', object_type='patient', object_id=patient.id,
               detail={'ipdNo': patient.ipd_no})
    return Response({'ok': True, 'patient': serialize_patient(patient)}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def patient_detail(request, pk: int):
    patient = get_object_or_404(Patient, pk=pk)
    if request.method == 'GET':
        return Response({'ok': True, 'patient': serialize_patient(patient)})

    if request.method == 'DELETE':
        ipd_no = patient.ipd_no
        patient.delete()
        log_action(user=request.user, action='patient_delete', object_type='patient', object_id=pk,
                   detail={'ipdNo': ipd_no})
        return Response({'ok': True, 'message': 'Patient deleted successfully'})

    s = PatientWriteSerializer(patient, data=request.data, partial=(request.method == 'PATCH'))
    s.is_valid(raise_exception=True)
    fields = s.to_model_fields()
    patient = update_patient(patient, fields)
    log_action(user=request.user, action='patient_update', object_type='patient', object_id=patient.id,
               detail={'fields': sorted(fields)})
    return Response({'ok': True, 'patient': serialize_patient(patient)})
