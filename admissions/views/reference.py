"""
Read-only pick lists for the admission form: ward charges, TPAs and
insurance companies.  The rows are maintained through the Django admin
or the ``seed_reference_data`` command.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from admissions.models import WardCharges, TPA, InsuranceCompany
from admissions.permissions import IsStaffOrAdmin


def serialize_ward_charges(w: WardCharges) -> dict:
    return {
        'id': w.id,
        'wardType': w.ward_type,
        'bedCharges': w.bed_charges,
        'doctorCharges': w.doctor_charges,
        'nursingCharges': w.nursing_charges,
        'asstDoctorCharges': w.asst_doctor_charges,
        'totalPerDay': w.total_per_day,
        'monitorCharges': w.monitor_charges or None,
        'o2Charges': w.o2_charges or None,
        'syringePumpCharges': w.syringe_pump_charges or None,
        'bloodTransfusionCharges': w.blood_transfusion_charges or None,
        'visitingCharges': w.visiting_charges or None,
    }


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def ward_charges(request):
    ward_type = request.query_params.get('wardType')
    qs = WardCharges.objects.order_by('id')
    if ward_type:
        qs = qs.filter(ward_type=ward_type)
    return Response({'ok': True, 'wardCharges': [serialize_ward_charges(w) for w in qs]})


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def tpa_list(request):
    return Response({'ok': True, 'tpaList': [{'id': t.id, 'name': t.name} for t in TPA.objects.all()]})


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffOrAdmin])
def insurance_companies(request):
    data = [{'id': c.id, 'name': c.name} for c in InsuranceCompany.objects.all()]
    return Response({'ok': True, 'insuranceCompanies': data})
