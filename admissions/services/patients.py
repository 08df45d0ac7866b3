import logging
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import Q
from rest_framework.exceptions import ValidationError

from admissions.models import Patient
from admissions.services.names import fill_marathi_names

logger = logging.getLogger(__name__)


def serialize_patient(p: Patient) -> dict:
    return {
        'id': p.id,
        'ipdNo': p.ipd_no,
        'uhidNo': p.uhid_no,
        'firstName': p.first_name,
        'middleName': p.middle_name,
        'surname': p.surname,
        'firstNameMarathi': p.first_name_marathi,
        'middleNameMarathi': p.middle_name_marathi,
        'surnameMarathi': p.surname_marathi,
        'fullName': p.full_name,
        'fullNameMarathi': p.full_name_marathi,
        'nearestRelativeName': p.nearest_relative_name,
        'relationToPatient': p.relation_to_patient,
        'address': p.address,
        'phoneNo': p.phone_no,
        'age': p.age,
        'sex': p.sex,
        'ward': p.ward,
        'cashless': p.cashless,
        'tpa': p.tpa,
        'insuranceCompany': p.insurance_company,
        'other': p.other,
        'admittedByDoctor': p.admitted_by_doctor,
        'treatingDoctor': p.treating_doctor,
        'dateOfAdmission': p.date_of_admission.isoformat() if p.date_of_admission else None,
        'timeOfAdmission': p.time_of_admission,
        'dateOfDischarge': p.date_of_discharge.isoformat() if p.date_of_discharge else None,
        'timeOfDischarge': p.time_of_discharge,
        'createdBy': p.created_by_id,
        'createdAt': p.created_at.isoformat() if p.created_at else None,
        'updatedAt': p.updated_at.isoformat() if p.updated_at else None,
    }


def search_patients(*, search: Optional[str]=None, page: int=1, limit: int=10) -> tuple[list[Patient], int]:
    qs = Patient.objects.all()
    if search:
        qs = qs.filter(
            Q(first_name__icontains=search)
            | Q(middle_name__icontains=search)
            | Q(surname__icontains=search)
            | Q(first_name_marathi__icontains=search)
            | Q(middle_name_marathi__icontains=search)
            | Q(surname_marathi__icontains=search)
            | Q(ipd_no__icontains=search)
            | Q(phone_no__icontains=search)
        )
    total = qs.count()
    start = (page - 1) * limit
    return list(qs[start:start + limit]), total


def _save(patient: Patient) -> None:
    # the serializer's ipdNo check can race with a concurrent admission
    try:
        with transaction.atomic():
            patient.save()
    except IntegrityError:
        if Patient.objects.filter(ipd_no=patient.ipd_no).exclude(pk=patient.pk).exists():
            raise ValidationError({'ipdNo': ['IPD number already exists']})
        raise


def create_patient(current_user, fields: dict) -> Patient:
    patient = Patient(**fields)
    patient.created_by = current_user if getattr(current_user, 'pk', None) else None
    filled = fill_marathi_names(patient)
    if filled:
        logger.debug('derived %s for new admission %s', ', '.join(filled), patient.ipd_no)
    _save(patient)
    return patient


@transaction.atomic
def update_patient(patient: Patient, fields: dict) -> Patient:
    """Apply validated fields and fill whichever Marathi names are blank.

    Stored Marathi values are never replaced automatically; a client that
    wants a fresh rendering after editing a Latin name sends the Marathi
    field back empty.
    """
    for attr, value in fields.items():
        setattr(patient, attr, value)
    fill_marathi_names(patient)
    _save(patient)
    return patient
