import html

import bleach
from rest_framework import serializers

from admissions.models import Patient, WARD_CHOICES

WARD_TYPES = [w for w, _ in WARD_CHOICES]

# camelCase request key -> model attribute
FIELD_MAP = {
    'ipdNo': 'ipd_no',
    'uhidNo': 'uhid_no',
    'firstName': 'first_name',
    'middleName': 'middle_name',
    'surname': 'surname',
    'firstNameMarathi': 'first_name_marathi',
    'middleNameMarathi': 'middle_name_marathi',
    'surnameMarathi': 'surname_marathi',
    'nearestRelativeName': 'nearest_relative_name',
    'relationToPatient': 'relation_to_patient',
    'address': 'address',
    'phoneNo': 'phone_no',
    'age': 'age',
    'sex': 'sex',
    'ward': 'ward',
    'cashless': 'cashless',
    'tpa': 'tpa',
    'insuranceCompany': 'insurance_company',
    'other': 'other',
    'admittedByDoctor': 'admitted_by_doctor',
    'treatingDoctor': 'treating_doctor',
    'dateOfAdmission': 'date_of_admission',
    'timeOfAdmission': 'time_of_admission',
    'dateOfDischarge': 'date_of_discharge',
    'timeOfDischarge': 'time_of_discharge',
}


def clean_text(v):
    # markup is stripped; the stored value is plain text, not HTML
    return html.unescape(bleach.clean((v or '').strip(), strip=True)).strip()


def _optional_text(max_length):
    return serializers.CharField(max_length=max_length, required=False, allow_blank=True, allow_null=True)


class PatientWriteSerializer(serializers.Serializer):
    """Validates the admission form.

    Pass ``instance`` for updates; with ``partial=True`` the cross-field
    checks fall back to the stored values of fields that were not sent.
    """
    ipdNo = serializers.CharField(max_length=50)
    uhidNo = _optional_text(50)
    firstName = serializers.CharField(max_length=100)
    middleName = _optional_text(100)
    surname = serializers.CharField(max_length=100)
    firstNameMarathi = _optional_text(200)
    middleNameMarathi = _optional_text(200)
    surnameMarathi = _optional_text(200)
    nearestRelativeName = serializers.CharField(max_length=200)
    relationToPatient = serializers.CharField(max_length=100)
    address = serializers.CharField()
    phoneNo = serializers.CharField(min_length=10, max_length=20)
    age = serializers.IntegerField(min_value=0, max_value=150)
    sex = serializers.ChoiceField(choices=['M', 'F'])
    ward = serializers.ChoiceField(choices=WARD_TYPES)
    cashless = serializers.BooleanField(required=False, default=False)
    tpa = _optional_text(200)
    insuranceCompany = _optional_text(200)
    other = _optional_text(255)
    admittedByDoctor = serializers.CharField(max_length=200)
    treatingDoctor = _optional_text(200)
    dateOfAdmission = serializers.DateField()
    timeOfAdmission = serializers.CharField(max_length=20)
    dateOfDischarge = serializers.DateField(required=False, allow_null=True)
    timeOfDischarge = _optional_text(20)

    def validate_ipdNo(self, v):
        v = clean_text(v)
        qs = Patient.objects.filter(ipd_no=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('IPD number already exists')
        return v

    def validate_phoneNo(self, v):
        v = clean_text(v)
        if len(v) < 10:
            raise serializers.ValidationError('Phone number must be at least 10 digits')
        return v

    def _current(self, attrs, key):
        if key in attrs:
            return attrs[key]
        if self.instance is not None:
            return getattr(self.instance, FIELD_MAP[key])
        return None

    def validate(self, attrs):
        for key, value in list(attrs.items()):
            if isinstance(value, str):
                attrs[key] = clean_text(value)
            elif value is None and key not in ('dateOfDischarge',):
                attrs[key] = ''
        errors = {}
        if self._current(attrs, 'cashless'):
            if not self._current(attrs, 'tpa'):
                errors['tpa'] = 'TPA is required when Cashless is selected'
            if not self._current(attrs, 'insuranceCompany'):
                errors['insuranceCompany'] = 'Insurance Company is required when Cashless is selected'
        admitted = self._current(attrs, 'dateOfAdmission')
        discharged = self._current(attrs, 'dateOfDischarge')
        if admitted and discharged and discharged < admitted:
            errors['dateOfDischarge'] = 'Discharge date cannot be before admission date'
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def to_model_fields(self) -> dict:
        return {FIELD_MAP[k]: v for k, v in self.validated_data.items() if k in FIELD_MAP}


class PatientListQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=200, default=10)
