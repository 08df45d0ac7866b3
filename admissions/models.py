"""
Database models for the admission intake backend.

The admission record mirrors the bilingual registration-cum-admission
form: the Latin-script name parts are entered by the clerk and each has
a Marathi companion field that is filled automatically unless a value
was typed by hand.  Ward charges, TPAs and insurance companies are small
reference tables used to populate the form's pick lists.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Custom user model with an application role.

    ``admin`` users manage accounts as well as patients; ``staff`` users
    only work with admission records.  E-mail addresses are unique among
    accounts that have one; the user serializer enforces it.
    """
    ROLE_ADMIN = 'admin'
    ROLE_STAFF = 'staff'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Administrator'),
        (ROLE_STAFF, 'Staff'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_STAFF)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


WARD_CHOICES = [
    ('GENERAL', 'G.W.'),
    ('SEMI', 'Semi'),
    ('SPECIAL_WITHOUT_AC', 'Special without AC'),
    ('SPECIAL_WITH_AC_DELUXE', 'Special with AC (Deluxe)'),
    ('ICU', 'ICU'),
]


class Patient(models.Model):
    """One admission record as captured on the intake form."""
    SEX_CHOICES = [
        ('M', 'Male'),
        ('F', 'Female'),
    ]
    ipd_no = models.CharField(max_length=50, unique=True)
    uhid_no = models.CharField(max_length=50, blank=True, default='')

    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True, default='')
    surname = models.CharField(max_length=100)
    # Marathi companions of the name parts; only blank fields are auto-filled
    first_name_marathi = models.CharField(max_length=200, blank=True, default='')
    middle_name_marathi = models.CharField(max_length=200, blank=True, default='')
    surname_marathi = models.CharField(max_length=200, blank=True, default='')

    nearest_relative_name = models.CharField(max_length=200)
    relation_to_patient = models.CharField(max_length=100)
    address = models.TextField()
    phone_no = models.CharField(max_length=20, db_index=True)
    age = models.PositiveSmallIntegerField()
    sex = models.CharField(max_length=1, choices=SEX_CHOICES)

    ward = models.CharField(max_length=32, choices=WARD_CHOICES, db_index=True)
    cashless = models.BooleanField(default=False)
    tpa = models.CharField(max_length=200, blank=True, default='')
    insurance_company = models.CharField(max_length=200, blank=True, default='')
    other = models.CharField(max_length=255, blank=True, default='')

    admitted_by_doctor = models.CharField(max_length=200)
    treating_doctor = models.CharField(max_length=200, blank=True, default='')
    date_of_admission = models.DateField(db_index=True)
    time_of_admission = models.CharField(max_length=20)
    date_of_discharge = models.DateField(null=True, blank=True)
    time_of_discharge = models.CharField(max_length=20, blank=True, default='')

    created_by = models.ForeignKey(
        User, null=True, blank=True, on_delete=models.SET_NULL, related_name='patients_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return f"{self.full_name} ({self.ipd_no})"

    @property
    def full_name(self) -> str:
        return ' '.join(p for p in (self.first_name, self.middle_name, self.surname) if p)

    @property
    def full_name_marathi(self) -> str:
        parts = (self.first_name_marathi, self.middle_name_marathi, self.surname_marathi)
        return ' '.join(p for p in parts if p)


class WardCharges(models.Model):
    """Per-day charges of one ward type.

    Values are kept as text because the printed form mixes amounts with
    notes such as "As per actual".
    """
    ward_type = models.CharField(max_length=32, choices=WARD_CHOICES, unique=True)
    bed_charges = models.CharField(max_length=50)
    doctor_charges = models.CharField(max_length=50)
    nursing_charges = models.CharField(max_length=50)
    asst_doctor_charges = models.CharField(max_length=50)
    total_per_day = models.CharField(max_length=50)
    monitor_charges = models.CharField(max_length=50, blank=True, default='')
    o2_charges = models.CharField(max_length=50, blank=True, default='')
    syringe_pump_charges = models.CharField(max_length=50, blank=True, default='')
    blood_transfusion_charges = models.CharField(max_length=50, blank=True, default='')
    visiting_charges = models.CharField(max_length=50, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.ward_type}: {self.total_per_day}/day"


class TPA(models.Model):
    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'TPA'
        verbose_name_plural = 'TPAs'

    def __str__(self) -> str:
        return self.name


class InsuranceCompany(models.Model):
    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'insurance companies'

    def __str__(self) -> str:
        return self.name


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.IntegerField(blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='admissions__action_5e1c0b_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='admissions__object__9a7d2f_idx'),
        ]

    def __str__(self):
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
