"""
Django admin registrations for the intake models.

Ward charges, TPAs and insurance companies have no write API; the admin
site is where they are maintained.
"""

from django.contrib import admin

from .models import User, Patient, WardCharges, TPA, InsuranceCompany, AuditEvent


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'email', 'role', 'is_active', 'is_superuser')
    list_filter = ('role', 'is_active')
    search_fields = ('username', 'email', 'first_name', 'last_name')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('ipd_no', 'first_name', 'surname', 'surname_marathi', 'ward', 'date_of_admission', 'date_of_discharge')
    list_filter = ('ward', 'sex', 'cashless')
    search_fields = ('ipd_no', 'uhid_no', 'first_name', 'surname', 'first_name_marathi', 'surname_marathi', 'phone_no')
    date_hierarchy = 'date_of_admission'


@admin.register(WardCharges)
class WardChargesAdmin(admin.ModelAdmin):
    list_display = ('ward_type', 'bed_charges', 'doctor_charges', 'nursing_charges', 'total_per_day')


@admin.register(TPA)
class TPAAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)


@admin.register(InsuranceCompany)
class InsuranceCompanyAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')
    search_fields = ('name',)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('action', 'user__username')
