"""
Seed the ward-charge, TPA and insurance-company pick lists.

Safe to run repeatedly: existing rows are updated in place, nothing is
deleted.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from admissions.models import InsuranceCompany, TPA, WardCharges

WARD_CHARGES = [
    # ward_type, bed, doctor, nursing, asst doctor, total per day
    ('GENERAL', '1000', '400', '300', '200', '1700'),
    ('SEMI', '1400', '500', '300', '300', '2500'),
    ('SPECIAL_WITHOUT_AC', '2200', '600', '400', '300', '3500'),
    ('SPECIAL_WITH_AC_DELUXE', '2600', '600', '500', '300', '4000'),
    ('ICU', '2000', '700', '600', '400', '3700'),
]

TPA_NAMES = [
    'Medi Assist',
    'Paramount Health Services',
    'MDIndia Health Insurance TPA',
    'Vidal Health TPA',
    'Family Health Plan TPA',
]

INSURANCE_NAMES = [
    'Star Health and Allied Insurance',
    'HDFC ERGO General Insurance',
    'ICICI Lombard General Insurance',
    'The New India Assurance',
    'United India Insurance',
]


class Command(BaseCommand):
    help = "Create or refresh ward charges, TPA and insurance company lists (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--skip-lists', action='store_true',
                            help='Only seed ward charges, leave TPA/insurance lists alone.')

    @transaction.atomic
    def handle(self, *args, **opts):
        for ward_type, bed, doctor, nursing, asst, total in WARD_CHARGES:
            _, created = WardCharges.objects.update_or_create(
                ward_type=ward_type,
                defaults={
                    'bed_charges': bed,
                    'doctor_charges': doctor,
                    'nursing_charges': nursing,
                    'asst_doctor_charges': asst,
                    'total_per_day': total,
                },
            )
            self.stdout.write(f"{'created' if created else 'updated'}: {ward_type}")

        if not opts['skip_lists']:
            added = 0
            for name in TPA_NAMES:
                added += int(TPA.objects.get_or_create(name=name)[1])
            self.stdout.write(f"TPA: {added} added")
            added = 0
            for name in INSURANCE_NAMES:
                added += int(InsuranceCompany.objects.get_or_create(name=name)[1])
            self.stdout.write(f"insurance companies: {added} added")

        self.stdout.write(self.style.SUCCESS("Reference data ensured."))
