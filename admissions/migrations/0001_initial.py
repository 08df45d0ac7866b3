import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


WARD_CHOICES = [
    ('GENERAL', 'G.W.'),
    ('SEMI', 'Semi'),
    ('SPECIAL_WITHOUT_AC', 'Special without AC'),
    ('SPECIAL_WITH_AC_DELUXE', 'Special with AC (Deluxe)'),
    ('ICU', 'ICU'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('username', models.CharField(error_messages={'unique': 'A user with that username already exists.'}, help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.', max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='username')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email address')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('role', models.CharField(choices=[('admin', 'Administrator'), ('staff', 'Staff')], default='staff', max_length=10)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': 'user',
                'verbose_name_plural': 'users',
                'abstract': False,
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='InsuranceCompany',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name_plural': 'insurance companies',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='TPA',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'TPA',
                'verbose_name_plural': 'TPAs',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='WardCharges',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('ward_type', models.CharField(choices=WARD_CHOICES, max_length=32, unique=True)),
                ('bed_charges', models.CharField(max_length=50)),
                ('doctor_charges', models.CharField(max_length=50)),
                ('nursing_charges', models.CharField(max_length=50)),
                ('asst_doctor_charges', models.CharField(max_length=50)),
                ('total_per_day', models.CharField(max_length=50)),
                ('monitor_charges', models.CharField(blank=True, default='', max_length=50)),
                ('o2_charges', models.CharField(blank=True, default='', max_length=50)),
                ('syringe_pump_charges', models.CharField(blank=True, default='', max_length=50)),
                ('blood_transfusion_charges', models.CharField(blank=True, default='', max_length=50)),
                ('visiting_charges', models.CharField(blank=True, default='', max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('ipd_no', models.CharField(max_length=50, unique=True)),
                ('uhid_no', models.CharField(blank=True, default='', max_length=50)),
                ('first_name', models.CharField(max_length=100)),
                ('middle_name', models.CharField(blank=True, default='', max_length=100)),
                ('surname', models.CharField(max_length=100)),
                ('first_name_marathi', models.CharField(blank=True, default='', max_length=200)),
                ('middle_name_marathi', models.CharField(blank=True, default='', max_length=200)),
                ('surname_marathi', models.CharField(blank=True, default='', max_length=200)),
                ('nearest_relative_name', models.CharField(max_length=200)),
                ('relation_to_patient', models.CharField(max_length=100)),
                ('address', models.TextField()),
                ('phone_no', models.CharField(db_index=True, max_length=20)),
                ('age', models.PositiveSmallIntegerField()),
                ('sex', models.CharField(choices=[('M', 'Male'), ('F', 'Female')], max_length=1)),
                ('ward', models.CharField(choices=WARD_CHOICES, db_index=True, max_length=32)),
                ('cashless', models.BooleanField(default=False)),
                ('tpa', models.CharField(blank=True, default='', max_length=200)),
                ('insurance_company', models.CharField(blank=True, default='', max_length=200)),
                ('other', models.CharField(blank=True, default='', max_length=255)),
                ('admitted_by_doctor', models.CharField(max_length=200)),
                ('treating_doctor', models.CharField(blank=True, default='', max_length=200)),
                ('date_of_admission', models.DateField(db_index=True)),
                ('time_of_admission', models.CharField(max_length=20)),
                ('date_of_discharge', models.DateField(blank=True, null=True)),
                ('time_of_discharge', models.CharField(blank=True, default='', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='patients_created', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='AuditEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(max_length=64)),
                ('object_type', models.CharField(blank=True, max_length=64, null=True)),
                ('object_id', models.IntegerField(blank=True, null=True)),
                ('detail', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [
                    models.Index(fields=['action', 'created_at'], name='admissions__action_5e1c0b_idx'),
                    models.Index(fields=['object_type', 'object_id', 'created_at'], name='admissions__object__9a7d2f_idx'),
                ],
            },
        ),
    ]
