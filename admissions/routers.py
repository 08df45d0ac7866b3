"""
URL mappings for the admission intake API.

Trailing slashes are deliberately omitted to match the front-end client.
"""
from django.urls import path, include

from .auth_views import login_view, me_view, jwt_refresh_view, jwt_logout_view
from .views import health
from .views.patients import patients, patient_detail
from .views.reference import ward_charges, tpa_list, insurance_companies
from .views.transliteration import transliterate_text, transliterate_names
from .views.users import users, user_detail


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('api/auth/login', login_view, name='login_view'),
    path('api/auth/me', me_view, name='me_view'),
    path('api/auth/refresh', jwt_refresh_view, name='jwt_refresh_view'),
    path('api/auth/logout', jwt_logout_view, name='jwt_logout_view'),
    # Transliteration
    path('api/transliterate', transliterate_text, name='transliterate_text'),
    path('api/transliterate/names', transliterate_names, name='transliterate_names'),
    # Patients
    path('api/patients', patients, name='patients'),
    path('api/patients/<int:pk>', patient_detail, name='patient_detail'),
    # Users
    path('api/users', users, name='users'),
    path('api/users/<int:pk>', user_detail, name='user_detail'),
    # Reference lists
    path('api/ward-charges', ward_charges, name='ward_charges'),
    path('api/tpa', tpa_list, name='tpa_list'),
    path('api/insurance-companies', insurance_companies, name='insurance_companies'),
]
