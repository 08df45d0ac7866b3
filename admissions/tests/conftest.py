import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from admissions.models import User


@pytest.fixture(autouse=True)
def _clear_cache():
    # throttle counters and remote transliteration results live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(username='staff1', email='staff@hospital.com',
                                    password='Intake#2024', role='staff')


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(username='admin1', email='admin@hospital.com',
                                    password='Intake#2024', role='admin')


def _client_for(user):
    client = APIClient()
    r = client.post('/api/auth/login', {'username': user.username, 'password': 'Intake#2024'}, format='json')
    assert r.status_code == 200, r.data
    client.credentials(HTTP_AUTHORIZATION=f"Token {r.data['token']}")
    return client


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)
