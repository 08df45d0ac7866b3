import pytest
from django.core.management import call_command
from django.urls import reverse
from rest_framework.test import APIClient

from admissions.models import User

pytestmark = pytest.mark.django_db


def test_login_with_email_returns_both_tokens(staff_user):
    client = APIClient()
    r = client.post(reverse('login_view'), {'email': 'STAFF@hospital.com', 'password': 'Intake#2024'}, format='json')
    assert r.status_code == 200
    assert r.data['token'] and r.data['jwt_access'] and r.data['jwt_refresh']
    assert r.data['role'] == 'staff'
    assert 'password' not in r.data['user']


def test_login_rejects_bad_password(staff_user):
    r = APIClient().post(reverse('login_view'), {'username': 'staff1', 'password': 'nope'}, format='json')
    assert r.status_code == 400
    assert r.data == {'ok': False, 'error': {'code': 'invalid_credentials', 'message': 'Invalid credentials'}}


def test_no_role_bypass_in_login(staff_user):
    client = APIClient()
    r = client.post(reverse('login_view'), {'username': 'staff1', 'password': 'Intake#2024', 'role': 'admin'}, format='json')
    assert r.status_code == 200
    staff_user.refresh_from_db()
    assert staff_user.role == 'staff'


def test_jwt_access_is_accepted(staff_user):
    client = APIClient()
    r = client.post(reverse('login_view'), {'username': 'staff1', 'password': 'Intake#2024'}, format='json')
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['jwt_access']}")
    me = client.get(reverse('me_view'))
    assert me.status_code == 200
    assert me.data['user']['username'] == 'staff1'


def test_logout_drops_token(staff_client):
    r = staff_client.post(reverse('jwt_logout_view'), {}, format='json')
    assert r.status_code == 200
    assert staff_client.get(reverse('me_view')).status_code in (401, 403)


def test_staff_cannot_manage_users(staff_client):
    assert staff_client.get(reverse('users')).status_code == 403
    r = staff_client.post(reverse('users'), {'email': 'x@hospital.com', 'password': 'Intake#2024', 'name': 'X'}, format='json')
    assert r.status_code == 403


def test_admin_user_crud(admin_client, admin_user):
    r = admin_client.post(reverse('users'), {
        'email': 'Nurse.One@Hospital.com', 'password': 'Ward#Night9', 'name': 'Asha Deshmukh',
    }, format='json')
    assert r.status_code == 201, r.data
    created = r.data['user']
    assert created['role'] == 'staff'
    assert created['email'] == 'nurse.one@hospital.com'
    assert created['username'] == 'nurseone'
    assert created['name'] == 'Asha Deshmukh'

    dup = admin_client.post(reverse('users'), {
        'email': 'nurse.one@hospital.com', 'password': 'Ward#Night9', 'name': 'Again',
    }, format='json')
    assert dup.status_code == 400

    r = admin_client.patch(reverse('user_detail', args=[created['id']]), {'role': 'admin'}, format='json')
    assert r.status_code == 200, r.data
    assert r.data['user']['role'] == 'admin'
    assert r.data['user']['name'] == 'Asha Deshmukh'

    own = admin_client.delete(reverse('user_detail', args=[admin_user.id]))
    assert own.status_code == 400
    assert own.data['ok'] is False
    assert own.data['error'] == {'code': 'invalid_request', 'message': 'You cannot delete your own account'}
    assert User.objects.filter(pk=admin_user.id).exists()
    assert admin_client.delete(reverse('user_detail', args=[created['id']])).status_code == 200
    assert not User.objects.filter(pk=created['id']).exists()


def test_weak_password_rejected(admin_client):
    r = admin_client.post(reverse('users'), {'email': 'weak@hospital.com', 'password': '123456', 'name': 'Weak'},
                          format='json')
    assert r.status_code == 400
    assert 'password' in r.data['error']['message']


def test_ensure_test_users_is_idempotent():
    call_command('ensure_test_users', verbosity=0)
    call_command('ensure_test_users', password='Another#Pass1', verbosity=0)
    assert User.objects.filter(username__in=['admin1', 'staff1']).count() == 2
    assert User.objects.get(username='admin1').role == 'admin'
    assert User.objects.get(username='staff1').check_password('Another#Pass1')


def test_refresh_issues_new_access_token(staff_user):
    client = APIClient()
    login = client.post(reverse('login_view'), {'username': 'staff1', 'password': 'Intake#2024'}, format='json')
    r = client.post(reverse('jwt_refresh_view'), {'refresh': login.data['jwt_refresh']}, format='json')
    assert r.status_code == 200
    assert r.data['ok'] is True
    assert r.data['jwt_access']


def test_refresh_with_bad_token_uses_error_envelope(db):
    r = APIClient().post(reverse('jwt_refresh_view'), {'refresh': 'not-a-token'}, format='json')
    assert r.status_code == 401
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'token_not_valid'


def test_logout_with_bad_refresh_uses_error_envelope(staff_client):
    r = staff_client.post(reverse('jwt_logout_view'), {'refresh': 'not-a-token'}, format='json')
    assert r.status_code == 400
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'invalid_request'
    assert r.data['error']['message']
