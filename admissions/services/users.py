from django.contrib.auth import get_user_model
from django.utils.text import slugify

User = get_user_model()


def serialize_user(u) -> dict:
    return {
        'id': u.id,
        'username': u.username,
        'email': u.email,
        'name': u.get_full_name() or u.username,
        'role': u.role,
        'isActive': u.is_active,
        'createdAt': u.date_joined.isoformat() if u.date_joined else None,
    }


def _split_name(name: str) -> tuple[str, str]:
    first, _, last = (name or '').strip().partition(' ')
    return first, last.strip()


def _username_for(email: str) -> str:
    base = slugify(email.split('@')[0]) or 'user'
    candidate, n = base, 1
    while User.objects.filter(username=candidate).exists():
        n += 1
        candidate = f"{base}{n}"
    return candidate


def create_user(*, email: str, password: str, name: str, role: str, username: str = ''):
    first, last = _split_name(name)
    return User.objects.create_user(
        username=username or _username_for(email),
        email=email,
        password=password,
        first_name=first,
        last_name=last,
        role=role,
    )


def update_user(user, data: dict):
    if 'name' in data:
        user.first_name, user.last_name = _split_name(data['name'])
    for attr in ('email', 'role'):
        if attr in data:
            setattr(user, attr, data[attr])
    if data.get('username'):
        user.username = data['username']
    if data.get('password'):
        user.set_password(data['password'])
    user.save()
    return user
