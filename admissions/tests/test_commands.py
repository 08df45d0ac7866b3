import io

import pytest
import requests
from django.core.management import call_command

from admissions.models import TPA, WardCharges
from admissions.services import bhashini


def run(*args, stdin=None, monkeypatch=None, **options):
    if stdin is not None:
        monkeypatch.setattr('sys.stdin', io.StringIO(stdin))
    out = io.StringIO()
    call_command('transliterate', *args, stdout=out, **options)
    return out.getvalue().splitlines()


def test_names_from_arguments():
    assert run('ram', 'xyz123', 'Suresh') == [
        'ram\tराम',
        'xyz123\tक्सयझ123',
        'Suresh\tसुरेश',
    ]


def test_names_from_stdin(monkeypatch):
    lines = run(stdin='priya\nsharma\n\n', monkeypatch=monkeypatch)
    assert lines == ['priya\tप्रिया', 'sharma\tशर्मा', '\t']


def test_show_source_reports_local_engine():
    assert run('ram', show_source=True) == ['ram\tराम\tlocal']


def test_remote_flag_without_provider_stays_local(settings, monkeypatch):
    settings.BHASHINI_ENABLE = False
    monkeypatch.setattr(bhashini.requests, 'post', lambda *a, **kw: pytest.fail('unexpected request'))
    assert run('ram', remote=True, show_source=True) == ['ram\tराम\tlocal']


def test_remote_flag_uses_provider(settings, monkeypatch):
    settings.BHASHINI_ENABLE = True
    settings.BHASHINI_USER_ID = 'user-1'
    settings.BHASHINI_API_KEY = 'key-1'

    class Ok:
        def raise_for_status(self):
            pass

        def json(self):
            return {'pipelineResponse': [{'output': [{'target': 'रामा'}]}]}

    monkeypatch.setattr(bhashini.requests, 'post', lambda *a, **kw: Ok())
    assert run('rama', remote=True, show_source=True) == ['rama\tरामा\tremote']


def test_remote_failure_falls_back_per_name(settings, monkeypatch):
    settings.BHASHINI_ENABLE = True
    settings.BHASHINI_USER_ID = 'user-1'
    settings.BHASHINI_API_KEY = 'key-1'

    def down(*a, **kw):
        raise requests.ConnectionError('connection refused')

    monkeypatch.setattr(bhashini.requests, 'post', down)
    assert run('ram', remote=True) == ['ram\tराम']


@pytest.mark.django_db
def test_seed_reference_data_skip_lists():
    call_command('seed_reference_data', skip_lists=True, stdout=io.StringIO())
    assert WardCharges.objects.count() == 5
    assert not TPA.objects.exists()
