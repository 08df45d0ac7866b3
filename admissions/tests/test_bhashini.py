import pytest
import requests

from admissions.exceptions import TransliterationServiceError
from admissions.services import bhashini


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} error')

    def json(self):
        return self._payload


def pipeline_payload(target):
    return {'pipelineResponse': [{'output': [{'source': 'x', 'target': target}]}]}


@pytest.fixture
def enabled(settings):
    settings.BHASHINI_ENABLE = True
    settings.BHASHINI_USER_ID = 'user-1'
    settings.BHASHINI_API_KEY = 'key-1'
    settings.BHASHINI_URL = 'https://bhashini.example/compute'
    return settings


def test_disabled_uses_local_engine(settings, monkeypatch):
    settings.BHASHINI_ENABLE = False

    def boom(*a, **kw):
        raise AssertionError('network must not be used')

    monkeypatch.setattr(bhashini.requests, 'post', boom)
    assert bhashini.transliterate_field('ram') == ('राम', 'local')
    with pytest.raises(TransliterationServiceError):
        bhashini.request_transliteration('ram')


def test_remote_result_is_used_and_cached(enabled, monkeypatch):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append((url, json, headers, timeout))
        return FakeResponse(pipeline_payload(' सुरेशा '))

    monkeypatch.setattr(bhashini.requests, 'post', fake_post)
    assert bhashini.transliterate_field('  Suresh ') == ('सुरेशा', 'remote')
    assert bhashini.transliterate_field('Suresh') == ('सुरेशा', 'remote')
    assert len(calls) == 1

    url, body, headers, timeout = calls[0]
    assert url == 'https://bhashini.example/compute'
    assert body['inputData']['input'][0]['source'] == 'Suresh'
    assert body['pipelineTasks'][0]['config']['language'] == {'sourceLanguage': 'en', 'targetLanguage': 'mr'}
    assert headers == {'userID': 'user-1', 'ulcaApiKey': 'key-1'}
    assert timeout == enabled.BHASHINI_TIMEOUT


@pytest.mark.parametrize('response', [
    FakeResponse({}, status_code=503),
    FakeResponse({'pipelineResponse': []}),
    FakeResponse(pipeline_payload('   ')),
    FakeResponse(pipeline_payload(None)),
])
def test_bad_responses_fall_back_to_local(enabled, monkeypatch, response):
    monkeypatch.setattr(bhashini.requests, 'post', lambda *a, **kw: response)
    assert bhashini.transliterate_field('ram') == ('राम', 'local')


def test_network_error_falls_back_to_local(enabled, monkeypatch):
    def timeout(*a, **kw):
        raise requests.Timeout('read timed out')

    monkeypatch.setattr(bhashini.requests, 'post', timeout)
    assert bhashini.transliterate_field('priya') == ('प्रिया', 'local')


def test_blank_text_never_calls_remote(enabled, monkeypatch):
    monkeypatch.setattr(bhashini.requests, 'post', lambda *a, **kw: pytest.fail('unexpected request'))
    assert bhashini.transliterate_field('   ') == ('', 'local')
    assert bhashini.transliterate_field(None) == ('', 'local')
