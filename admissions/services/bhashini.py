"""
Optional remote transliteration through the Bhashini (ULCA) pipeline.

The remote service sits behind the same contract as the local engine:
text in, text out.  :func:`transliterate_field` is the only entry point
the views use; it returns the remote rendering when the provider is
enabled and answers, and the local rendering otherwise.  Provider
errors are logged and never reach the caller.
"""
import hashlib
import logging
from typing import Optional

import requests
from django.conf import settings
from django.core.cache import cache

from admissions.exceptions import TransliterationServiceError
from admissions.services.transliteration import transliterate

logger = logging.getLogger(__name__)

SOURCE_LOCAL = 'local'
SOURCE_REMOTE = 'remote'


def is_enabled() -> bool:
    return bool(
        getattr(settings, 'BHASHINI_ENABLE', False)
        and getattr(settings, 'BHASHINI_USER_ID', '')
        and getattr(settings, 'BHASHINI_API_KEY', '')
    )


def _cache_key(text: str) -> str:
    digest = hashlib.sha1(text.encode('utf-8')).hexdigest()
    return f"translit:bhashini:{digest}"


def request_transliteration(text: str, *, source_language: str = 'en', target_language: str = 'mr') -> str:
    if not is_enabled():
        raise TransliterationServiceError('Bhashini transliteration not enabled on server')
    body = {
        'pipelineTasks': [{
            'taskType': 'transliteration',
            'config': {
                'language': {'sourceLanguage': source_language, 'targetLanguage': target_language},
                'serviceId': settings.BHASHINI_SERVICE_ID,
            },
        }],
        'inputData': {'input': [{'source': text}]},
    }
    headers = {
        'userID': settings.BHASHINI_USER_ID,
        'ulcaApiKey': settings.BHASHINI_API_KEY,
    }
    try:
        r = requests.post(settings.BHASHINI_URL, json=body, headers=headers, timeout=settings.BHASHINI_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise TransliterationServiceError(f'Bhashini request failed: {e}') from e
    try:
        target = data['pipelineResponse'][0]['output'][0]['target']
    except (KeyError, IndexError, TypeError) as e:
        raise TransliterationServiceError('Invalid response from Bhashini: missing target') from e
    if not isinstance(target, str) or not target.strip():
        raise TransliterationServiceError('Bhashini returned an empty transliteration')
    return target.strip()


def transliterate_field(text: Optional[str]) -> tuple[str, str]:
    """Return ``(rendering, source)`` for one name field.

    ``source`` is ``'remote'`` when the Bhashini result was used and
    ``'local'`` when the in-process engine produced the value.
    """
    cleaned = (text or '').strip()
    if not cleaned or not is_enabled():
        return transliterate(text), SOURCE_LOCAL

    key = _cache_key(cleaned)
    try:
        cached = cache.get(key)
    except Exception:
        logger.exception('transliteration cache read failed')
        cached = None
    if cached:
        return cached, SOURCE_REMOTE
    try:
        result = request_transliteration(cleaned)
    except TransliterationServiceError as e:
        logger.warning('falling back to local transliteration for %r: %s', cleaned, e)
        return transliterate(text), SOURCE_LOCAL
    try:
        cache.set(key, result, getattr(settings, 'BHASHINI_CACHE_SECONDS', 86400))
    except Exception:
        logger.exception('transliteration cache write failed')
    return result, SOURCE_REMOTE
