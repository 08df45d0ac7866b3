"""
Transliteration endpoints used while the admission form is being typed.

``/api/transliterate`` renders a single field; ``/api/transliterate/names``
renders a whole name and merges it into the Marathi values the form
already holds, leaving anything the clerk typed by hand untouched.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from admissions.serializers.transliteration import TransliterateSerializer, NameTransliterateSerializer
from admissions.services.bhashini import transliterate_field
from admissions.services.names import derive_marathi_names


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@throttle_classes([ScopedRateThrottle])
def transliterate_text(request):
    s = TransliterateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    text = s.validated_data['text']
    rendered, source = transliterate_field(text)
    return Response({'ok': True, 'text': text, 'transliterated': rendered, 'source': source})

transliterate_text.cls.throttle_scope = 'transliterate'


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@throttle_classes([ScopedRateThrottle])
def transliterate_names(request):
    s = NameTransliterateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    v = s.validated_data
    names = derive_marathi_names(
        v.get('firstName'),
        v.get('middleName'),
        v.get('surname'),
        existing={
            'firstNameMarathi': v.get('firstNameMarathi'),
            'middleNameMarathi': v.get('middleNameMarathi'),
            'surnameMarathi': v.get('surnameMarathi'),
        },
    )
    return Response({'ok': True, 'data': names.as_payload()})

transliterate_names.cls.throttle_scope = 'transliterate'
