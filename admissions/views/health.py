from django.db import connections
from django.http import JsonResponse

from admissions.services.transliteration import transliterate


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({
            'ok': True,
            'db': bool(row and row[0] == 1),
            'transliteration': transliterate('ram') == 'राम',
        })
    except Exception as e:
        return JsonResponse({'ok': False, 'error': {'code': 'unhealthy', 'message': str(e)}}, status=500)
