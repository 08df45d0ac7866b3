"""
Print the Marathi rendering of names from the command line.

    python manage.py transliterate ram sharma
    cat names.txt | python manage.py transliterate
"""
import sys

from django.core.management.base import BaseCommand

from admissions.services import bhashini
from admissions.services.transliteration import transliterate


class Command(BaseCommand):
    help = "Transliterate English names to Marathi (arguments, or one name per stdin line)."

    def add_arguments(self, parser):
        parser.add_argument('names', nargs='*')
        parser.add_argument('--remote', action='store_true',
                            help='Try the Bhashini provider first when it is configured.')
        parser.add_argument('--show-source', action='store_true')

    def handle(self, *args, **opts):
        names = opts['names'] or (line.rstrip('\n') for line in sys.stdin)
        for name in names:
            if opts['remote']:
                rendered, source = bhashini.transliterate_field(name)
            else:
                rendered, source = transliterate(name), bhashini.SOURCE_LOCAL
            if opts['show_source']:
                self.stdout.write(f"{name}\t{rendered}\t{source}")
            else:
                self.stdout.write(f"{name}\t{rendered}")
