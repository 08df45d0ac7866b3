"""
English-to-Marathi transliteration engine.

The engine is a pure function over its input and an immutable
:class:`TransliterationTables` bundle.  Lookup order for a normalized
(trimmed, lowercased) input:

1. the whole input against the whole-word table;
2. a left-to-right greedy scan probing 4, 3 then 2 letters at the cursor
   against the syllable table (the first length that hits wins and there
   is no backtracking);
3. the single-letter fallback table, with anything outside it (digits,
   spaces, punctuation, Devanagari) copied through unchanged.

``transliterate`` never raises and never erases input: an empty result
from degenerate tables yields the original text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from . import marathi_dictionaries

DEFAULT_PROBE_LENGTHS = (4, 3, 2)


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({str(k).lower(): str(v) for k, v in mapping.items()})


@dataclass(frozen=True)
class TransliterationTables:
    """Dictionary set used by :func:`transliterate`.

    Keys are lowercased on construction and the mappings are wrapped in
    read-only proxies, so one instance can be shared by every caller.
    ``probe_lengths`` lists the substring lengths tried at each cursor
    position, longest first.
    """
    whole_words: Mapping[str, str] = field(default_factory=dict)
    syllables: Mapping[str, str] = field(default_factory=dict)
    fallback: Mapping[str, str] = field(default_factory=dict)
    probe_lengths: tuple[int, ...] = DEFAULT_PROBE_LENGTHS

    def __post_init__(self) -> None:
        object.__setattr__(self, 'whole_words', _freeze(self.whole_words))
        object.__setattr__(self, 'syllables', _freeze(self.syllables))
        object.__setattr__(self, 'fallback', _freeze(self.fallback))
        lengths = tuple(sorted({int(n) for n in self.probe_lengths if int(n) > 1}, reverse=True))
        object.__setattr__(self, 'probe_lengths', lengths)


DEFAULT_TABLES = TransliterationTables(
    whole_words=marathi_dictionaries.WHOLE_WORDS,
    syllables=marathi_dictionaries.SYLLABLES,
    fallback=marathi_dictionaries.FALLBACK,
)


def normalize(text: Optional[str]) -> str:
    if not text:
        return ''
    return str(text).strip().lower()


def _scan(name: str, tables: TransliterationTables) -> str:
    pieces: list[str] = []
    i = 0
    size = len(name)
    while i < size:
        for length in tables.probe_lengths:
            if i + length > size:
                continue
            chunk = tables.syllables.get(name[i:i + length])
            if chunk is not None:
                pieces.append(chunk)
                i += length
                break
        else:
            char = name[i]
            pieces.append(tables.fallback.get(char, char))
            i += 1
    return ''.join(pieces)


def transliterate(text: Optional[str], tables: Optional[TransliterationTables] = None) -> str:
    """Return the best-effort Devanagari rendering of a Latin-script name.

    >>> transliterate('Suresh')
    'सुरेश'
    >>> transliterate('   ')
    ''
    """
    tables = tables or DEFAULT_TABLES
    name = normalize(text)
    if not name:
        return ''
    exact = tables.whole_words.get(name)
    if exact:
        return exact
    return _scan(name, tables) or str(text)
