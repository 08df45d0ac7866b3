"""
Derive the Marathi companion fields of a person's name.

Each part of the name is transliterated on its own.  When an existing,
partially filled record is supplied, only its empty Marathi fields are
filled in, so a value a clerk typed or corrected by hand is never
replaced by the automatic rendering.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .transliteration import TransliterationTables, transliterate

# (latin attribute, marathi attribute, camelCase payload key)
NAME_FIELDS = (
    ('first_name', 'first_name_marathi', 'firstNameMarathi'),
    ('middle_name', 'middle_name_marathi', 'middleNameMarathi'),
    ('surname', 'surname_marathi', 'surnameMarathi'),
)


@dataclass(frozen=True)
class NameTriple:
    first_name: str
    middle_name: Optional[str] = None
    surname: Optional[str] = None


@dataclass(frozen=True)
class MarathiNames:
    first_name_marathi: str = ''
    middle_name_marathi: str = ''
    surname_marathi: str = ''

    def as_payload(self) -> dict[str, str]:
        return {key: getattr(self, attr) for _, attr, key in NAME_FIELDS}


def convert_name_triple(names: NameTriple, tables: Optional[TransliterationTables] = None) -> MarathiNames:
    return MarathiNames(
        first_name_marathi=transliterate(names.first_name or '', tables),
        middle_name_marathi=transliterate(names.middle_name or '', tables),
        surname_marathi=transliterate(names.surname or '', tables),
    )


def _existing_value(existing: Any, attr: str, key: str) -> str:
    if existing is None:
        return ''
    if isinstance(existing, Mapping):
        value = existing.get(attr)
        if value is None:
            value = existing.get(key)
    else:
        value = getattr(existing, attr, None)
    return str(value) if value else ''


def merge_marathi_names(existing: Any, derived: MarathiNames) -> MarathiNames:
    """Keep every non-empty value from ``existing``; fill the rest from ``derived``.

    ``existing`` may be a :class:`MarathiNames`, a model instance with the
    ``*_marathi`` attributes, or a mapping keyed either by those attribute
    names or by their camelCase API spelling.
    """
    merged = {}
    for _, attr, key in NAME_FIELDS:
        current = _existing_value(existing, attr, key)
        merged[attr] = current if current.strip() else getattr(derived, attr)
    return MarathiNames(**merged)


def derive_marathi_names(
    first: Optional[str],
    middle: Optional[str] = None,
    surname: Optional[str] = None,
    *,
    existing: Any = None,
    tables: Optional[TransliterationTables] = None,
) -> MarathiNames:
    derived = convert_name_triple(NameTriple(first or '', middle, surname), tables)
    if existing is None:
        return derived
    return merge_marathi_names(existing, derived)


def fill_marathi_names(instance: Any, tables: Optional[TransliterationTables] = None) -> list[str]:
    """Populate empty Marathi attributes of ``instance`` in place.

    Returns the names of the attributes that were changed so callers can
    pass them to ``save(update_fields=...)``.
    """
    derived = derive_marathi_names(
        getattr(instance, 'first_name', ''),
        getattr(instance, 'middle_name', None),
        getattr(instance, 'surname', None),
        existing=instance,
        tables=tables,
    )
    changed = []
    for f in fields(derived):
        value = getattr(derived, f.name)
        if (getattr(instance, f.name, None) or '') != value:
            setattr(instance, f.name, value)
            changed.append(f.name)
    return changed
