"""
Unit tests for the transliteration engine and the Marathi name helpers.

These run without the database.
"""
from types import SimpleNamespace

import pytest

from admissions.services.marathi_dictionaries import FALLBACK, SYLLABLES, WHOLE_WORDS
from admissions.services.names import (
    MarathiNames, NameTriple, convert_name_triple, derive_marathi_names,
    fill_marathi_names, merge_marathi_names,
)
from admissions.services.transliteration import TransliterationTables, normalize, transliterate


@pytest.mark.parametrize('text, expected', [
    ('ram', 'राम'),
    ('Suresh', 'सुरेश'),
    ('  PRIYA ', 'प्रिया'),
    ('sharma', 'शर्मा'),
    ('', ''),
    ('   ', ''),
    (None, ''),
])
def test_known_inputs(text, expected):
    assert transliterate(text) == expected


def test_fallback_letters_and_raw_digits():
    # no syllable covers any prefix, so letters use the fallback table and digits pass through
    assert transliterate('xyz123') == 'क्सयझ123'


def test_greedy_scan_with_default_tables():
    assert 'kama' not in WHOLE_WORDS
    assert transliterate('kama') == 'कम'
    # 'taa' (3 letters) wins over 'ta' at the same position
    assert transliterate('taata') == 'तट'


@pytest.mark.parametrize('text', ['12345', '!@#$', 'राम', 'ram-sharma', 'o\'neil', '\t\n', 'a' * 500, 'Ünïcödé'])
def test_total_over_any_string(text):
    result = transliterate(text)
    assert isinstance(result, str)
    if text.strip():
        assert result != ''


def test_output_is_stable_on_second_pass():
    for name in ('ram', 'kama', 'xyz123', 'Deshmukh', 'anand patil'):
        once = transliterate(name)
        assert transliterate(once) == once


def test_exact_match_beats_scanner():
    tables = TransliterationTables(
        whole_words={'kaka': 'WHOLE'},
        syllables={'ka': 'X'},
        fallback={'k': 'k!', 'a': 'a!'},
    )
    assert transliterate('Kaka', tables) == 'WHOLE'
    assert transliterate('kakaka', tables) == 'XXX'


def test_longest_match_wins_at_cursor():
    tables = TransliterationTables(
        syllables={'ka': 'X', 'kaa': 'Y', 'kaan': 'Z'},
        fallback={'k': 'Q', 'a': 'A', 'n': 'N'},
    )
    assert transliterate('ka', tables) == 'X'
    assert transliterate('kaa', tables) == 'Y'
    assert transliterate('kaan', tables) == 'Z'
    assert transliterate('k', tables) == 'Q'
    # greedy, no backtracking: 'kaan' is taken and the trailing 'a' falls back
    assert transliterate('kaana', tables) == 'ZA'


def test_probe_lengths_configurable():
    tables = TransliterationTables(
        syllables={'ka': 'X', 'kaan': 'Z'},
        fallback={'k': 'Q', 'a': 'A', 'n': 'N'},
        probe_lengths=(2, 1, 3),
    )
    assert tables.probe_lengths == (3, 2)
    assert transliterate('kaan', tables) == 'XAN'


def test_tables_normalize_keys_and_are_read_only():
    tables = TransliterationTables(whole_words={'RAM': 'राम'})
    assert transliterate('ram', tables) == 'राम'
    with pytest.raises(TypeError):
        tables.whole_words['sita'] = 'सीता'


def test_empty_tables_never_erase_input():
    tables = TransliterationTables()
    assert transliterate('Zed 9', tables) == 'zed 9'
    assert transliterate('', tables) == ''


def test_empty_scan_result_returns_original_text():
    tables = TransliterationTables(fallback={'q': ''})
    assert transliterate('  Qq ', tables) == '  Qq '


def test_normalize():
    assert normalize('  RaM ') == 'ram'
    assert normalize(None) == ''


def test_dictionaries_shape():
    assert set(FALLBACK) == set('abcdefghijklmnopqrstuvwxyz')
    assert all(2 <= len(k) <= 4 for k in SYLLABLES)
    assert all(k == k.lower() for k in WHOLE_WORDS)


# -- name helpers -------------------------------------------------------------

def test_convert_name_triple_each_field_independently():
    names = convert_name_triple(NameTriple('priya', None, 'sharma'))
    assert names == MarathiNames('प्रिया', '', 'शर्मा')


def test_derive_keeps_existing_values():
    result = derive_marathi_names(
        'priya', '', 'sharma',
        existing={'firstNameMarathi': '', 'surnameMarathi': 'previously-set'},
    )
    assert result.as_payload() == {
        'firstNameMarathi': 'प्रिया',
        'middleNameMarathi': '',
        'surnameMarathi': 'previously-set',
    }


def test_derive_never_overwrites_custom_value():
    result = derive_marathi_names('ram', existing={'first_name_marathi': 'custom'})
    assert result.first_name_marathi == 'custom'


def test_whitespace_only_existing_value_is_empty():
    merged = merge_marathi_names(MarathiNames(first_name_marathi='  '), MarathiNames('राम', '', ''))
    assert merged.first_name_marathi == 'राम'


def test_fill_marathi_names_in_place():
    record = SimpleNamespace(
        first_name='Suresh', middle_name='ram', surname='patil',
        first_name_marathi='', middle_name_marathi='रामचंद्र', surname_marathi=None,
    )
    changed = fill_marathi_names(record)
    assert changed == ['first_name_marathi', 'surname_marathi']
    assert record.first_name_marathi == 'सुरेश'
    assert record.middle_name_marathi == 'रामचंद्र'
    assert record.surname_marathi == 'पाटील'
    assert fill_marathi_names(record) == []
