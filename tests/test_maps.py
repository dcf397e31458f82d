# tests/test_maps.py
"""String boundary: short codes and full names in, closed enums or errors out."""
import pytest

from core.errors import ErrorCode
from languages.russian.maps import (
    NOUN_PLURAL_FIELDS,
    coerce_case,
    coerce_category,
    coerce_language,
    coerce_number,
    parse_animacy,
    parse_gender,
)
from languages.types import Animacy, Gender, GrammaticalCase, GrammaticalNumber, LexemeCategory, StemLanguage


@pytest.mark.parametrize("value,expected", [
    ("acc", GrammaticalCase.ACCUSATIVE),
    ("Accusative", GrammaticalCase.ACCUSATIVE),
    (" inst ", GrammaticalCase.INSTRUMENTAL),
    ("prepositional", GrammaticalCase.PREPOSITIONAL),
    (GrammaticalCase.DATIVE, GrammaticalCase.DATIVE),
])
def test_coerce_case(value, expected):
    assert coerce_case(value).unwrap() is expected


@pytest.mark.parametrize("value", ["vocative", "loc", "", "accusativ"])
def test_coerce_case_rejects_values_outside_the_six_cases(value):
    error = coerce_case(value).unwrap_err()
    assert error.code is ErrorCode.E2030_UNKNOWN_CASE
    assert error.code.http_status == 400


def test_coerce_number_category_language():
    assert coerce_number("plural").unwrap() is GrammaticalNumber.PLURAL
    assert coerce_number("pl").unwrap() is GrammaticalNumber.PLURAL
    assert coerce_number("dual").unwrap_err().code is ErrorCode.E2031_UNKNOWN_NUMBER
    assert coerce_category("nouns").unwrap() is LexemeCategory.NOUN
    assert coerce_category("pronoun").unwrap() is LexemeCategory.PRONOUN
    assert coerce_category("verbs").unwrap_err().code is ErrorCode.E2032_UNKNOWN_CATEGORY
    assert coerce_language("eng").unwrap() is StemLanguage.ENGLISH
    assert coerce_language("fr").unwrap_err().code is ErrorCode.E2033_UNKNOWN_LANGUAGE


def test_parse_gender_and_animacy_codes():
    assert parse_gender("окно", "n").unwrap() is Gender.NEUTER
    assert parse_animacy("друг", "a").unwrap() is Animacy.ANIMATE
    assert parse_animacy("стол", "inanimate").unwrap() is Animacy.INANIMATE


def test_invalid_data_attributes():
    gender = parse_gender("сирота", "c").unwrap_err()
    assert gender.code is ErrorCode.E4030_INVALID_GENDER
    assert gender.code.is_fatal
    animacy = parse_animacy("друг", "yes").unwrap_err()
    assert animacy.code is ErrorCode.E4031_INVALID_ANIMACY


def test_plural_accusative_is_never_a_required_noun_field():
    assert "pl_acc" not in NOUN_PLURAL_FIELDS
    assert len(NOUN_PLURAL_FIELDS) == 5
