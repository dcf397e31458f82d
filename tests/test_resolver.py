# tests/test_resolver.py
"""Form resolution tables for nouns and agreeing modifiers."""
import pytest

from core.errors import AppErrorException, ErrorCode
from languages.russian.resolver import modifier_form_key, noun_form_key
from languages.types import Animacy, Gender, GrammaticalCase as C, GrammaticalNumber as N

A, I = Animacy.ANIMATE, Animacy.INANIMATE
M, F, NT = Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER


@pytest.mark.parametrize("case", list(C))
@pytest.mark.parametrize("animacy", [A, I])
def test_singular_noun_maps_case_directly(case, animacy):
    assert noun_form_key(case, N.SINGULAR, animacy) == case.code


@pytest.mark.parametrize("case,expected", [
    (C.NOMINATIVE, "pl_nom"),
    (C.GENITIVE, "pl_gen"),
    (C.DATIVE, "pl_dat"),
    (C.INSTRUMENTAL, "pl_inst"),
    (C.PREPOSITIONAL, "pl_prep"),
])
def test_plural_noun_non_accusative(case, expected):
    assert noun_form_key(case, N.PLURAL, A) == expected
    assert noun_form_key(case, N.PLURAL, I) == expected


def test_plural_noun_accusative_follows_animacy():
    assert noun_form_key(C.ACCUSATIVE, N.PLURAL, A) == "pl_gen"
    assert noun_form_key(C.ACCUSATIVE, N.PLURAL, I) == "pl_nom"


@pytest.mark.parametrize("gender", [M, F, NT])
def test_plural_modifier_ignores_gender(gender):
    assert modifier_form_key(C.DATIVE, N.PLURAL, gender, I) == "pl_dat"
    assert modifier_form_key(C.ACCUSATIVE, N.PLURAL, gender, A) == "pl_gen"
    assert modifier_form_key(C.ACCUSATIVE, N.PLURAL, gender, I) == "pl_nom"


@pytest.mark.parametrize("case,animate,inanimate", [
    (C.NOMINATIVE, "masc_nom", "masc_nom"),
    (C.GENITIVE, "masc_gen", "masc_gen"),
    (C.ACCUSATIVE, "masc_gen", "masc_nom"),
    (C.DATIVE, "masc_dat", "masc_dat"),
    (C.INSTRUMENTAL, "masc_inst", "masc_inst"),
    (C.PREPOSITIONAL, "masc_prep", "masc_prep"),
])
def test_masculine_singular_modifier(case, animate, inanimate):
    assert modifier_form_key(case, N.SINGULAR, M, A) == animate
    assert modifier_form_key(case, N.SINGULAR, M, I) == inanimate


@pytest.mark.parametrize("animacy", [A, I])
def test_feminine_singular_modifier_collapses_oblique_cases(animacy):
    assert modifier_form_key(C.NOMINATIVE, N.SINGULAR, F, animacy) == "fem_nom"
    assert modifier_form_key(C.ACCUSATIVE, N.SINGULAR, F, animacy) == "fem_acc"
    for case in (C.GENITIVE, C.DATIVE, C.INSTRUMENTAL, C.PREPOSITIONAL):
        assert modifier_form_key(case, N.SINGULAR, F, animacy) == "fem_oth"


def test_neuter_singular_modifier():
    assert modifier_form_key(C.NOMINATIVE, N.SINGULAR, NT, I) == "neu_nom"
    assert modifier_form_key(C.ACCUSATIVE, N.SINGULAR, NT, I) == "neu_nom"
    # animacy never splits the neuter accusative
    assert modifier_form_key(C.ACCUSATIVE, N.SINGULAR, NT, A) == "neu_nom"
    assert modifier_form_key(C.GENITIVE, N.SINGULAR, NT, I) == "masc_gen"
    assert modifier_form_key(C.PREPOSITIONAL, N.SINGULAR, NT, I) == "masc_prep"


def test_unknown_gender_is_fatal():
    with pytest.raises(AppErrorException) as exc_info:
        modifier_form_key(C.GENITIVE, N.SINGULAR, "common", I, word="сирота")
    assert exc_info.value.error.code is ErrorCode.E4030_INVALID_GENDER
    assert exc_info.value.error.metadata["word"] == "сирота"


def test_unknown_animacy_is_fatal():
    with pytest.raises(AppErrorException) as exc_info:
        noun_form_key(C.ACCUSATIVE, N.PLURAL, "x", word="друг")
    assert exc_info.value.error.code is ErrorCode.E4031_INVALID_ANIMACY
