"""Russian lexicon code mappings and form-field keys.

Lexicon files use short codes (`acc`, `m`, `a`); callers may use either the
short code or the full name. Everything crossing this boundary becomes a
closed enum or an error.
"""
from enum import Enum
from typing import TypeVar

from core.errors import AppError, ErrorCode, Ok, Result, invalid_animacy, invalid_gender, unknown_value
from languages.types import Animacy, Gender, GrammaticalCase, GrammaticalNumber, LexemeCategory, StemLanguage

EnumT = TypeVar("EnumT", bound=Enum)

# Russian grammatical cases (ordered)
CASES = list(GrammaticalCase)
NUMBERS = list(GrammaticalNumber)

CASE_MAP = {c.code: c for c in GrammaticalCase}
GENDER_MAP = {g.code: g for g in Gender}
ANIMACY_MAP = {a.code: a for a in Animacy}

# Noun fields: singular by case code, plural with a `pl_` prefix
NOUN_SINGULAR_FIELDS = tuple(c.code for c in GrammaticalCase)
NOUN_PLURAL_FIELDS = tuple(f"pl_{c.code}" for c in GrammaticalCase if c is not GrammaticalCase.ACCUSATIVE)
NOUN_OPTIONAL_FIELDS = ("pl_acc",)  # stored when present, never selected

# Adjective/pronoun fields. Masculine has no accusative cell and neuter only
# a nominative: both borrow from other cells. Feminine oblique cases share one.
MODIFIER_FIELDS = (
    "masc_nom", "masc_gen", "masc_dat", "masc_inst", "masc_prep",
    "fem_nom", "fem_acc", "fem_oth",
    "neu_nom",
    "pl_nom", "pl_gen", "pl_dat", "pl_inst", "pl_prep",
)

# Noun plural column names in the lexicon files
NOUN_PLURAL_COLUMNS = {
    "nmp": "pl_nom",
    "gnp": "pl_gen",
    "acp": "pl_acc",
    "dtp": "pl_dat",
    "itp": "pl_inst",
    "prp": "pl_prep",
}


def _coerce(enum_cls: type[EnumT], value: str | EnumT, kind: str, code: ErrorCode, origin: str) -> Result[EnumT, AppError]:
    if isinstance(value, enum_cls):
        return Ok(value)
    key = str(value).strip().lower()
    for member in enum_cls:
        if key in (member.value, getattr(member, "code", None)):
            return Ok(member)
    allowed = [m.value for m in enum_cls]
    return unknown_value(kind, str(value), allowed, code, origin=origin)


def coerce_case(value: str | GrammaticalCase, origin: str = "") -> Result[GrammaticalCase, AppError]:
    """Accept 'acc' or 'accusative'; anything outside the six cases is rejected."""
    return _coerce(GrammaticalCase, value, "case", ErrorCode.E2030_UNKNOWN_CASE, origin)


def coerce_number(value: str | GrammaticalNumber, origin: str = "") -> Result[GrammaticalNumber, AppError]:
    return _coerce(GrammaticalNumber, value, "number", ErrorCode.E2031_UNKNOWN_NUMBER, origin)


def coerce_category(value: str | LexemeCategory, origin: str = "") -> Result[LexemeCategory, AppError]:
    if isinstance(value, str) and value.strip().lower() in ("nouns", "adjectives", "pronouns"):
        value = value.strip().lower()[:-1]
    return _coerce(LexemeCategory, value, "category", ErrorCode.E2032_UNKNOWN_CATEGORY, origin)


def coerce_language(value: str | StemLanguage, origin: str = "") -> Result[StemLanguage, AppError]:
    return _coerce(StemLanguage, value, "language", ErrorCode.E2033_UNKNOWN_LANGUAGE, origin)


def parse_gender(word: str, value: str, origin: str = "") -> Result[Gender, AppError]:
    """Gender attribute as stored in the lexicon ('m', 'f', 'n')."""
    match _coerce(Gender, value, "gender", ErrorCode.E4030_INVALID_GENDER, origin):
        case Ok(gender):
            return Ok(gender)
        case _:
            return invalid_gender(word, value, origin=origin)


def parse_animacy(word: str, value: str, origin: str = "") -> Result[Animacy, AppError]:
    """Animacy attribute as stored in the lexicon ('a', 'i')."""
    match _coerce(Animacy, value, "animacy", ErrorCode.E4031_INVALID_ANIMACY, origin):
        case Ok(animacy):
            return Ok(animacy)
        case _:
            return invalid_animacy(word, value, origin=origin)
