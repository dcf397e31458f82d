"""Form Resolver

Maps a grammatical context to the field key a lexicon record stores the
wanted form under. Pure and deterministic; total over the closed sets in
`languages.types`.

Agreement rules encoded here:
- Animate accusative borrows the genitive form, inanimate the nominative
  (every plural; masculine singular modifiers).
- Nouns store their own singular accusative.
- Feminine singular modifiers share one form across genitive, dative,
  instrumental and prepositional (`fem_oth`).
- Neuter singular modifiers: accusative equals nominative; oblique cases
  follow the masculine paradigm.
- Plural modifiers do not vary by gender.
"""
from core.errors import AppErrorException, invalid_animacy, invalid_gender
from languages.types import Animacy, Gender, GrammaticalCase, GrammaticalNumber

_ORIGIN = "form_resolver"


def _is_animate(animacy: Animacy, word: str) -> bool:
    match animacy:
        case Animacy.ANIMATE:
            return True
        case Animacy.INANIMATE:
            return False
        case _:
            raise AppErrorException(invalid_animacy(word, animacy, origin=_ORIGIN).error)


def _plural_key(case: GrammaticalCase, animacy: Animacy, word: str) -> str:
    if case is GrammaticalCase.ACCUSATIVE:
        return "pl_gen" if _is_animate(animacy, word) else "pl_nom"
    return f"pl_{case.code}"


def noun_form_key(
    case: GrammaticalCase,
    number: GrammaticalNumber,
    animacy: Animacy,
    word: str = "",
) -> str:
    """Field key for a noun form."""
    match number:
        case GrammaticalNumber.PLURAL:
            return _plural_key(case, animacy, word)
        case GrammaticalNumber.SINGULAR:
            return case.code
        case _:
            raise ValueError(f"Unknown grammatical number: {number!r}")


def modifier_form_key(
    case: GrammaticalCase,
    number: GrammaticalNumber,
    gender: Gender,
    animacy: Animacy,
    word: str = "",
) -> str:
    """Field key for an adjective or pronoun agreeing with a noun.

    `gender` and `animacy` belong to the noun, not to the modifier.
    A gender outside the closed set is corrupt data and raises.
    """
    if number is GrammaticalNumber.PLURAL:
        return _plural_key(case, animacy, word)
    if number is not GrammaticalNumber.SINGULAR:
        raise ValueError(f"Unknown grammatical number: {number!r}")

    match gender:
        case Gender.MASCULINE:
            if case is GrammaticalCase.ACCUSATIVE:
                return "masc_gen" if _is_animate(animacy, word) else "masc_nom"
            return f"masc_{case.code}"
        case Gender.FEMININE:
            match case:
                case GrammaticalCase.NOMINATIVE:
                    return "fem_nom"
                case GrammaticalCase.ACCUSATIVE:
                    return "fem_acc"
                case _:
                    return "fem_oth"
        case Gender.NEUTER:
            if case in (GrammaticalCase.NOMINATIVE, GrammaticalCase.ACCUSATIVE):
                return "neu_nom"
            return f"masc_{case.code}"
        case _:
            raise AppErrorException(
                invalid_gender(word, gender, origin=_ORIGIN, animacy=str(animacy)).error
            )
