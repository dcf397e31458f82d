"""Declension API Routes

Thin HTTP adapter over DeclensionService. Results are unwrapped at this
boundary; errors become structured JSON responses via the registered
error handlers.
"""
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from core.errors import raise_result
from core.logging import api_logger
from languages.russian import DeclensionService
from languages.russian.maps import coerce_category
from languages.types import Animacy, Gender, GrammaticalCase, GrammaticalNumber, LexemeCategory, StemLanguage

log = api_logger()

router = APIRouter()


def get_service(request: Request) -> DeclensionService:
    return request.app.state.declension


def _category(value: str) -> LexemeCategory:
    return raise_result(coerce_category(value, origin="api"))


# === Response Models ===

class DeclinedResponse(BaseModel):
    word: str
    category: LexemeCategory
    case: GrammaticalCase
    number: GrammaticalNumber
    form: str
    noun: str | None = None


class ParadigmCellResponse(BaseModel):
    case: GrammaticalCase
    number: GrammaticalNumber
    form: str


class ParadigmResponse(BaseModel):
    word: str
    category: LexemeCategory
    noun: str | None = None
    cells: list[ParadigmCellResponse]


class StemResponse(BaseModel):
    case: GrammaticalCase
    language: StemLanguage
    text: str


class PhraseResponse(BaseModel):
    case: GrammaticalCase
    number: GrammaticalNumber
    pronoun: str | None = None
    adjective: str | None = None
    noun: str
    text: str


# === Endpoints ===

@router.get("/stems/{case}", response_model=StemResponse)
async def get_sentence_stem(
    case: GrammaticalCase,
    language: StemLanguage = Query(StemLanguage.RUSSIAN),
    service: DeclensionService = Depends(get_service),
):
    """Sentence stem governing `case`."""
    text = raise_result(service.sentence_stem(case, language))
    return StemResponse(case=case, language=language, text=text)


@router.get("/phrase", response_model=PhraseResponse)
async def decline_phrase(
    noun: str,
    case: GrammaticalCase = Query(GrammaticalCase.NOMINATIVE),
    number: GrammaticalNumber = Query(GrammaticalNumber.SINGULAR),
    adjective: str | None = Query(None),
    pronoun: str | None = Query(None),
    service: DeclensionService = Depends(get_service),
):
    """Pronoun, adjective and noun declined together."""
    phrase = raise_result(service.decline_phrase(noun, case, number, adjective=adjective, pronoun=pronoun))
    return PhraseResponse(
        case=case,
        number=number,
        pronoun=phrase.pronoun,
        adjective=phrase.adjective,
        noun=phrase.noun,
        text=phrase.text,
    )


@router.get("/{category}", response_model=list[str])
async def list_lexemes(
    category: str,
    gender: Gender | None = Query(None),
    animacy: Animacy | None = Query(None),
    service: DeclensionService = Depends(get_service),
):
    """Canonical forms in a category; nouns can be filtered by gender and animacy."""
    cat = _category(category)
    if cat is not LexemeCategory.NOUN or (gender is None and animacy is None):
        return sorted(service.store.keys(cat))
    return service.select_nouns(
        lambda n: (gender is None or n.gender is gender) and (animacy is None or n.animacy is animacy)
    )


@router.get("/{category}/random", response_model=DeclinedResponse)
async def decline_random(
    category: str,
    case: GrammaticalCase = Query(GrammaticalCase.NOMINATIVE),
    number: GrammaticalNumber = Query(GrammaticalNumber.SINGULAR),
    noun: str | None = Query(None),
    service: DeclensionService = Depends(get_service),
):
    """Pick a random lexeme and decline it."""
    cat = _category(category)
    word = raise_result(service.choose_random(cat))
    form = raise_result(service.decline(cat, word, case, number, noun=noun))
    log.debug("random_declined", category=cat.value, word=word, case=case.value, number=number.value)
    return DeclinedResponse(word=word, category=cat, case=case, number=number, form=form, noun=noun)


@router.get("/{category}/{word}/paradigm", response_model=ParadigmResponse)
async def get_paradigm(
    category: str,
    word: str,
    noun: str | None = Query(None),
    service: DeclensionService = Depends(get_service),
):
    """All case/number forms of a lexeme."""
    cat = _category(category)
    cells = raise_result(service.paradigm(cat, word, noun=noun))
    return ParadigmResponse(
        word=word,
        category=cat,
        noun=noun,
        cells=[ParadigmCellResponse(case=c.case, number=c.number, form=c.form) for c in cells],
    )


@router.get("/{category}/{word}", response_model=DeclinedResponse)
async def decline_word(
    category: str,
    word: str,
    case: GrammaticalCase = Query(GrammaticalCase.NOMINATIVE),
    number: GrammaticalNumber = Query(GrammaticalNumber.SINGULAR),
    noun: str | None = Query(None),
    service: DeclensionService = Depends(get_service),
):
    """Decline a lexeme; adjectives and pronouns require `noun`."""
    cat = _category(category)
    form = raise_result(service.decline(cat, word, case, number, noun=noun))
    return DeclinedResponse(word=word, category=cat, case=case, number=number, form=form, noun=noun)
