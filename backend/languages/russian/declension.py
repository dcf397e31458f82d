"""Declension Service

Public façade over the lexicon store and the form resolver. Callers ask for
a lexeme in a grammatical context; the resolver picks the field, the store
supplies the record, and the stored string comes back wrapped in a Result.

    service = DeclensionService(store)
    service.decline_noun("друг", GrammaticalCase.ACCUSATIVE)              # Ok("друга")
    service.decline_adjective("новый", "друг", GrammaticalCase.ACCUSATIVE)  # Ok("нового")
    service.decline_pronoun("наш", "друг", GrammaticalCase.ACCUSATIVE)      # Ok("нашего")

Case, number, category and language arguments may be enums or their string
names/codes ("acc", "plural"); anything else comes back as an E203x Err.
"""
from dataclasses import dataclass
from typing import Callable

from core.errors import AppError, Ok, Result, form_missing, required_field
from core.logging import declension_logger
from languages.base import RandomIndex, SeededRandomIndex
from languages.types import GrammaticalCase, GrammaticalNumber, LexemeCategory, StemLanguage
from .maps import CASES, NUMBERS, coerce_case, coerce_category, coerce_language, coerce_number
from .records import LexemeRecord, NounRecord
from .resolver import modifier_form_key, noun_form_key
from .store import LexiconStore

log = declension_logger()

_ORIGIN = "declension_service"

NOM = GrammaticalCase.NOMINATIVE
SG = GrammaticalNumber.SINGULAR

CaseArg = GrammaticalCase | str
NumberArg = GrammaticalNumber | str
CategoryArg = LexemeCategory | str


def _grammar(case: CaseArg, number: NumberArg) -> Result[tuple[GrammaticalCase, GrammaticalNumber], AppError]:
    return coerce_case(case, origin=_ORIGIN).and_then(
        lambda c: coerce_number(number, origin=_ORIGIN).map(lambda n: (c, n))
    )


@dataclass(frozen=True, slots=True)
class DeclinedPhrase:
    """Pronoun, adjective and noun declined to agree with the noun."""
    noun: str
    adjective: str | None = None
    pronoun: str | None = None

    @property
    def text(self) -> str:
        return " ".join(w for w in (self.pronoun, self.adjective, self.noun) if w)


@dataclass(frozen=True, slots=True)
class ParadigmCell:
    case: GrammaticalCase
    number: GrammaticalNumber
    form: str


class DeclensionService:
    """Decline, pick and query lexemes from an immutable store."""

    __slots__ = ("_store", "_rng")

    def __init__(self, store: LexiconStore, rng: RandomIndex | None = None):
        self._store = store
        self._rng = rng or SeededRandomIndex()

    @property
    def store(self) -> LexiconStore:
        return self._store

    # === Declension ===

    def decline_noun(self, noun: str, case: CaseArg = NOM, number: NumberArg = SG) -> Result[str, AppError]:
        """Decline a noun to `case` and `number`."""
        return _grammar(case, number).and_then(
            lambda grammar: self._store.get(LexemeCategory.NOUN, noun).and_then(
                lambda rec: self._read(rec, noun_form_key(*grammar, rec.animacy, rec.canonical))
            )
        )

    def decline_adjective(
        self,
        adjective: str,
        noun: str,
        case: CaseArg = NOM,
        number: NumberArg = SG,
    ) -> Result[str, AppError]:
        """Decline an adjective to agree with `noun` in `case` and `number`."""
        return self._decline_modifier(LexemeCategory.ADJECTIVE, adjective, noun, case, number)

    def decline_pronoun(
        self,
        pronoun: str,
        noun: str,
        case: CaseArg = NOM,
        number: NumberArg = SG,
    ) -> Result[str, AppError]:
        """Decline a pronoun to agree with `noun` in `case` and `number`."""
        return self._decline_modifier(LexemeCategory.PRONOUN, pronoun, noun, case, number)

    def decline(
        self,
        category: CategoryArg,
        word: str,
        case: CaseArg = NOM,
        number: NumberArg = SG,
        noun: str | None = None,
    ) -> Result[str, AppError]:
        """Decline any lexeme; adjectives and pronouns need the noun they agree with."""
        cat = coerce_category(category, origin=_ORIGIN)
        if cat.is_err():
            return cat
        match cat.unwrap():
            case LexemeCategory.NOUN:
                return self.decline_noun(word, case, number)
            case modifier:
                if not noun:
                    return required_field("noun", origin=_ORIGIN, category=modifier.value, word=word)
                return self._decline_modifier(modifier, word, noun, case, number)

    def _decline_modifier(
        self,
        category: LexemeCategory,
        word: str,
        noun: str,
        case: CaseArg,
        number: NumberArg,
    ) -> Result[str, AppError]:
        grammar = _grammar(case, number)
        if grammar.is_err():
            return grammar
        head = self._store.get(LexemeCategory.NOUN, noun)
        if head.is_err():
            return head
        n = head.unwrap()
        return self._store.get(category, word).and_then(
            lambda rec: self._read(rec, modifier_form_key(*grammar.unwrap(), n.gender, n.animacy, n.canonical))
        )

    def _read(self, record: LexemeRecord, key: str) -> Result[str, AppError]:
        form = record.form(key)
        if form is None:
            log.warning("form_missing", word=record.canonical, field=key)
            return form_missing(record.canonical, key, origin=_ORIGIN)
        return Ok(form)

    # === Random selection ===

    def choose_random(self, category: CategoryArg) -> Result[str, AppError]:
        """Canonical form of a uniformly chosen lexeme."""
        return coerce_category(category, origin=_ORIGIN).and_then(
            lambda cat: self._store.pick(cat, self._rng).map(lambda rec: rec.canonical)
        )

    def choose_random_noun(self) -> Result[str, AppError]:
        return self.choose_random(LexemeCategory.NOUN)

    def choose_random_adjective(self) -> Result[str, AppError]:
        return self.choose_random(LexemeCategory.ADJECTIVE)

    def choose_random_pronoun(self) -> Result[str, AppError]:
        return self.choose_random(LexemeCategory.PRONOUN)

    def decline_random(
        self,
        category: CategoryArg,
        case: CaseArg = NOM,
        number: NumberArg = SG,
        noun: str | None = None,
    ) -> Result[str, AppError]:
        """Choose a random lexeme of `category` and decline it."""
        return self.choose_random(category).and_then(
            lambda word: self.decline(category, word, case, number, noun=noun)
        )

    # === Querying ===

    def select(self, category: LexemeCategory, predicate: Callable[[LexemeRecord], bool]) -> list[str]:
        """Canonical keys of every record in `category` satisfying `predicate`.

        Example:
            feminine = service.select(LexemeCategory.NOUN, lambda n: n.gender is Gender.FEMININE)
        """
        return [rec.canonical for rec in self._store.records(category) if predicate(rec)]

    def select_nouns(self, predicate: Callable[[NounRecord], bool]) -> list[str]:
        return self.select(LexemeCategory.NOUN, predicate)

    # === Sentence stems ===

    def sentence_stem(self, case: CaseArg, language: StemLanguage | str = StemLanguage.RUSSIAN) -> Result[str, AppError]:
        """Fixed verb phrase that governs `case`, in Russian or English."""
        lang = coerce_language(language, origin=_ORIGIN)
        if lang.is_err():
            return lang
        russian = lang.unwrap() is StemLanguage.RUSSIAN
        return (
            coerce_case(case, origin=_ORIGIN)
            .and_then(self._store.stem)
            .map(lambda stem: stem.russian if russian else stem.english)
        )

    def russian_sentence_stem(self, case: CaseArg) -> Result[str, AppError]:
        return self.sentence_stem(case, StemLanguage.RUSSIAN)

    def english_sentence_stem(self, case: CaseArg) -> Result[str, AppError]:
        return self.sentence_stem(case, StemLanguage.ENGLISH)

    # === Composition ===

    def paradigm(self, category: CategoryArg, word: str, noun: str | None = None) -> Result[list[ParadigmCell], AppError]:
        """Every case and number form of `word` (agreeing with `noun` for modifiers)."""
        cells: list[ParadigmCell] = []
        for number in NUMBERS:
            for case in CASES:
                result = self.decline(category, word, case, number, noun=noun)
                if result.is_err():
                    return result
                cells.append(ParadigmCell(case=case, number=number, form=result.unwrap()))
        return Ok(cells)

    def decline_phrase(
        self,
        noun: str,
        case: CaseArg = NOM,
        number: NumberArg = SG,
        adjective: str | None = None,
        pronoun: str | None = None,
    ) -> Result[DeclinedPhrase, AppError]:
        """Decline a noun together with an optional adjective and pronoun agreeing with it."""
        parts: dict[str, str | None] = {}
        for name, word, decline in (
            ("noun", noun, lambda: self.decline_noun(noun, case, number)),
            ("adjective", adjective, lambda: self.decline_adjective(adjective, noun, case, number)),
            ("pronoun", pronoun, lambda: self.decline_pronoun(pronoun, noun, case, number)),
        ):
            if word is None:
                parts[name] = None
                continue
            result = decline()
            if result.is_err():
                return result
            parts[name] = result.unwrap()
        return Ok(DeclinedPhrase(**parts))

    def random_phrase(self, case: CaseArg = NOM, number: NumberArg = SG) -> Result[DeclinedPhrase, AppError]:
        """Random pronoun, adjective and noun declined together."""
        grammar = _grammar(case, number)
        if grammar.is_err():
            return grammar
        case, number = grammar.unwrap()
        picks = {}
        for category in LexemeCategory:
            result = self.choose_random(category)
            if result.is_err():
                return result
            picks[category] = result.unwrap()
        log.debug("random_phrase", case=case.value, number=number.value, **{c.value: w for c, w in picks.items()})
        return self.decline_phrase(
            picks[LexemeCategory.NOUN],
            case,
            number,
            adjective=picks[LexemeCategory.ADJECTIVE],
            pronoun=picks[LexemeCategory.PRONOUN],
        )

    def sentence(
        self,
        case: CaseArg,
        number: NumberArg = SG,
        phrase: DeclinedPhrase | None = None,
    ) -> Result[str, AppError]:
        """Russian stem followed by a declined phrase, e.g. "Я вижу нашего нового друга"."""
        stem = self.russian_sentence_stem(case)
        if stem.is_err():
            return stem
        declined = Ok(phrase) if phrase is not None else self.random_phrase(case, number)
        return declined.map(lambda p: f"{stem.unwrap()} {p.text}")
