"""Lexicon Store

Immutable, read-only collections of nouns, adjectives, pronouns and
sentence stems. Built once from record sets supplied by a loader and
shared freely afterwards; there are no mutation methods.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping

from core.errors import AppError, Ok, Result, case_not_found, duplicate_key, empty_collection, lexeme_not_found
from core.logging import lexicon_logger
from languages.base import RandomIndex
from languages.types import GrammaticalCase, LexemeCategory
from .records import AdjectiveRecord, LexemeRecord, NounRecord, PronounRecord, SentenceStemRecord

log = lexicon_logger()

_ORIGIN = "lexicon_store"


@dataclass(frozen=True, slots=True)
class LexiconData:
    """Record sets as produced by a loader, duplicates and all."""
    nouns: tuple[NounRecord, ...] = ()
    adjectives: tuple[AdjectiveRecord, ...] = ()
    pronouns: tuple[PronounRecord, ...] = ()
    stems: tuple[SentenceStemRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class _Collection:
    records: Mapping[str, LexemeRecord]
    order: tuple[str, ...]  # sorted keys, so seeded random picks are reproducible


def _index(name: str, records: Iterable, key: Callable) -> Result[dict, AppError]:
    out: dict = {}
    for record in records:
        k = key(record)
        if k in out:
            log.error("duplicate_key", collection=name, key=str(k))
            return duplicate_key(name, str(k), origin=_ORIGIN)
        out[k] = record
    return Ok(out)


class LexiconStore:
    """Immutable lexicon. Construct with `LexiconStore.build`."""

    __slots__ = ("_collections", "_stems")

    def __init__(self, collections: Mapping[LexemeCategory, _Collection], stems: Mapping[GrammaticalCase, SentenceStemRecord]):
        self._collections = MappingProxyType(dict(collections))
        self._stems = MappingProxyType(dict(stems))

    @classmethod
    def build(cls, data: LexiconData) -> Result["LexiconStore", AppError]:
        """Index record sets by canonical key; a repeated key is an error, never an overwrite."""
        sources = (
            (LexemeCategory.NOUN, data.nouns),
            (LexemeCategory.ADJECTIVE, data.adjectives),
            (LexemeCategory.PRONOUN, data.pronouns),
        )
        collections: dict[LexemeCategory, _Collection] = {}
        for category, records in sources:
            match _index(category.plural, records, lambda r: r.canonical):
                case Ok(indexed):
                    collections[category] = _Collection(
                        records=MappingProxyType(indexed),
                        order=tuple(sorted(indexed)),
                    )
                case err:
                    return err

        stems = _index("stems", data.stems, lambda s: s.case)
        if stems.is_err():
            return stems

        store = cls(collections, stems.unwrap())
        log.info("store_built", **store.summary())
        return Ok(store)

    def _collection(self, category: LexemeCategory) -> _Collection:
        return self._collections[LexemeCategory(category)]

    def get(self, category: LexemeCategory, key: str) -> Result[LexemeRecord, AppError]:
        record = self._collection(category).records.get(key)
        if record is None:
            return lexeme_not_found(LexemeCategory(category).value, key, origin=_ORIGIN)
        return Ok(record)

    def keys(self, category: LexemeCategory) -> frozenset[str]:
        return frozenset(self._collection(category).order)

    def records(self, category: LexemeCategory) -> Iterator[LexemeRecord]:
        """Records in canonical-key order."""
        coll = self._collection(category)
        return (coll.records[k] for k in coll.order)

    def pick(self, category: LexemeCategory, rng: RandomIndex) -> Result[LexemeRecord, AppError]:
        """Uniform random record; the randomness comes from `rng`."""
        coll = self._collection(category)
        if not coll.order:
            return empty_collection(LexemeCategory(category).plural, origin=_ORIGIN)
        return Ok(coll.records[coll.order[rng.index(len(coll.order))]])

    def stem(self, case: GrammaticalCase) -> Result[SentenceStemRecord, AppError]:
        record = self._stems.get(case)
        if record is None:
            return case_not_found(str(getattr(case, "value", case)), origin=_ORIGIN)
        return Ok(record)

    def summary(self) -> dict[str, int]:
        counts = {c.plural: len(coll.order) for c, coll in self._collections.items()}
        counts["stems"] = len(self._stems)
        return counts

    def __contains__(self, item: tuple[LexemeCategory, str]) -> bool:
        category, key = item
        return key in self._collection(category).records

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={v}" for k, v in self.summary().items())
        return f"LexiconStore({counts})"
