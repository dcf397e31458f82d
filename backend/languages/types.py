"""Shared type definitions for the declension core.

Closed grammatical sets. Each member's value is its full name; `code` is the
short form used in the lexicon data files.
"""
from enum import Enum


class GrammaticalCase(str, Enum):
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    ACCUSATIVE = "accusative"
    DATIVE = "dative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"

    @property
    def code(self) -> str:
        return _CASE_CODES[self]


class GrammaticalNumber(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"

    @property
    def code(self) -> str:
        return "sg" if self is GrammaticalNumber.SINGULAR else "pl"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @property
    def code(self) -> str:
        return self.value[0]  # m, f, n


class Animacy(str, Enum):
    ANIMATE = "animate"
    INANIMATE = "inanimate"

    @property
    def code(self) -> str:
        return self.value[0]  # a, i


class LexemeCategory(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"
    PRONOUN = "pronoun"

    @property
    def plural(self) -> str:
        return f"{self.value}s"


class StemLanguage(str, Enum):
    RUSSIAN = "russian"
    ENGLISH = "english"

    @property
    def code(self) -> str:
        return "rus" if self is StemLanguage.RUSSIAN else "eng"


_CASE_CODES = {
    GrammaticalCase.NOMINATIVE: "nom",
    GrammaticalCase.GENITIVE: "gen",
    GrammaticalCase.ACCUSATIVE: "acc",
    GrammaticalCase.DATIVE: "dat",
    GrammaticalCase.INSTRUMENTAL: "inst",
    GrammaticalCase.PREPOSITIONAL: "prep",
}
