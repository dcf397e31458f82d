"""Immutable lexicon records."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from languages.types import Animacy, Gender, GrammaticalCase


def _freeze(forms: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(forms))


@dataclass(frozen=True, slots=True)
class NounRecord:
    """Noun keyed by its nominative singular."""
    canonical: str
    gender: Gender
    animacy: Animacy
    forms: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "forms", _freeze(self.forms))

    @property
    def is_animate(self) -> bool:
        return self.animacy is Animacy.ANIMATE

    def form(self, key: str) -> str | None:
        return self.forms.get(key) or None


@dataclass(frozen=True, slots=True)
class AdjectiveRecord:
    """Adjective keyed by its masculine nominative singular.

    Has no gender or animacy of its own: both are read from the noun it
    agrees with.
    """
    canonical: str
    forms: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "forms", _freeze(self.forms))

    def form(self, key: str) -> str | None:
        return self.forms.get(key) or None


@dataclass(frozen=True, slots=True)
class PronounRecord(AdjectiveRecord):
    """Possessive/demonstrative pronoun; declines like an adjective."""


@dataclass(frozen=True, slots=True)
class SentenceStemRecord:
    """Fixed verb phrase governing `case`, e.g. accusative: "Я вижу" / "I see"."""
    case: GrammaticalCase
    russian: str
    english: str


LexemeRecord = NounRecord | AdjectiveRecord | PronounRecord
