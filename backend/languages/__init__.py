"""Grammatical types and language-specific declension.

Only Russian is implemented; see `languages.russian`.
"""
from .types import Animacy, Gender, GrammaticalCase, GrammaticalNumber, LexemeCategory, StemLanguage
from .base import FixedIndex, RandomIndex, SeededRandomIndex

__all__ = [
    "Animacy",
    "Gender",
    "GrammaticalCase",
    "GrammaticalNumber",
    "LexemeCategory",
    "StemLanguage",
    "FixedIndex",
    "RandomIndex",
    "SeededRandomIndex",
]
