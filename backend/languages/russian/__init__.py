"""Russian noun, adjective and pronoun declension."""
from .records import AdjectiveRecord, NounRecord, PronounRecord, SentenceStemRecord, LexemeRecord
from .resolver import modifier_form_key, noun_form_key
from .store import LexiconData, LexiconStore
from .declension import DeclensionService, DeclinedPhrase, ParadigmCell

__all__ = [
    "AdjectiveRecord",
    "NounRecord",
    "PronounRecord",
    "SentenceStemRecord",
    "LexemeRecord",
    "modifier_form_key",
    "noun_form_key",
    "LexiconData",
    "LexiconStore",
    "DeclensionService",
    "DeclinedPhrase",
    "ParadigmCell",
]
