# tests/conftest.py
import pytest

from languages.base import FixedIndex
from languages.russian import (
    AdjectiveRecord,
    DeclensionService,
    LexiconData,
    LexiconStore,
    NounRecord,
    PronounRecord,
    SentenceStemRecord,
)
from languages.types import Animacy, Gender, GrammaticalCase


def noun(nom, gen, acc, dat, inst, prep, pl, gender, animacy):
    """pl: nominative, genitive, dative, instrumental, prepositional plural."""
    forms = dict(zip(("nom", "gen", "acc", "dat", "inst", "prep"), (nom, gen, acc, dat, inst, prep)))
    forms.update(zip(("pl_nom", "pl_gen", "pl_dat", "pl_inst", "pl_prep"), pl))
    return NounRecord(canonical=nom, gender=gender, animacy=animacy, forms=forms)


def modifier(cls, *cells):
    keys = (
        "masc_nom", "masc_gen", "masc_dat", "masc_inst", "masc_prep",
        "fem_nom", "fem_acc", "fem_oth", "neu_nom",
        "pl_nom", "pl_gen", "pl_dat", "pl_inst", "pl_prep",
    )
    return cls(canonical=cells[0], forms=dict(zip(keys, cells)))


NOUNS = (
    noun("друг", "друга", "друга", "другу", "другом", "друге",
         ("друзья", "друзей", "друзьям", "друзьями", "друзьях"), Gender.MASCULINE, Animacy.ANIMATE),
    noun("стол", "стола", "стол", "столу", "столом", "столе",
         ("столы", "столов", "столам", "столами", "столах"), Gender.MASCULINE, Animacy.INANIMATE),
    noun("книга", "книги", "книгу", "книге", "книгой", "книге",
         ("книги", "книг", "книгам", "книгами", "книгах"), Gender.FEMININE, Animacy.INANIMATE),
    noun("сестра", "сестры", "сестру", "сестре", "сестрой", "сестре",
         ("сёстры", "сестёр", "сёстрам", "сёстрами", "сёстрах"), Gender.FEMININE, Animacy.ANIMATE),
    noun("окно", "окна", "окно", "окну", "окном", "окне",
         ("окна", "окон", "окнам", "окнами", "окнах"), Gender.NEUTER, Animacy.INANIMATE),
)

ADJECTIVES = (
    modifier(AdjectiveRecord, "новый", "нового", "новому", "новым", "новом",
             "новая", "новую", "новой", "новое",
             "новые", "новых", "новым", "новыми", "новых"),
)

PRONOUNS = (
    modifier(PronounRecord, "наш", "нашего", "нашему", "нашим", "нашем",
             "наша", "нашу", "нашей", "наше",
             "наши", "наших", "нашим", "нашими", "наших"),
)

STEMS = (
    SentenceStemRecord(case=GrammaticalCase.NOMINATIVE, russian="Это", english="This is"),
    SentenceStemRecord(case=GrammaticalCase.ACCUSATIVE, russian="Я вижу", english="I see"),
)


@pytest.fixture
def lexicon_data():
    return LexiconData(nouns=NOUNS, adjectives=ADJECTIVES, pronouns=PRONOUNS, stems=STEMS)


@pytest.fixture
def store(lexicon_data):
    return LexiconStore.build(lexicon_data).unwrap()


@pytest.fixture
def service(store):
    # Keys sort as: друг, книга, окно, сестра, стол
    return DeclensionService(store, rng=FixedIndex(0))
