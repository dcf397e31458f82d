# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from languages.russian import DeclensionService, LexiconData, LexiconStore, NounRecord
from languages.types import Animacy
from main import create_app

from conftest import ADJECTIVES


@pytest.fixture
def client(service):
    with TestClient(create_app(service=service)) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "version": "0.1.0"}


def test_decline_noun(client):
    resp = client.get("/api/declension/nouns/друг", params={"case": "accusative"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["form"] == "друга"
    assert body["category"] == "noun"
    assert body["number"] == "singular"


def test_decline_adjective_with_noun(client):
    resp = client.get("/api/declension/adjective/новый", params={"case": "accusative", "noun": "друг"})
    assert resp.json()["form"] == "нового"


def test_modifier_without_noun_is_bad_request(client):
    resp = client.get("/api/declension/pronouns/наш", params={"case": "genitive"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "E2001_REQUIRED_FIELD_MISSING"


def test_unknown_lexeme_is_404(client):
    resp = client.get("/api/declension/nouns/пёс")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "E4010_LEXEME_NOT_FOUND"


def test_case_outside_closed_set_is_rejected(client):
    resp = client.get("/api/declension/nouns/друг", params={"case": "vocative"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "E2000_VALIDATION_GENERIC"


def test_unknown_category(client):
    resp = client.get("/api/declension/verbs/идти")
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "E2032_UNKNOWN_CATEGORY"


def test_list_and_filter_nouns(client):
    assert client.get("/api/declension/pronouns").json() == ["наш"]
    resp = client.get("/api/declension/nouns", params={"gender": "feminine"})
    assert resp.json() == ["книга", "сестра"]
    resp = client.get("/api/declension/nouns", params={"animacy": "animate", "gender": "masculine"})
    assert resp.json() == ["друг"]


def test_random(client):
    resp = client.get("/api/declension/nouns/random", params={"case": "instrumental", "number": "plural"})
    assert resp.json()["word"] == "друг"
    assert resp.json()["form"] == "друзьями"


def test_paradigm(client):
    resp = client.get("/api/declension/adjectives/новый/paradigm", params={"noun": "окно"})
    cells = resp.json()["cells"]
    assert len(cells) == 12
    assert {c["form"] for c in cells if c["case"] == "accusative" and c["number"] == "singular"} == {"новое"}


def test_sentence_stem(client):
    resp = client.get("/api/declension/stems/accusative", params={"language": "english"})
    assert resp.json()["text"] == "I see"
    assert client.get("/api/declension/stems/dative").status_code == 404


def test_phrase(client):
    resp = client.get(
        "/api/declension/phrase",
        params={"noun": "сестра", "case": "accusative", "adjective": "новый", "pronoun": "наш"},
    )
    assert resp.json()["text"] == "нашу новую сестру"


def test_correlation_id_header(client):
    resp = client.get("/health", headers={"X-Correlation-ID": "abc12345"})
    assert resp.headers["X-Correlation-ID"] == "abc12345"


def test_error_body_carries_request_correlation_id(client):
    resp = client.get("/api/declension/nouns/пёс", headers={"X-Correlation-ID": "feedbeef"})
    assert resp.json()["error"]["correlation_id"] == "feedbeef"
    assert resp.json()["error"]["metadata"] == {"category": "noun", "word": "пёс"}


def test_corrupt_noun_gender_is_a_fatal_server_error():
    orphan = NounRecord(canonical="сирота", gender="common", animacy=Animacy.ANIMATE, forms={"nom": "сирота"})
    store = LexiconStore.build(LexiconData(nouns=(orphan,), adjectives=ADJECTIVES)).unwrap()
    with TestClient(create_app(service=DeclensionService(store))) as c:
        resp = c.get("/api/declension/adjectives/новый", params={"case": "genitive", "noun": "сирота"})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "E4030_INVALID_GENDER"
    assert resp.json()["error"]["fatal"] is True


def test_lookup_miss_is_not_fatal(client):
    assert client.get("/api/declension/nouns/пёс").json()["error"]["fatal"] is False
