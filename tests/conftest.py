"""
Pytest configuration and fixtures for tests.
"""
import random

import pytest
from fastapi.testclient import TestClient

from wordguess import db
from wordguess.corpus import WordCorpus
from wordguess.main import app, get_word_service
from wordguess.selector import DictionaryWordSelector, SeenWords, WordSelector
from wordguess.service import WordService


SAMPLE_RECORDS = [
    {"word": "CAT", "definition": "A small domesticated carnivorous mammal.", "frequency_rank": 300},
    {"word": "HOUSE", "definition": "A building for human habitation.", "frequency_rank": 150},
    {"word": "WATER", "definition": "A transparent liquid that forms rivers and rain.", "frequency_rank": 95},
    {"word": "JOURNEY", "definition": "An act of travelling from one place to another.", "frequency_rank": 2300},
    {"word": "HARMONY", "definition": "Musical notes sounded together to pleasing effect.", "frequency_rank": 6800},
    {"word": "ELEPHANT", "definition": "A very large plant-eating mammal with a trunk.", "frequency_rank": 15000},
    {"word": "EPHEMERAL", "definition": "Lasting for a very short time.", "frequency_rank": 24500},
]


class FakeDictionary:
    """Definition lookup that answers from a dict and records every call."""

    def __init__(self, definitions=None):
        self.definitions = {k.upper(): v for k, v in (definitions or {}).items()}
        self.calls = []

    def lookup(self, word):
        self.calls.append(word)
        return self.definitions.get(word.upper())


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def corpus():
    return WordCorpus.from_records(SAMPLE_RECORDS, source="database")


@pytest.fixture
def selector(corpus, rng):
    return WordSelector(corpus, SeenWords(), rng=rng)


@pytest.fixture
def fake_dictionary():
    return FakeDictionary({"OCEAN": "A very large expanse of sea, in particular each of the main areas."})


@pytest.fixture
def temp_db(tmp_path):
    """Point the data layer at a throwaway SQLite file."""
    db.configure(f"sqlite:///{tmp_path / 'test.db'}")
    db.init_db()
    yield db
    db.configure()


@pytest.fixture
def word_service(corpus, selector, fake_dictionary, rng):
    return WordService(
        corpus=corpus,
        selector=selector,
        dictionary=DictionaryWordSelector(fake_dictionary.lookup, rng=rng),
    )


@pytest.fixture
def client(word_service, temp_db):
    app.dependency_overrides[get_word_service] = lambda: word_service
    yield TestClient(app)
    app.dependency_overrides.clear()
