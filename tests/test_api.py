"""
Tests for the HTTP endpoints.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from wordguess.corpus import WordCorpus
from wordguess.main import app, get_word_service
from wordguess.selector import DictionaryListSource, DictionaryWordSelector, WordSelector
from wordguess.service import WordService

from .conftest import FakeDictionary, SAMPLE_RECORDS


EASY = {"CAT", "HOUSE", "WATER"}


class TestWordEndpoints:

    def test_random_word_from_database(self, client):
        resp = client.get("/api/words/random")
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == {"id", "word", "definition", "difficulty", "category"}
        assert data["word"] in {r["word"] for r in SAMPLE_RECORDS}

    def test_random_word_without_database_uses_dictionary(self, client, word_service, rng):
        builtin = WordCorpus.from_records(SAMPLE_RECORDS, source="builtin")
        lookup = FakeDictionary({"OCEAN": "A very large expanse of sea, in particular each of the main areas."})
        word_service.corpus = builtin
        word_service.dictionary = DictionaryWordSelector(lookup.lookup, rng=rng, sources=[
            DictionaryListSource("generic", ["OCEAN"], lookup.lookup, rng),
        ])

        resp = client.get("/api/words/random")

        assert resp.status_code == 200
        assert resp.json()["word"] == "OCEAN"
        assert lookup.calls == ["OCEAN"]

    def test_by_difficulty(self, client):
        resp = client.get("/api/words/difficulty/easy")
        assert resp.status_code == 200
        assert resp.json()["word"] in EASY
        assert resp.json()["difficulty"] == "easy"

    def test_by_difficulty_mixed(self, client):
        assert client.get("/api/words/difficulty/mixed").status_code == 200

    def test_invalid_difficulty(self, client):
        resp = client.get("/api/words/difficulty/legendary")
        assert resp.status_code == 400

    def test_tier_cycles_without_repeats(self, client):
        words = [client.get("/api/words/difficulty/easy").json()["word"] for _ in range(3)]
        assert set(words) == EASY
        # Exhausted tier still answers.
        assert client.get("/api/words/difficulty/easy").json()["word"] in EASY

    def test_empty_corpus_is_404(self, client, word_service, rng):
        empty = WordCorpus([], source="database")
        word_service.corpus = empty
        word_service.selector = WordSelector(empty, rng=rng)
        assert client.get("/api/words/random").status_code == 404
        assert client.get("/api/words/difficulty/hard").status_code == 404

    def test_stats(self, client):
        client.get("/api/words/difficulty/hard")
        data = client.get("/api/words/stats").json()
        assert data["total"] == 7
        assert (data["common"], data["moderate"], data["expert"]) == (3, 2, 2)
        assert data["used"] == 1
        assert data["database_version"] == "2.0.0"
        assert data["source"]

    def test_reset(self, client):
        client.get("/api/words/difficulty/hard")
        resp = client.post("/api/words/reset")
        assert resp.status_code == 200
        assert "reset" in resp.json()["message"]
        assert client.get("/api/words/stats").json()["used"] == 0

    def test_frequency_range(self, client):
        resp = client.get("/api/words/frequency-range", params={"minRank": 1, "maxRank": 1000})
        assert resp.status_code == 200
        assert {w["word"] for w in resp.json()} == EASY

    def test_frequency_range_defaults(self, client):
        assert {w["word"] for w in client.get("/api/words/frequency-range").json()} == EASY

    def test_frequency_range_inverted(self, client):
        resp = client.get("/api/words/frequency-range", params={"minRank": 500, "maxRank": 10})
        assert resp.status_code == 400

    def test_educational(self, client):
        resp = client.get("/api/words/educational/advanced")
        assert {w["word"] for w in resp.json()} == {"HARMONY", "ELEPHANT", "EPHEMERAL"}
        assert client.get("/api/words/educational/graduate").status_code == 400

    def test_search(self, client):
        resp = client.get("/api/words/search", params={"q": "mammal"})
        assert resp.status_code == 200
        assert {w["word"] for w in resp.json()} == {"CAT", "ELEPHANT"}

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "(unclosed"}])
    def test_search_bad_query(self, client, params):
        assert client.get("/api/words/search", params=params).status_code == 400

    def test_lookup(self, client):
        assert client.get("/api/words/lookup/journey").json()["word"] == "JOURNEY"
        assert client.get("/api/words/lookup/nothing").status_code == 404

    def test_dictionary_endpoints(self, client):
        resp = client.get("/api/words/dictionary/random")
        assert resp.status_code == 200
        assert resp.json()["definition"]
        stats = client.get("/api/words/dictionary/stats").json()
        assert set(stats) == {"total_curated", "total_dynamic", "used"}


class TestSmartEndpoint:

    def _see(self, client, device_id, word, **extra):
        body = {"device_id": device_id, "word": word, **extra}
        assert client.post("/api/word-history", json=body).status_code == 200

    def test_excludes_device_history(self, client):
        self._see(client, "dev-1", "cat")
        self._see(client, "dev-1", "house")

        for _ in range(5):
            client.post("/api/words/reset")
            resp = client.get("/api/words/smart/dev-1", params={"difficulty": "easy"})
            assert resp.status_code == 200
            assert resp.json()["word"] == "WATER"

    def test_user_history_follows_user(self, client):
        self._see(client, "phone", "cat", user_id="u-1")
        self._see(client, "phone", "water", user_id="u-1")

        resp = client.get("/api/words/smart/laptop", params={"difficulty": "easy", "userId": "u-1"})
        assert resp.json()["word"] == "HOUSE"

    def test_everything_seen_still_answers(self, client):
        for w in EASY:
            self._see(client, "dev-2", w)
        resp = client.get("/api/words/smart/dev-2", params={"difficulty": "easy"})
        assert resp.status_code == 200
        assert resp.json()["word"] in EASY
        # Personal history is untouched.
        seen = client.get("/api/word-history/seen/dev-2").json()["seen_words"]
        assert set(seen) == EASY

    def test_empty_query_means_mixed(self, client):
        resp = client.get("/api/words/smart/dev-1?difficulty=&userId=")
        assert resp.status_code == 200
        assert resp.json()["word"] in {r["word"] for r in SAMPLE_RECORDS}

    def test_invalid_difficulty(self, client):
        assert client.get("/api/words/smart/dev-1", params={"difficulty": "nope"}).status_code == 400

    def test_history_failure_degrades(self, corpus, selector, rng):
        def broken_reader(device_id, user_id):
            raise SQLAlchemyError("database is down")

        svc = WordService(
            corpus=corpus,
            selector=selector,
            dictionary=DictionaryWordSelector(FakeDictionary().lookup, rng=rng),
            seen_words_reader=broken_reader,
        )
        app.dependency_overrides[get_word_service] = lambda: svc
        try:
            resp = TestClient(app).get("/api/words/smart/dev-1", params={"difficulty": "hard"})
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 200
        assert resp.json()["word"] in {"ELEPHANT", "EPHEMERAL"}


class TestHistoryEndpoints:

    def test_record_and_list(self, client):
        resp = client.post("/api/word-history", json={
            "device_id": "dev-1", "word": "journey", "guessed_correctly": 1, "hint_count": 2, "game_mode": "timed",
        })
        assert resp.status_code == 200
        record = resp.json()
        assert record["word"] == "JOURNEY"
        assert record["hint_count"] == 2
        assert record["seen_at"]

        history = client.get("/api/word-history/dev-1").json()["history"]
        assert [h["word"] for h in history] == ["JOURNEY"]
        assert client.get("/api/word-history/seen/dev-1").json() == {"seen_words": ["JOURNEY"]}

    def test_record_validation(self, client):
        assert client.post("/api/word-history", json={"device_id": "d", "word": "cat", "game_mode": "arcade"}).status_code == 422
        assert client.post("/api/word-history", json={"device_id": "d", "word": "   "}).status_code == 422
        assert client.post("/api/word-history", json={"word": "cat"}).status_code == 422

    def test_history_limit(self, client):
        for w in ["cat", "house", "water"]:
            client.post("/api/word-history", json={"device_id": "dev-1", "word": w})
        history = client.get("/api/word-history/dev-1", params={"limit": 2}).json()["history"]
        assert len(history) == 2

    def test_clear(self, client):
        client.post("/api/word-history", json={"device_id": "dev-1", "word": "cat"})
        client.post("/api/word-history", json={"device_id": "dev-2", "word": "dog"})
        assert client.delete("/api/word-history/dev-1").json()["message"] == "Word history cleared"
        assert client.get("/api/word-history/seen/dev-1").json()["seen_words"] == []
        assert client.get("/api/word-history/seen/dev-2").json()["seen_words"] == ["DOG"]

    def test_storage_error_is_500(self, client):
        with patch("wordguess.main.db.get_seen_words", side_effect=SQLAlchemyError("boom")):
            resp = client.get("/api/word-history/seen/dev-1")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}


class TestPreferencesEndpoints:

    def test_missing_preferences(self, client):
        assert client.get("/api/preferences/dev-1").json() == {}

    def test_save_then_update(self, client):
        resp = client.post("/api/preferences", json={"device_id": "dev-1", "preferred_difficulty": "hard"})
        assert resp.status_code == 200
        created = resp.json()
        assert created["preferred_difficulty"] == "hard"
        assert created["daily_word_goal"] == 10
        assert created["sound_enabled"] is True

        resp = client.patch("/api/preferences/dev-1", json={"sound_enabled": False, "daily_word_goal": 25})
        updated = resp.json()
        assert updated["id"] == created["id"]
        assert updated["preferred_difficulty"] == "hard"
        assert updated["sound_enabled"] is False
        assert updated["daily_word_goal"] == 25

        fetched = client.get("/api/preferences/dev-1").json()
        assert fetched["daily_word_goal"] == 25

    def test_patch_creates_row(self, client):
        resp = client.patch("/api/preferences/dev-9", params={"userId": "u-9"}, json={"vocabulary_level": "advanced"})
        assert resp.status_code == 200
        assert resp.json()["vocabulary_level"] == "advanced"
        assert resp.json()["user_id"] == "u-9"

    def test_invalid_preferences(self, client):
        resp = client.post("/api/preferences", json={"device_id": "dev-1", "preferred_difficulty": "extreme"})
        assert resp.status_code == 422


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
