# Word service: the selectors, the corpus queries and persisted history behind one object.

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Set
from sqlalchemy.exc import SQLAlchemyError
from . import db
from .config import WORD_DATABASE_PATH
from .corpus import WordCorpus, load_corpus
from .definitions import DictionaryClient
from .models import DictionaryStats, Word, WordStats
from .selector import DictionaryWordSelector, WordSelector, next_word_id

logger = logging.getLogger(__name__)

SeenWordsReader = Callable[[str, Optional[str]], Set[str]]


class WordService:
    def __init__(self, corpus: WordCorpus, selector: WordSelector,
                 dictionary: DictionaryWordSelector,
                 seen_words_reader: SeenWordsReader = db.get_seen_words):
        self.corpus = corpus
        self.selector = selector
        self.dictionary = dictionary
        self.seen_words_reader = seen_words_reader

    def random_word(self) -> Optional[Word]:
        # Without a frequency database the dictionary chain gives better variety.
        if self.corpus.source != "database":
            return self.dictionary.select_word()
        return self.selector.select_word("mixed")

    def word_by_difficulty(self, difficulty: str) -> Optional[Word]:
        return self.selector.select_word(difficulty)

    def smart_word(self, device_id: str, user_id: Optional[str] = None,
                   difficulty: str = "mixed") -> Optional[Word]:
        try:
            personal = self.seen_words_reader(device_id, user_id)
        except SQLAlchemyError as e:
            logger.warning("Word history unavailable for %s, using session tracking only: %s", device_id, e)
            personal = set()
        return self.selector.smart_word(personal, difficulty)

    def stats(self) -> WordStats:
        return self.selector.stats()

    def dictionary_word(self) -> Optional[Word]:
        return self.dictionary.select_word()

    def dictionary_stats(self) -> DictionaryStats:
        return self.dictionary.stats()

    def frequency_range(self, min_rank: int, max_rank: int) -> List[Word]:
        if min_rank > max_rank:
            raise ValueError("minRank must not exceed maxRank")
        return [e.to_word(next_word_id()) for e in self.corpus.by_frequency_range(min_rank, max_rank)]

    def educational(self, level: str) -> List[Word]:
        return [e.to_word(next_word_id()) for e in self.corpus.educational(level)]

    def search(self, pattern: str) -> List[Word]:
        if not pattern:
            raise ValueError("Search query required")
        return [e.to_word(next_word_id()) for e in self.corpus.search(pattern)]

    def lookup(self, word: str) -> Optional[Word]:
        entry = self.corpus.get(word)
        return entry.to_word(next_word_id()) if entry else None

    def reset(self) -> None:
        self.selector.reset()
        self.dictionary.reset()


def build_word_service() -> WordService:
    corpus = load_corpus(WORD_DATABASE_PATH)
    client = DictionaryClient()
    return WordService(
        corpus=corpus,
        selector=WordSelector(corpus),
        dictionary=DictionaryWordSelector(client.lookup),
    )
