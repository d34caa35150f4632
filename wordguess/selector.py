# Word selection with seen-word tracking.
#
# WordSelector serves the frequency corpus:
# - Pick uniformly among tier words not yet seen and not excluded by the caller.
# - When nothing is left, clear the whole seen set (every tier, not only the
#   requested one) and pick again from the full tier. Caller exclusions such as
#   personal history are dropped for that retry, so a repeat beats no word.
#
# DictionaryWordSelector serves words whose definitions come from the
# dictionary API. It walks an ordered list of candidate sources; each source
# tries one candidate and yields a Word or None, and the last source never fails.

from __future__ import annotations
import itertools
import logging
import random
import time
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple
from .config import DATABASE_SOURCE, DATABASE_VERSION
from .corpus import WordCorpus, classify_difficulty
from .models import DictionaryStats, Word, WordStats
from .wordlists import CURATED_WORDS, DYNAMIC_WORD_POOLS, FALLBACK_WORDS, GENERIC_DICTIONARY_WORDS

logger = logging.getLogger(__name__)

_word_ids = itertools.count(int(time.time() * 1000))


def next_word_id() -> int:
    return next(_word_ids)


def _normalize(words: Iterable[str]) -> Set[str]:
    return {" ".join(w.split()).upper() for w in words if w and w.strip()}


class SeenWords:
    """Upper-cased words dispensed since the last reset."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: Set[str] = _normalize(words)

    def add(self, word: str) -> None:
        self._words.add(word.upper())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._words)

    def reset(self) -> None:
        self._words.clear()


class WordSelector:
    def __init__(self, corpus: WordCorpus, seen: Optional[SeenWords] = None,
                 rng: Optional[random.Random] = None):
        self.corpus = corpus
        self.seen = seen if seen is not None else SeenWords()
        self.rng = rng or random.Random()

    def select_word(self, difficulty: str = "mixed", exclude: Iterable[str] = ()) -> Optional[Word]:
        """
        Return a random word from `difficulty` that is neither seen nor in
        `exclude`, or None when the tier has no words at all.
        Raises ValueError for an unknown tier name.
        """
        pool = self.corpus.tier(difficulty)
        if not pool:
            return None

        excluded = _normalize(exclude)
        available = [e for e in pool if e.word not in excluded and e.word not in self.seen]
        if not available:
            logger.info(
                "All %d %s words seen (%d excluded by caller); resetting seen-word tracking",
                len(pool), difficulty, len(excluded),
            )
            self.seen.reset()
            available = [e for e in pool if e.word not in self.seen]

        entry = self.rng.choice(available)
        self.seen.add(entry.word)
        return entry.to_word(next_word_id())

    def smart_word(self, personal_seen: Iterable[str], difficulty: str = "mixed") -> Optional[Word]:
        # Personal history is only read here; exhaustion clears the local set alone.
        return self.select_word(difficulty, exclude=personal_seen)

    def stats(self) -> WordStats:
        return WordStats(
            total=len(self.corpus),
            common=len(self.corpus.tier("easy")),
            moderate=len(self.corpus.tier("medium")),
            expert=len(self.corpus.tier("hard")),
            used=len(self.seen),
            database_version=DATABASE_VERSION,
            source=DATABASE_SOURCE if self.corpus.source == "database" else "Built-in word list",
        )

    def reset(self) -> None:
        self.seen.reset()


DefinitionLookup = Callable[[str], Optional[str]]


class CandidateSource:
    name = "source"

    def try_get_candidate(self, exclude: SeenWords) -> Optional[Word]:
        raise NotImplementedError


class DictionaryListSource(CandidateSource):
    """
    One unseen word from a fixed list, defined through the dictionary lookup.
    With recycle=True an exhausted list clears the seen set and starts over.
    """

    def __init__(self, name: str, words: Sequence[str], lookup: DefinitionLookup,
                 rng: random.Random, recycle: bool = False):
        self.name = name
        self.words = list(dict.fromkeys(w.upper() for w in words))
        self.lookup = lookup
        self.rng = rng
        self.recycle = recycle

    def try_get_candidate(self, exclude: SeenWords) -> Optional[Word]:
        available = [w for w in self.words if w not in exclude]
        if not available:
            if not self.recycle or not self.words:
                return None
            logger.info("%s words exhausted; resetting seen-word tracking", self.name)
            exclude.reset()
            available = self.words

        candidate = self.rng.choice(available)
        definition = self.lookup(candidate)
        if definition is None:
            logger.info("No usable definition for %s (%s); trying next source", candidate, self.name)
            return None

        exclude.add(candidate)
        return Word(
            id=next_word_id(),
            word=candidate,
            definition=definition,
            difficulty=classify_difficulty(candidate),
            category="general",
        )


class FallbackSource(CandidateSource):
    name = "fallback"

    def __init__(self, rng: random.Random, words: Sequence[Tuple[str, str]] = FALLBACK_WORDS):
        self.rng = rng
        self.words = list(words)

    def try_get_candidate(self, exclude: SeenWords) -> Optional[Word]:
        word, definition = self.rng.choice(self.words)
        return Word(
            id=next_word_id(),
            word=word,
            definition=definition,
            difficulty=classify_difficulty(word),
            category="general",
        )


def dynamic_pool_words() -> List[str]:
    return list(dict.fromkeys(w for pool in DYNAMIC_WORD_POOLS.values() for w in pool))


def default_sources(lookup: DefinitionLookup, rng: random.Random) -> List[CandidateSource]:
    return [
        DictionaryListSource("curated", CURATED_WORDS, lookup, rng),
        DictionaryListSource("dynamic", dynamic_pool_words(), lookup, rng),
        DictionaryListSource("generic", GENERIC_DICTIONARY_WORDS, lookup, rng, recycle=True),
        FallbackSource(rng),
    ]


class DictionaryWordSelector:
    def __init__(self, lookup: DefinitionLookup, seen: Optional[SeenWords] = None,
                 rng: Optional[random.Random] = None,
                 sources: Optional[List[CandidateSource]] = None):
        self.seen = seen if seen is not None else SeenWords()
        self.rng = rng or random.Random()
        self.sources = sources if sources is not None else default_sources(lookup, self.rng)

    def select_word(self) -> Optional[Word]:
        for source in self.sources:
            word = source.try_get_candidate(self.seen)
            if word is not None:
                logger.debug("Selected %s from %s source", word.word, source.name)
                return word
        return None

    def stats(self) -> DictionaryStats:
        return DictionaryStats(
            total_curated=len(CURATED_WORDS),
            total_dynamic=len(dynamic_pool_words()),
            used=len(self.seen),
        )

    def reset(self) -> None:
        self.seen.reset()
