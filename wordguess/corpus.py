# Word corpus: frequency-ranked entries loaded once at startup.
# Difficulty follows the frequency rank when one is known:
# - rank 1..2000      -> easy   ("common")
# - rank 2001..10000  -> medium ("moderate")
# - rank above 10000  -> hard   ("expert")
# Entries without a rank fall back to a length / common-word heuristic.

from __future__ import annotations
import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from .config import TIER_PREVIEW_SIZE
from .models import DIFFICULTIES, EDUCATIONAL_LEVELS, TIERS, Difficulty, Word

logger = logging.getLogger(__name__)

COMMON_RANK_LIMIT = 2000
MODERATE_RANK_LIMIT = 10000

# Frequency tier names used by database files.
RANK_TIER_NAMES = {"common": "easy", "moderate": "medium", "expert": "hard"}

EDUCATIONAL_RANGES: Dict[str, Tuple[int, int]] = {
    "elementary": (1, 1000),
    "intermediate": (1001, 5000),
    "advanced": (5001, 60000),
}

COMMON_WORDS = frozenset([
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER", "WAS", "ONE",
    "OUR", "HAD", "BY", "WORD", "WHAT", "SAID", "EACH", "WHICH", "DO", "HOW", "THEIR",
    "IF", "WILL", "UP", "OTHER", "ABOUT", "OUT", "MANY", "THEN", "THEM", "THESE", "SO",
    "SOME", "WOULD", "MAKE", "LIKE", "INTO", "HIM", "HAS", "TWO", "MORE", "GO", "NO",
    "WAY", "COULD", "MY", "THAN", "FIRST", "BEEN", "CALL", "WHO", "OIL", "ITS", "NOW",
    "FIND", "LONG", "DOWN", "DAY", "DID", "GET", "COME", "MADE", "MAY", "PART",
])

_WORD_RE = re.compile(r"^[A-Z]+(?:[ '\-][A-Z]+)*$")


def difficulty_for_rank(rank: int) -> Difficulty:
    if rank <= COMMON_RANK_LIMIT:
        return "easy"
    if rank <= MODERATE_RANK_LIMIT:
        return "medium"
    return "hard"


def classify_difficulty(word: str) -> Difficulty:
    """Heuristic difficulty for words without a frequency rank."""
    w = word.strip().upper()
    if len(w) <= 5 or w in COMMON_WORDS:
        return "easy"
    if len(w) <= 8:
        return "medium"
    return "hard"


class CorpusEntry(BaseModel):
    word: str
    definition: str
    frequency_rank: Optional[int] = Field(None, gt=0)
    difficulty: Optional[Difficulty] = None
    category: str = "general"

    @field_validator("word", mode="before")
    @classmethod
    def validate_word(cls, v):
        if not isinstance(v, str):
            raise ValueError("word must be a string")
        w = " ".join(v.split()).upper()
        if not _WORD_RE.match(w):
            raise ValueError(f"word must be alphabetic: {v!r}")
        return w

    @field_validator("definition", mode="before")
    @classmethod
    def validate_definition(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError("definition must be a non-empty string")
        return v.strip()

    @field_validator("difficulty", mode="before")
    @classmethod
    def map_rank_tier(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return RANK_TIER_NAMES.get(v, v)
        return v

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        return v or "general"

    @model_validator(mode="after")
    def derive_difficulty(self):
        # The rank always wins so tier membership is a pure function of it.
        if self.frequency_rank is not None:
            self.difficulty = difficulty_for_rank(self.frequency_rank)
        elif self.difficulty is None:
            self.difficulty = classify_difficulty(self.word)
        return self

    def to_word(self, word_id: int) -> Word:
        return Word(
            id=word_id,
            word=self.word,
            definition=self.definition,
            difficulty=self.difficulty,
            category=self.category,
        )


BUILTIN_WORDS = [
    {"word": "HOUSE", "definition": "A building for human habitation.", "frequency_rank": 150},
    {"word": "WATER", "definition": "A transparent liquid that forms rivers, lakes, oceans, and rain.", "frequency_rank": 95},
    {"word": "SCHOOL", "definition": "An institution for educating children.", "frequency_rank": 360},
    {"word": "GARDEN", "definition": "A piece of ground used to grow flowers, fruit, or vegetables.", "frequency_rank": 1450},
    {"word": "JOURNEY", "definition": "An act of travelling from one place to another.", "frequency_rank": 2300},
    {"word": "HARMONY", "definition": "The combination of musical notes sounded together to pleasing effect.", "frequency_rank": 6800},
    {"word": "CATALYST", "definition": "A substance that increases the rate of a chemical reaction without being changed.", "frequency_rank": 9400},
    {"word": "EPHEMERAL", "definition": "Lasting for a very short time.", "frequency_rank": 24500},
    {"word": "SERENDIPITY", "definition": "The occurrence of events by chance in a happy or beneficial way.", "frequency_rank": 31200},
    {"word": "UBIQUITOUS", "definition": "Present, appearing, or found everywhere.", "frequency_rank": 18700},
]


class WordCorpus:
    def __init__(self, entries: Iterable[CorpusEntry], source: str = "builtin"):
        self.source = source
        self._index: Dict[str, CorpusEntry] = {}
        for e in entries:
            if e.word in self._index:
                logger.debug("Skipping duplicate corpus word %s", e.word)
                continue
            self._index[e.word] = e
        self.entries: List[CorpusEntry] = list(self._index.values())
        self._tiers: Dict[str, List[CorpusEntry]] = {
            d: [e for e in self.entries if e.difficulty == d][:TIER_PREVIEW_SIZE]
            for d in DIFFICULTIES
        }

    @classmethod
    def from_records(cls, records: Iterable[dict], source: str = "builtin") -> "WordCorpus":
        entries = []
        for i, rec in enumerate(records):
            try:
                entries.append(CorpusEntry.model_validate(rec))
            except ValidationError as e:
                logger.warning("Skipping malformed corpus entry #%d: %s", i, e.errors()[0]["msg"])
        return cls(entries, source=source)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, word: str) -> Optional[CorpusEntry]:
        return self._index.get(" ".join(word.split()).upper())

    def tier(self, difficulty: str) -> Sequence[CorpusEntry]:
        if difficulty not in TIERS:
            raise ValueError(f"Invalid difficulty level: {difficulty}")
        if difficulty == "mixed":
            return self.entries
        return self._tiers[difficulty]

    def by_frequency_range(self, min_rank: int, max_rank: int) -> List[CorpusEntry]:
        return [
            e for e in self.entries
            if e.frequency_rank is not None and min_rank <= e.frequency_rank <= max_rank
        ]

    def educational(self, level: str) -> List[CorpusEntry]:
        if level not in EDUCATIONAL_LEVELS:
            raise ValueError(f"Invalid educational level: {level}")
        return self.by_frequency_range(*EDUCATIONAL_RANGES[level])

    def search(self, pattern: str) -> List[CorpusEntry]:
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"Invalid search pattern: {e}") from e
        return [
            e for e in self.entries
            if regex.search(e.word) or regex.search(e.definition)
        ]


def load_corpus(path: Optional[Path]) -> WordCorpus:
    """
    Load the frequency database at `path`, or the built-in list when the file
    is missing or unreadable. Accepts {"words": [...]} or a bare list.
    """
    if path is None or not Path(path).exists():
        logger.info("Word database not found, using built-in word list")
        return WordCorpus.from_records(BUILTIN_WORDS)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Error loading word database %s: %s", path, e)
        return WordCorpus.from_records(BUILTIN_WORDS)

    records = data.get("words", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        logger.error("Word database %s has no word list", path)
        return WordCorpus.from_records(BUILTIN_WORDS)

    corpus = WordCorpus.from_records(records, source="database")
    logger.info(
        "Loaded %d words with frequency rankings (easy=%d, medium=%d, hard=%d)",
        len(corpus), len(corpus.tier("easy")), len(corpus.tier("medium")), len(corpus.tier("hard")),
    )
    return corpus
