# Pydantic models and data structures for API IO.

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Literal

Difficulty = Literal["easy", "medium", "hard"]
GameMode = Literal["normal", "timed", "challenge"]
VocabularyLevel = Literal["elementary", "intermediate", "advanced"]

DIFFICULTIES = ("easy", "medium", "hard")
TIERS = DIFFICULTIES + ("mixed",)
EDUCATIONAL_LEVELS = ("elementary", "intermediate", "advanced")


class Word(BaseModel):
    id: int
    word: str = Field(..., description="Upper-case answer")
    definition: str
    difficulty: Difficulty
    category: str = "general"


class WordStats(BaseModel):
    total: int
    common: int
    moderate: int
    expert: int
    used: int
    database_version: str
    source: str


class DictionaryStats(BaseModel):
    total_curated: int
    total_dynamic: int
    used: int


class MessageResponse(BaseModel):
    message: str


class WordHistoryCreate(BaseModel):
    device_id: str = Field(..., min_length=1, description="Client-generated stable device ID")
    user_id: Optional[str] = Field(None, description="Signed-in user, if any")
    word: str
    seen_at: Optional[datetime] = Field(None, description="Defaults to now")
    guessed_correctly: int = Field(0, ge=-1, le=1, description="0 not guessed, 1 correct, -1 incorrect")
    hint_count: int = Field(0, ge=0)
    game_mode: GameMode = "normal"

    @field_validator("word")
    @classmethod
    def normalize_word(cls, v: str) -> str:
        w = v.strip().upper()
        if not w:
            raise ValueError("word must not be empty")
        return w


class WordHistoryRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: str
    user_id: Optional[str] = None
    word: str
    seen_at: Optional[datetime] = None
    guessed_correctly: int
    hint_count: int
    game_mode: str


class SeenWordsResponse(BaseModel):
    seen_words: List[str]


class WordHistoryResponse(BaseModel):
    history: List[WordHistoryRecord]


class PreferencesUpdate(BaseModel):
    preferred_difficulty: Optional[Literal["easy", "medium", "hard", "mixed"]] = None
    sound_enabled: Optional[bool] = None
    hints_enabled: Optional[bool] = None
    daily_word_goal: Optional[int] = Field(None, ge=1, le=500)
    vocabulary_level: Optional[VocabularyLevel] = None


class PreferencesCreate(PreferencesUpdate):
    device_id: str = Field(..., min_length=1)
    user_id: Optional[str] = None


class PreferencesRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: str
    user_id: Optional[str] = None
    preferred_difficulty: str
    sound_enabled: bool
    hints_enabled: bool
    daily_word_goal: int
    vocabulary_level: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
