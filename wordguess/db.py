# Simple relational data layer using SQLAlchemy for word history and preferences.

from __future__ import annotations
from datetime import datetime
from sqlalchemy import create_engine, Column, Integer, String, DateTime, func, Boolean, delete, or_
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.sql import select
from typing import Optional, List, Set
from .config import DB_URL, HISTORY_DEFAULT_LIMIT

Base = declarative_base()

PREFERENCE_DEFAULTS = {
    "preferred_difficulty": "mixed",
    "sound_enabled": True,
    "hints_enabled": True,
    "daily_word_goal": 10,
    "vocabulary_level": "intermediate",
}

class WordHistory(Base):
    __tablename__ = "word_history"
    id = Column(Integer, primary_key=True)
    device_id = Column(String, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=True)
    word = Column(String, nullable=False)
    seen_at = Column(DateTime, server_default=func.now(), nullable=False)
    guessed_correctly = Column(Integer, default=0)  # 0 not guessed, 1 correct, -1 incorrect
    hint_count = Column(Integer, default=0)
    game_mode = Column(String, default="normal")  # "normal"/"timed"/"challenge"

class UserPreferences(Base):
    __tablename__ = "user_preferences"
    id = Column(Integer, primary_key=True)
    device_id = Column(String, index=True, nullable=False)
    user_id = Column(String, nullable=True)
    preferred_difficulty = Column(String, default="mixed")
    sound_enabled = Column(Boolean, default=True)
    hints_enabled = Column(Boolean, default=True)
    daily_word_goal = Column(Integer, default=10)
    vocabulary_level = Column(String, default="intermediate")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

_engine = None
SessionLocal = None

def configure(url: str = DB_URL):
    """(Re)bind the engine; the server uses DB_URL, tests point it elsewhere."""
    global _engine, SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = create_engine(url, echo=False, future=True)
    SessionLocal = sessionmaker(bind=_engine, autoflush=False, autocommit=False,
                                expire_on_commit=False, future=True)
    return _engine

configure()

def init_db():
    Base.metadata.create_all(_engine)

def _owner_filter(model, device_id: str, user_id: Optional[str]):
    # A signed-in user's rows follow them across devices.
    if user_id:
        return or_(model.device_id == device_id, model.user_id == user_id)
    return model.device_id == device_id

def record_seen(device_id: str, word: str, user_id: Optional[str] = None,
                guessed_correctly: int = 0, hint_count: int = 0, game_mode: str = "normal",
                seen_at: Optional[datetime] = None) -> WordHistory:
    with SessionLocal() as s:
        row = WordHistory(
            device_id=device_id,
            user_id=user_id,
            word=word.strip().upper(),
            guessed_correctly=guessed_correctly,
            hint_count=hint_count,
            game_mode=game_mode,
        )
        if seen_at is not None:
            row.seen_at = seen_at
        s.add(row)
        s.commit()
        s.refresh(row)
        return row

def get_seen_words(device_id: str, user_id: Optional[str] = None) -> Set[str]:
    with SessionLocal() as s:
        rows = s.execute(
            select(WordHistory.word).where(_owner_filter(WordHistory, device_id, user_id))
        ).scalars().all()
    return {w.upper() for w in rows}

def get_word_history(device_id: str, user_id: Optional[str] = None,
                     limit: int = HISTORY_DEFAULT_LIMIT) -> List[WordHistory]:
    with SessionLocal() as s:
        return list(s.execute(
            select(WordHistory)
            .where(_owner_filter(WordHistory, device_id, user_id))
            .order_by(WordHistory.seen_at, WordHistory.id)
            .limit(limit)
        ).scalars().all())

def clear_word_history(device_id: str, user_id: Optional[str] = None):
    with SessionLocal() as s:
        s.execute(delete(WordHistory).where(_owner_filter(WordHistory, device_id, user_id)))
        s.commit()

def get_preferences(device_id: str) -> Optional[UserPreferences]:
    with SessionLocal() as s:
        return s.execute(
            select(UserPreferences)
            .where(UserPreferences.device_id == device_id)
            .order_by(UserPreferences.id)
        ).scalars().first()

def update_preferences(device_id: str, user_id: Optional[str] = None, **updates) -> UserPreferences:
    """
    Upsert preferences for a device. Fields passed as None keep their stored
    value, or the default when the device has no row yet.
    """
    changes = {k: v for k, v in updates.items() if k in PREFERENCE_DEFAULTS and v is not None}
    with SessionLocal() as s:
        prefs = s.execute(
            select(UserPreferences)
            .where(UserPreferences.device_id == device_id)
            .order_by(UserPreferences.id)
        ).scalars().first()
        if prefs is None:
            prefs = UserPreferences(device_id=device_id, **{**PREFERENCE_DEFAULTS, **changes})
            s.add(prefs)
        else:
            for k, v in changes.items():
                setattr(prefs, k, v)
            prefs.updated_at = func.now()
        if user_id:
            prefs.user_id = user_id
        s.commit()
        s.refresh(prefs)
        return prefs
