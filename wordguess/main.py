# FastAPI server for the vocabulary guessing game.
# Provides:
# - GET    /api/words/random: random word (frequency corpus or dictionary chain)
# - GET    /api/words/difficulty/{tier}: word from easy/medium/hard/mixed
# - GET    /api/words/smart/{device_id}: word the device has not seen yet
# - GET    /api/words/stats: corpus statistics
# - GET    /api/words/frequency-range, /api/words/educational/{level}
# - GET    /api/words/search?q=...: regex search (admin/testing)
# - GET    /api/words/lookup/{word}: exact corpus entry
# - POST   /api/words/reset: clear session seen-word tracking
# - GET    /api/words/dictionary/random, /api/words/dictionary/stats
# - POST/GET/DELETE /api/word-history...: personal word history
# - GET/POST/PATCH  /api/preferences...: per-device preferences
#
# Run: uvicorn wordguess.main:app --host 0.0.0.0 --port 8000

from __future__ import annotations
import logging
from typing import Optional
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from .config import CORS_ORIGINS, HISTORY_DEFAULT_LIMIT, LOG_FORMAT, LOG_LEVEL
from .models import (
    DictionaryStats, MessageResponse, PreferencesCreate, PreferencesRecord, PreferencesUpdate,
    SeenWordsResponse, Word, WordHistoryCreate, WordHistoryRecord, WordHistoryResponse, WordStats,
)
from .service import WordService, build_word_service
from . import db

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Word Guess", version="2.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

_service: Optional[WordService] = None

def get_word_service() -> WordService:
    global _service
    if _service is None:
        _service = build_word_service()
    return _service

@app.on_event("startup")
def startup():
    db.init_db()
    get_word_service()
    logger.info("Word service ready")

@app.exception_handler(SQLAlchemyError)
def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

@app.get("/health")
def health():
    return {"status": "healthy", "app": app.title, "version": app.version}

# ---- Words ----

@app.get("/api/words/random", response_model=Word)
def api_random_word(svc: WordService = Depends(get_word_service)):
    word = svc.random_word()
    if word is None:
        raise HTTPException(status_code=404, detail="No words available")
    return word

@app.get("/api/words/difficulty/{difficulty}", response_model=Word)
def api_word_by_difficulty(difficulty: str, svc: WordService = Depends(get_word_service)):
    try:
        word = svc.word_by_difficulty(difficulty)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if word is None:
        raise HTTPException(status_code=404, detail="No words available for this difficulty")
    return word

@app.get("/api/words/smart/{device_id}", response_model=Word)
def api_smart_word(
    device_id: str,
    difficulty: str = "mixed",
    user_id: Optional[str] = Query(None, alias="userId"),
    svc: WordService = Depends(get_word_service),
):
    try:
        word = svc.smart_word(device_id, user_id=user_id, difficulty=difficulty or "mixed")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if word is None:
        raise HTTPException(status_code=404, detail="No new words available")
    return word

@app.get("/api/words/stats", response_model=WordStats)
def api_word_stats(svc: WordService = Depends(get_word_service)):
    return svc.stats()

@app.get("/api/words/frequency-range", response_model=list[Word])
def api_frequency_range(
    min_rank: int = Query(1, alias="minRank", ge=1),
    max_rank: int = Query(1000, alias="maxRank", ge=1),
    svc: WordService = Depends(get_word_service),
):
    try:
        return svc.frequency_range(min_rank, max_rank)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/words/educational/{level}", response_model=list[Word])
def api_educational_words(level: str, svc: WordService = Depends(get_word_service)):
    try:
        return svc.educational(level)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/words/search", response_model=list[Word])
def api_search_words(q: Optional[str] = None, svc: WordService = Depends(get_word_service)):
    try:
        return svc.search(q or "")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/words/lookup/{word}", response_model=Word)
def api_lookup_word(word: str, svc: WordService = Depends(get_word_service)):
    found = svc.lookup(word)
    if found is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return found

@app.post("/api/words/reset", response_model=MessageResponse)
def api_reset_words(svc: WordService = Depends(get_word_service)):
    svc.reset()
    return {"message": "Used words tracking reset successfully"}

@app.get("/api/words/dictionary/random", response_model=Word)
def api_dictionary_word(svc: WordService = Depends(get_word_service)):
    word = svc.dictionary_word()
    if word is None:
        raise HTTPException(status_code=404, detail="No words available")
    return word

@app.get("/api/words/dictionary/stats", response_model=DictionaryStats)
def api_dictionary_stats(svc: WordService = Depends(get_word_service)):
    return svc.dictionary_stats()

# ---- Word history ----

@app.post("/api/word-history", response_model=WordHistoryRecord)
def api_record_word(req: WordHistoryCreate):
    row = db.record_seen(
        device_id=req.device_id,
        user_id=req.user_id,
        word=req.word,
        guessed_correctly=req.guessed_correctly,
        hint_count=req.hint_count,
        game_mode=req.game_mode,
        seen_at=req.seen_at,
    )
    return WordHistoryRecord.model_validate(row)

@app.get("/api/word-history/seen/{device_id}", response_model=SeenWordsResponse)
def api_seen_words(device_id: str, user_id: Optional[str] = Query(None, alias="userId")):
    return {"seen_words": sorted(db.get_seen_words(device_id, user_id))}

@app.get("/api/word-history/{device_id}", response_model=WordHistoryResponse)
def api_word_history(
    device_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    limit: int = Query(HISTORY_DEFAULT_LIMIT, ge=1, le=1000),
):
    rows = db.get_word_history(device_id, user_id, limit)
    return {"history": [WordHistoryRecord.model_validate(r) for r in rows]}

@app.delete("/api/word-history/{device_id}", response_model=MessageResponse)
def api_clear_word_history(device_id: str, user_id: Optional[str] = Query(None, alias="userId")):
    db.clear_word_history(device_id, user_id)
    return {"message": "Word history cleared"}

# ---- Preferences ----

@app.get("/api/preferences/{device_id}")
def api_get_preferences(device_id: str):
    prefs = db.get_preferences(device_id)
    if prefs is None:
        return {}
    return PreferencesRecord.model_validate(prefs).model_dump(mode="json")

@app.post("/api/preferences", response_model=PreferencesRecord)
def api_save_preferences(req: PreferencesCreate):
    fields = req.model_dump(exclude={"device_id", "user_id"})
    prefs = db.update_preferences(req.device_id, user_id=req.user_id, **fields)
    return PreferencesRecord.model_validate(prefs)

@app.patch("/api/preferences/{device_id}", response_model=PreferencesRecord)
def api_update_preferences(
    device_id: str,
    req: PreferencesUpdate,
    user_id: Optional[str] = Query(None, alias="userId"),
):
    prefs = db.update_preferences(device_id, user_id=user_id, **req.model_dump())
    return PreferencesRecord.model_validate(prefs)
