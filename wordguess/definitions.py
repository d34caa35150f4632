# Definition lookup against the Free Dictionary API.
# Every failure (network, status, payload shape, length band) maps to None;
# callers move on to another candidate instead of handling errors.

from __future__ import annotations
import logging
import re
from typing import Optional
from urllib.parse import quote
import requests
from .config import (
    DEFINITION_MAX_LENGTH, DEFINITION_MIN_LENGTH, DICTIONARY_API_URL, DICTIONARY_TIMEOUT_SECONDS
)

logger = logging.getLogger(__name__)

_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_definition(text: str) -> str:
    text = _PARENTHETICAL_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = text.rstrip(" .")
    text = text[:1].upper() + text[1:]
    return text + "."


def is_usable_definition(text: str) -> bool:
    return DEFINITION_MIN_LENGTH < len(text) < DEFINITION_MAX_LENGTH


class DictionaryClient:
    def __init__(self, base_url: str = DICTIONARY_API_URL, timeout: float = DICTIONARY_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def lookup(self, word: str) -> Optional[str]:
        """Return the first cleaned definition inside the length band, or None."""
        url = f"{self.base_url}/{quote(word.strip().lower())}"
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Failed to fetch definition for %s: %s", word, e)
            return None

        if resp.status_code != 200:
            logger.debug("No dictionary entry for %s (HTTP %s)", word, resp.status_code)
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Dictionary returned invalid JSON for %s", word)
            return None

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return None

        for meaning in data[0].get("meanings") or []:
            if not isinstance(meaning, dict):
                continue
            definitions = meaning.get("definitions") or []
            if not isinstance(definitions, list) or not definitions or not isinstance(definitions[0], dict):
                continue
            raw = definitions[0].get("definition")
            if not isinstance(raw, str):
                continue
            cleaned = clean_definition(raw)
            if is_usable_definition(cleaned):
                return cleaned

        logger.debug("No usable definition for %s", word)
        return None
