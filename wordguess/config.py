# Configuration module for server-side constants and defaults.

import os
from pathlib import Path

# Optional frequency-ranked word database ({"words": [...]} JSON).
# When the file is missing the server uses its small built-in list.
WORD_DATABASE_PATH = Path(
    os.getenv("WORDGUESS_DATABASE", str(Path(__file__).parent / "word-database.json"))
)

# SQLAlchemy URL for word history and user preferences.
DB_URL = os.getenv(
    "WORDGUESS_DB_URL", f"sqlite:///{Path(__file__).parent / 'wordguess.db'}"
)

# Free Dictionary API; the word is appended lower-cased.
DICTIONARY_API_URL = os.getenv(
    "WORDGUESS_DICTIONARY_URL", "https://api.dictionaryapi.dev/api/v2/entries/en"
)
DICTIONARY_TIMEOUT_SECONDS = float(os.getenv("WORDGUESS_DICTIONARY_TIMEOUT", "5"))

# Words kept per difficulty tier for quick lookups.
TIER_PREVIEW_SIZE = 200

# Definitions from free text must fall strictly inside this band.
DEFINITION_MIN_LENGTH = 20
DEFINITION_MAX_LENGTH = 200

DATABASE_VERSION = "2.0.0"
DATABASE_SOURCE = "COCA frequency data + Free Dictionary API"

# Default number of history rows returned per device.
HISTORY_DEFAULT_LIMIT = 100

# CORS origins (if you deploy the client separately, add its domain here).
CORS_ORIGINS = ["*"]

LOG_LEVEL = os.getenv("WORDGUESS_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
