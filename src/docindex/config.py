"""Local configuration for docindex."""

from __future__ import annotations

import os


DEFAULT_LANGUAGE = "en"
DEFAULT_MAX_DEPTH = 64
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_FETCH_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_USER_AGENT = "docindex/0.1"

DOCINDEX_DEFAULT_LANGUAGE = os.getenv("DOCINDEX_DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)
# Deepest allowed nesting of ``contents``; top-level entries are at depth 1.
DOCINDEX_MAX_DEPTH = int(os.getenv("DOCINDEX_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
DOCINDEX_ENCODING = os.getenv("DOCINDEX_ENCODING", DEFAULT_ENCODING)
DOCINDEX_LOG_LEVEL = os.getenv("DOCINDEX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
DOCINDEX_FETCH_TIMEOUT_S = float(os.getenv("DOCINDEX_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DOCINDEX_FETCH_MAX_RETRIES = int(os.getenv("DOCINDEX_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DOCINDEX_FETCH_BACKOFF_S = float(os.getenv("DOCINDEX_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DOCINDEX_USER_AGENT = os.getenv("DOCINDEX_USER_AGENT", DEFAULT_USER_AGENT)
DOCINDEX_FETCH_MAX_BYTES = int(os.getenv("DOCINDEX_FETCH_MAX_BYTES", str(DEFAULT_FETCH_MAX_BYTES)))
