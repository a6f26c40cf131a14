"""Optional per-document cache of validation results."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from zedscripts.pipeline.results import ValidationResult
from zedscripts.schema import SchemaSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    text: str
    schema: SchemaSnapshot
    result: ValidationResult


class DocumentResultCache:
    """Keeps the latest result per document identity (URI or path).

    A cached result is only returned for the exact text and schema snapshot it
    was computed from; anything else is a miss.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, _CacheEntry] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str, text: str, schema: SchemaSnapshot) -> ValidationResult | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.schema is not schema or entry.text != text:
            return None
        return entry.result

    def latest(self, key: str) -> ValidationResult | None:
        """Most recent result for `key` regardless of freshness."""
        with self._lock:
            entry = self._entries.get(key)
        return entry.result if entry is not None else None

    def put(self, key: str, result: ValidationResult) -> None:
        with self._lock:
            self._entries[key] = _CacheEntry(text=result.source_text, schema=result.schema, result=result)

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)
        logger.debug("Invalidated cached result for %s", key)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
