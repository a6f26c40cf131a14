"""Process-wide holder of the current schema snapshot."""

from __future__ import annotations

import logging
import threading

from zedscripts.schema.model import SchemaSnapshot

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Publishes one schema snapshot at a time.

    Readers grab `snapshot` once per validation pass; `replace` swaps the
    reference, so an in-flight pass keeps the snapshot it started with.
    """

    def __init__(self, snapshot: SchemaSnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = snapshot if snapshot is not None else SchemaSnapshot()
        self._generation = 0

    @property
    def snapshot(self) -> SchemaSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def replace(self, snapshot: SchemaSnapshot) -> SchemaSnapshot:
        """Publish a new snapshot and return the one it replaced."""
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot
            self._generation += 1
            generation = self._generation
        logger.info(
            "Schema snapshot replaced (generation %d): %d blocks, %d translation prefixes, %d language codes",
            generation,
            len(snapshot.blocks),
            len(snapshot.translations),
            len(snapshot.languages),
        )
        return previous
