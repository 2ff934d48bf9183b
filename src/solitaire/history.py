"""Linear undo: a stack of snapshots, most recent last. No redo."""

import logging
from typing import Optional, Protocol

from src.solitaire.snapshot import Snapshot

logger = logging.getLogger(__name__)


class Originator(Protocol):
    """Just the part of the engine the History needs"""

    def restore_state(self, snapshot: Snapshot) -> None: ...


class History:
    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def record(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)
        logger.debug("Recorded snapshot %s", snapshot.label)

    def undo(self, engine: Originator) -> bool:
        """Restore the most recent snapshot and discard it. Undo on an empty history does nothing."""
        if not self._snapshots:
            logger.debug("Nothing to undo")
            return False
        snapshot = self._snapshots.pop()
        engine.restore_state(snapshot)
        logger.debug("Restored snapshot %s", snapshot.label)
        return True

    def clear(self) -> None:
        """New game / full reset"""
        self._snapshots.clear()

    def peek(self) -> Optional[Snapshot]:
        return self._snapshots[-1] if self._snapshots else None

    def labels(self) -> list[str]:
        return [snapshot.label for snapshot in self._snapshots]
