"""
Snapshot Change Tracking.

SQLAlchemy notices assignments to an attribute but not in-place mutation of
the object held by it. For columns whose ConvertedType carries a
ValueComparer, this tracker keeps a snapshot of the last loaded or written
value and, before each commit or flush, compares it with the current value.
Attributes that differ are flagged modified so the value is re-encoded and
written.

Snapshot points:
- instance loaded or refreshed from the database (``load`` / ``refresh``)
- after every flush (``after_flush_postexec``)

Compare points:
- ``before_commit``: fires even when nothing else is dirty
- ``before_flush``: covers explicit flushes and autoflush

Usage:
    tracker = get_change_tracker()
    tracker.install(session_factory, Base)
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import event, inspect as sa_inspect
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from .comparers import ValueComparer
from .conversions import ConvertedType

logger = logging.getLogger(__name__)

SNAPSHOT_INFO_KEY = "valconv.snapshots"


class SnapshotChangeTracker:
    """
    Detects in-place changes of comparer-backed column values.

    Snapshots live in each instance's ``InstanceState.info`` as
    ``{attribute: (hash, copy)}`` and survive attribute expiry.
    """

    def __init__(self):
        self._tracked: Dict[type, Dict[str, ValueComparer]] = {}
        self._instrumented_bases: List[type] = []

    # ═══════════════════════════════════════════════════════════════════════
    # Introspection
    # ═══════════════════════════════════════════════════════════════════════

    def tracked_attributes(self, cls: type) -> Dict[str, ValueComparer]:
        """Map attribute name -> comparer for every snapshot-tracked column of cls."""
        attributes = self._tracked.get(cls)
        if attributes is None:
            attributes = {}
            mapper = sa_inspect(cls, raiseerr=False)
            if mapper is not None:
                for prop in mapper.column_attrs:
                    for column in prop.columns:
                        column_type = column.type
                        if isinstance(column_type, ConvertedType) and column_type.tracks_snapshots:
                            attributes[prop.key] = column_type.comparer
            self._tracked[cls] = attributes
        return attributes

    def take_snapshot(self, instance, keys: Optional[Iterable[str]] = None) -> None:
        """
        Record the current value of tracked attributes as the new baseline.

        Args:
            instance: Mapped instance
            keys: Restrict to these attributes (None means all tracked)
        """
        tracked = self.tracked_attributes(type(instance))
        if not tracked:
            return

        state = sa_inspect(instance)
        snapshots = state.info.setdefault(SNAPSHOT_INFO_KEY, {})
        wanted = set(keys) if keys is not None else None

        for key, comparer in tracked.items():
            if wanted is not None and key not in wanted:
                continue
            if key not in state.dict:
                continue
            value = state.dict[key]
            snapshots[key] = (comparer.hash_code(value), comparer.snapshot(value))

    def changed_attributes(self, instance) -> List[str]:
        """
        List tracked attributes whose current value differs from the snapshot.

        Attributes that are not loaded, or have no snapshot yet, are skipped.
        """
        tracked = self.tracked_attributes(type(instance))
        if not tracked:
            return []

        state = sa_inspect(instance)
        snapshots = state.info.get(SNAPSHOT_INFO_KEY, {})
        changed = []

        for key, comparer in tracked.items():
            if key not in state.dict or key not in snapshots:
                continue
            current = state.dict[key]
            snapshot_hash, snapshot = snapshots[key]
            if comparer.hash_code(current) != snapshot_hash or not comparer.equals(snapshot, current):
                changed.append(key)
        return changed

    def detect_changes(self, session: Session) -> int:
        """
        Flag every tracked attribute that changed in place.

        Returns:
            Number of attributes flagged modified
        """
        flagged = 0
        for instance in list(session.identity_map.values()):
            state = sa_inspect(instance)
            if state.deleted or state.detached:
                continue
            for key in self.changed_attributes(instance):
                flag_modified(instance, key)
                flagged += 1
                logger.debug(f"Detected in-place change of {type(instance).__name__}.{key}")
        return flagged

    # ═══════════════════════════════════════════════════════════════════════
    # Event handlers
    # ═══════════════════════════════════════════════════════════════════════

    def _on_load(self, target, context):
        self.take_snapshot(target)

    def _on_refresh(self, target, context, attrs):
        self.take_snapshot(target, attrs)

    def _before_commit(self, session):
        self.detect_changes(session)

    def _before_flush(self, session, flush_context, instances):
        self.detect_changes(session)

    def _after_flush_postexec(self, session, flush_context):
        for instance in list(session.identity_map.values()):
            self.take_snapshot(instance)

    def install(self, session_target, mapped_base) -> None:
        """
        Register the tracker's event listeners.

        Safe to call repeatedly with the same targets.

        Args:
            session_target: Session class, sessionmaker or Session instance
            mapped_base: Declarative base whose subclasses are tracked
        """
        if not any(base is mapped_base for base in self._instrumented_bases):
            event.listen(mapped_base, "load", self._on_load, propagate=True)
            event.listen(mapped_base, "refresh", self._on_refresh, propagate=True)
            self._instrumented_bases.append(mapped_base)

        session_events = (
            ("before_commit", self._before_commit),
            ("before_flush", self._before_flush),
            ("after_flush_postexec", self._after_flush_postexec),
        )
        for identifier, handler in session_events:
            if not event.contains(session_target, identifier, handler):
                event.listen(session_target, identifier, handler)


_tracker: Optional[SnapshotChangeTracker] = None


def get_change_tracker() -> SnapshotChangeTracker:
    """Get the process-wide tracker shared by all units of work."""
    global _tracker
    if _tracker is None:
        _tracker = SnapshotChangeTracker()
    return _tracker


__all__ = [
    "SnapshotChangeTracker",
    "SNAPSHOT_INFO_KEY",
    "get_change_tracker",
]
