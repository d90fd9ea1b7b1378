"""Shared registry of per-class metric records."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from ..config.defaults import DEFAULT_LOCK_STRIPES
from .metrics import ClassMeasurements, MetricsRecord


class ClassRegistry:
    """Map class names to metric records, creating records on first reference.

    One registry is created per run and handed to every analyzer. Lookups
    never fail: an unknown name yields a fresh ``UNVISITED`` record.

    Records are guarded by a fixed pool of lock stripes chosen by the hash of
    the class name. Creation of a record and every mutation of it happen
    under its stripe, so analyses touching unrelated classes rarely contend.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES) -> None:
        """Initialize an empty registry.

        Args:
            lock_stripes: Number of locks shared among class names
        """
        if lock_stripes < 1:
            raise ValueError(f"lock_stripes must be positive, got {lock_stripes}")
        self._records: dict[str, MetricsRecord] = {}
        self._stripes = [threading.Lock() for _ in range(lock_stripes)]

    def _lock_for(self, name: str) -> threading.Lock:
        return self._stripes[hash(name) % len(self._stripes)]

    def _get_or_create_locked(self, name: str) -> MetricsRecord:
        # Caller holds the stripe for ``name``
        record = self._records.get(name)
        if record is None:
            record = MetricsRecord(name)
            self._records[name] = record
            logger.trace(f"Registered record for {name}")
        return record

    def get_or_create(self, name: str) -> MetricsRecord:
        """Return the record for ``name``, creating an UNVISITED one if needed.

        Args:
            name: Fully-qualified class name

        Returns:
            The single record for this class name
        """
        record = self._records.get(name)
        if record is not None:
            return record
        with self._lock_for(name):
            return self._get_or_create_locked(name)

    @contextmanager
    def locked(self, name: str) -> Iterator[MetricsRecord]:
        """Hold the lock for ``name`` while yielding its record.

        Example:
            with registry.locked("com.example.Base") as record:
                record.increment_children()
        """
        with self._lock_for(name):
            yield self._get_or_create_locked(name)

    def add_afferent_coupling(self, target: str, source: str) -> None:
        """Record that class ``source`` depends on class ``target``."""
        with self.locked(target) as record:
            record.add_afferent_coupling(source)

    def increment_children(self, name: str) -> None:
        """Count one more direct subclass of ``name``."""
        with self.locked(name) as record:
            record.increment_children()

    def mark_analyzed(self, name: str, measurements: ClassMeasurements) -> None:
        """Attach a class's own measurements to its record.

        Raises:
            DuplicateClassError: The class was already analyzed in this run
        """
        with self.locked(name) as record:
            record.mark_analyzed(measurements)

    def get(self, name: str) -> MetricsRecord | None:
        """Look up a record without creating one."""
        return self._records.get(name)

    def analyzed(self) -> list[MetricsRecord]:
        """Return analyzed records sorted by class name.

        Referenced-only classes are left out; they stay in the registry.
        """
        return sorted(
            (record for record in list(self._records.values()) if record.is_analyzed),
            key=lambda record: record.name,
        )

    def __iter__(self) -> Iterator[MetricsRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records
