"""In-memory property store."""

from __future__ import annotations

import dataclasses
import threading
from typing import Any, Iterable, Mapping

from hmo_finder.exceptions import PropertyNotFoundError, ValidationError
from hmo_finder.models.property import INPUT_FIELDS, PropertyInput, PropertyRecord


class PropertyStore:
    """Keyed collection holding the current snapshot of listings.

    Every mutation runs under a single lock. Reads copy the mapping under the
    same lock, so a reader sees either the snapshot before a ``replace_all``
    or the one after it, never a mix.
    """

    def __init__(self, records: Iterable[PropertyRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._properties: dict[str, PropertyRecord] = {
            record.property_id: record for record in records
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)

    def get(self, property_id: str) -> PropertyRecord:
        """Get a property by id.

        Raises
        ------
        PropertyNotFoundError
            If no property has this id.
        """
        with self._lock:
            record = self._properties.get(property_id)
        if record is None:
            raise PropertyNotFoundError(property_id)
        return record

    def list(self) -> list[PropertyRecord]:
        """Return all current properties in insertion order."""
        with self._lock:
            return list(self._properties.values())

    def create(self, candidate: PropertyInput) -> PropertyRecord:
        """Store a new property and return it with its assigned id."""
        record = PropertyRecord.create(candidate)
        with self._lock:
            self._properties[record.property_id] = record
        return record

    def update(self, property_id: str, changes: Mapping[str, Any]) -> PropertyRecord:
        """Merge the non-null values of ``changes`` over an existing property.

        Parameters
        ----------
        property_id : str
            Id of the property to update.
        changes : Mapping[str, Any]
            Partial property keyed by ``PropertyInput`` field name. ``None``
            values leave the stored field unchanged.

        Returns
        -------
        PropertyRecord
            The merged record.
        """
        unknown = set(changes) - INPUT_FIELDS
        if unknown:
            raise ValidationError(f"Unknown property fields: {', '.join(sorted(unknown))}")

        merged = {key: value for key, value in changes.items() if value is not None}
        with self._lock:
            existing = self._properties.get(property_id)
            if existing is None:
                raise PropertyNotFoundError(property_id)
            updated = dataclasses.replace(existing, **merged) if merged else existing
            self._properties[property_id] = updated
        return updated

    def delete(self, property_id: str) -> bool:
        """Remove a property, returning whether one was removed."""
        with self._lock:
            return self._properties.pop(property_id, None) is not None

    def clear(self) -> None:
        """Remove all properties."""
        with self._lock:
            self._properties = {}

    def replace_all(self, records: Iterable[PropertyRecord]) -> list[PropertyRecord]:
        """Swap the whole snapshot for ``records``."""
        fresh = {record.property_id: record for record in records}
        with self._lock:
            self._properties = fresh
        return list(fresh.values())

    def summary(self) -> dict[str, int]:
        """Return summary counts for log lines."""
        snapshot = self.list()
        return {
            "properties": len(snapshot),
            "article4": sum(1 for p in snapshot if p.is_article4),
        }
