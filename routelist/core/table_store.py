"""Table Store: authoritative in-memory Rows and Columns with display order.

Invariants:
    - ids are unique and immutable; sort_order changes only through reorder()
    - create() draws sort_order from a per-collection counter that never goes
      back, even after deletes
    - list_all() is sorted by sort_order, ties keep insertion order
    - Absence is a return value (None/False), never an exception
    - update() builds the new entity before storing it: a failing update leaves
      the store unchanged

Design Decisions:
    - One generic OrderedStore shared by rows and columns; subclasses only pick
      the entity class and id prefix
    - Entities are frozen dataclasses replaced wholesale, so list fields
      (images, options) are replaced and never merged; incoming lists are
      copied into tuples so callers never share state with the store
    - Synchronous and lock-free: no operation awaits mid-mutation
"""

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import replace
from operator import attrgetter
from typing import Any, Generic, TypeVar

from routelist.core.domain_types import Column, Row

logger = logging.getLogger(__name__)

E = TypeVar("E", Row, Column)

_IDENTITY_FIELDS = frozenset({"id", "sort_order"})


class OrderedStore(Generic[E]):
    """Keyed collection of entities ordered by an integer sort key."""

    entity_cls: type
    id_prefix: str
    sequence_fields: frozenset[str] = frozenset()

    def __init__(self) -> None:
        self._items: dict[str, E] = {}
        self._next_sort_order = 0

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def list_all(self) -> list[E]:
        return sorted(self._items.values(), key=attrgetter("sort_order"))

    def get(self, entity_id: str) -> E | None:
        return self._items.get(entity_id)

    def create(self, fields: Mapping[str, Any] | None = None) -> E:
        """Store a new entity; omitted fields take their zero value."""
        values = self._prepare(fields or {})
        entity = self.entity_cls(
            id=self._new_id(), sort_order=self._next_sort_order, **values,
        )
        self._next_sort_order += 1
        self._items[entity.id] = entity
        logger.debug(
            f"{self.entity_cls.__name__} created",
            extra={"entity_id": entity.id, "sort_order": entity.sort_order},
        )
        return entity

    def update(self, entity_id: str, fields: Mapping[str, Any]) -> E | None:
        """Merge fields onto an existing entity. None if the id is unknown."""
        existing = self._items.get(entity_id)
        if existing is None:
            return None
        changes = self._prepare(fields)
        if not changes:
            return existing
        updated = replace(existing, **changes)
        self._items[entity_id] = updated
        logger.debug(
            f"{self.entity_cls.__name__} updated",
            extra={"entity_id": entity_id, "fields": sorted(changes)},
        )
        return updated

    def delete(self, entity_id: str) -> bool:
        removed = self._items.pop(entity_id, None) is not None
        if removed:
            logger.debug(
                f"{self.entity_cls.__name__} deleted",
                extra={"entity_id": entity_id},
            )
        return removed

    def reorder(self, ids_in_order: Iterable[str]) -> None:
        """Assign sort_order by position among the known ids given.

        Unknown ids are dropped before positions are counted. Entities not
        named keep their previous sort_order, so keys may collide afterwards.
        """
        known = [i for i in ids_in_order if i in self._items]
        for position, entity_id in enumerate(known):
            self._items[entity_id] = replace(
                self._items[entity_id], sort_order=position,
            )
        logger.debug(
            f"{self.entity_cls.__name__} collection reordered",
            extra={"count": len(known)},
        )

    def _prepare(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Drop identity fields and freeze list values into tuples."""
        return {
            k: tuple(v) if k in self.sequence_fields and v is not None else v
            for k, v in fields.items() if k not in _IDENTITY_FIELDS
        }

    def _new_id(self) -> str:
        return f"{self.id_prefix}-{uuid.uuid4().hex}"


class RowStore(OrderedStore[Row]):
    entity_cls = Row
    id_prefix = "row"
    sequence_fields = frozenset({"images"})


class ColumnStore(OrderedStore[Column]):
    entity_cls = Column
    id_prefix = "col"
    sequence_fields = frozenset({"options"})


class TableStore:
    """Owns both collections for the lifetime of the process."""

    def __init__(self) -> None:
        self.rows = RowStore()
        self.columns = ColumnStore()

