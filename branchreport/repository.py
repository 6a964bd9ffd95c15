"""
Generic data access for the Area / Sub-Area / Branch tables.

The three entities share one repository implementation; an `EntitySchema`
tells it which table, record type, mutable columns and filter columns to
use.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from branchreport.db import (
    AreaRecord,
    AreaRow,
    BranchRecord,
    BranchRow,
    Database,
    SubAreaRecord,
    SubAreaRow,
    utc_now,
)
from branchreport.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySchema:
    """Describes one entity table to the generic repository."""

    label: str
    plural: str
    row: type
    record: type
    fields: tuple[str, ...]
    # Filter columns in precedence order; the first one given wins.
    filters: tuple[str, ...] = ()


AREA_SCHEMA = EntitySchema(
    label="area",
    plural="areas",
    row=AreaRow,
    record=AreaRecord,
    fields=("name", "description"),
)

SUB_AREA_SCHEMA = EntitySchema(
    label="sub-area",
    plural="sub-areas",
    row=SubAreaRow,
    record=SubAreaRecord,
    fields=("name", "description", "area_id"),
    filters=("area_id",),
)

BRANCH_SCHEMA = EntitySchema(
    label="branch",
    plural="branches",
    row=BranchRow,
    record=BranchRecord,
    fields=("name", "description", "area_id", "sub_area_id"),
    filters=("sub_area_id", "area_id"),
)


class Repository(Protocol):
    """Interface the service layer needs from storage."""

    schema: EntitySchema

    def find_all(self, **filters: Optional[str]) -> list:
        ...

    def find_by_id(self, entity_id: str) -> Optional[object]:
        ...

    def create(self, values: dict) -> object:
        ...

    def update(self, entity_id: str, values: dict) -> int:
        ...

    def delete(self, entity_id: str) -> int:
        ...


class SqlRepository:
    """SQLAlchemy-backed repository for a single entity table."""

    def __init__(
        self,
        database: Database,
        schema: EntitySchema,
        clock: Callable[[], str] = utc_now,
    ):
        self.database = database
        self.schema = schema
        self.clock = clock

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        with self.database.Session() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("Failed to %s: %s", action, exc)
                raise StorageError(f"Failed to {action}") from exc

    def _to_record(self, row):
        columns = ("id", *self.schema.fields, "created_at", "updated_at")
        return self.schema.record(**{name: getattr(row, name) for name in columns})

    def find_all(self, **filters: Optional[str]) -> list:
        row = self.schema.row
        unknown = set(filters) - set(self.schema.filters)
        if unknown:
            raise TypeError(
                f"Unsupported filter(s) for {self.schema.plural}: {sorted(unknown)}"
            )

        stmt = select(row)
        for column in self.schema.filters:
            value = filters.get(column)
            if value is not None:
                stmt = stmt.where(getattr(row, column) == value)
                break
        stmt = stmt.order_by(row.created_at.desc())

        with self._session(f"fetch {self.schema.plural}") as session:
            rows = session.execute(stmt).scalars().all()
            return [self._to_record(r) for r in rows]

    def find_by_id(self, entity_id: str):
        with self._session(f"fetch {self.schema.label}") as session:
            row = session.get(self.schema.row, entity_id)
            if not row:
                return None
            return self._to_record(row)

    def create(self, values: dict):
        now = self.clock()
        row = self.schema.row(
            id=str(uuid.uuid4()),
            **{name: values.get(name) for name in self.schema.fields},
            created_at=now,
            updated_at=now,
        )
        with self._session(f"create {self.schema.label}") as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            record = self._to_record(row)
        logger.info("Created %s %s (%s)", self.schema.label, record.id, record.name)
        return record

    def update(self, entity_id: str, values: dict) -> int:
        row = self.schema.row
        changes = {getattr(row, name): values.get(name) for name in self.schema.fields}
        changes[row.updated_at] = self.clock()
        with self._session(f"update {self.schema.label}") as session:
            updated = (
                session.query(row)
                .filter(row.id == entity_id)
                .update(changes, synchronize_session=False)
            )
            session.commit()
        if updated:
            logger.info("Updated %s %s", self.schema.label, entity_id)
        return updated or 0

    def delete(self, entity_id: str) -> int:
        row = self.schema.row
        # Bulk delete so the engine's ON DELETE CASCADE handles dependents.
        with self._session(f"delete {self.schema.label}") as session:
            deleted = (
                session.query(row)
                .filter(row.id == entity_id)
                .delete(synchronize_session=False)
            )
            session.commit()
        if deleted:
            logger.info("Deleted %s %s", self.schema.label, entity_id)
        return deleted or 0
