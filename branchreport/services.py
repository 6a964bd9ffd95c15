"""
Service layer: validate, persist, and turn missing rows into NotFoundError.
"""

from __future__ import annotations

from typing import Optional

from branchreport.errors import NotFoundError
from branchreport.repository import Repository
from branchreport.validation import Validator


class EntityService:
    def __init__(self, repository: Repository, validator: Validator):
        self.repository = repository
        self.validator = validator

    @property
    def _not_found(self) -> NotFoundError:
        label = self.repository.schema.label
        return NotFoundError(f"{label[:1].upper()}{label[1:]} not found")

    def list(self, **filters: Optional[str]) -> list:
        return self.repository.find_all(**filters)

    def get(self, entity_id: str):
        record = self.repository.find_by_id(entity_id)
        if record is None:
            raise self._not_found
        return record

    def create(self, values: dict):
        self.validator(values)
        return self.repository.create(values)

    def update(self, entity_id: str, values: dict):
        self.validator(values)
        if not self.repository.update(entity_id, values):
            raise self._not_found
        # Re-read so the response carries the untouched created_at.
        return self.get(entity_id)

    def delete(self, entity_id: str) -> None:
        if not self.repository.delete(entity_id):
            raise self._not_found
