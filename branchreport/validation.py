"""
Business-rule checks applied to create/update payloads before persistence.

Only emptiness is checked. Parent ids are not looked up here; a dangling
reference is rejected by the store's foreign keys instead.
"""

from __future__ import annotations

from typing import Callable, Mapping

from branchreport.errors import ValidationError

Validator = Callable[[Mapping], None]


def require_text(values: Mapping, field: str) -> None:
    value = values.get(field)
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} must not be empty")


def required_fields(*fields: str) -> Validator:
    """Build a validator rejecting empty or whitespace-only `fields`, in order."""

    def validate(values: Mapping) -> None:
        for field in fields:
            require_text(values, field)

    return validate


validate_area = required_fields("name")
validate_sub_area = required_fields("name")
validate_branch = required_fields("name", "area_id", "sub_area_id")
