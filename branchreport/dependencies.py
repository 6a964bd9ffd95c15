"""
Dependency wiring for the FastAPI app.

The database handle and responder live on `app.state` (set up by
`create_app`) and reach handlers through these providers.
"""

from __future__ import annotations

from fastapi import Depends, Request

from branchreport.db import Database
from branchreport.repository import (
    AREA_SCHEMA,
    BRANCH_SCHEMA,
    SUB_AREA_SCHEMA,
    SqlRepository,
)
from branchreport.responses import RawResponder
from branchreport.services import EntityService
from branchreport.validation import validate_area, validate_branch, validate_sub_area


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_responder(request: Request) -> RawResponder:
    return request.app.state.responder


def get_area_service(database: Database = Depends(get_database)) -> EntityService:
    return EntityService(SqlRepository(database, AREA_SCHEMA), validate_area)


def get_sub_area_service(
    database: Database = Depends(get_database),
) -> EntityService:
    return EntityService(SqlRepository(database, SUB_AREA_SCHEMA), validate_sub_area)


def get_branch_service(database: Database = Depends(get_database)) -> EntityService:
    return EntityService(SqlRepository(database, BRANCH_SCHEMA), validate_branch)
