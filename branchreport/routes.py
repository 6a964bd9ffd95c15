"""
HTTP routes for the branch report API.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from branchreport.dependencies import (
    get_area_service,
    get_branch_service,
    get_responder,
    get_sub_area_service,
)
from branchreport.responses import RawResponder
from branchreport.schemas import (
    ActuatorHealthResponse,
    AreaPayload,
    BranchPayload,
    ComponentStatus,
    HealthResponse,
    SubAreaPayload,
)
from branchreport.services import EntityService

router = APIRouter()


# Health


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    return HealthResponse(
        status="healthy",
        service=request.app.state.settings.service_name,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/actuator/health", response_model=ActuatorHealthResponse)
def actuator_health():
    return ActuatorHealthResponse(
        status="UP",
        components={"db": ComponentStatus(), "application": ComponentStatus()},
    )


# Areas


@router.get("/areas")
def list_areas(
    service: EntityService = Depends(get_area_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.list())


@router.post("/areas", status_code=201)
def create_area(
    payload: AreaPayload,
    service: EntityService = Depends(get_area_service),
    respond: RawResponder = Depends(get_responder),
):
    area = service.create(payload.model_dump())
    return respond.created(area, message="Area created successfully")


@router.get("/areas/{area_id}")
def get_area(
    area_id: str,
    service: EntityService = Depends(get_area_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.get(area_id))


@router.put("/areas/{area_id}")
def update_area(
    area_id: str,
    payload: AreaPayload,
    service: EntityService = Depends(get_area_service),
    respond: RawResponder = Depends(get_responder),
):
    area = service.update(area_id, payload.model_dump())
    return respond.ok(area, message="Area updated successfully")


@router.delete("/areas/{area_id}", status_code=204)
def delete_area(
    area_id: str,
    service: EntityService = Depends(get_area_service),
    respond: RawResponder = Depends(get_responder),
):
    service.delete(area_id)
    return respond.no_content()


# Sub-areas


@router.get("/sub-areas")
def list_sub_areas(
    area_id: Optional[str] = Query(None),
    service: EntityService = Depends(get_sub_area_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.list(area_id=area_id))


@router.post("/sub-areas", status_code=201)
def create_sub_area(
    payload: SubAreaPayload,
    service: EntityService = Depends(get_sub_area_service),
    respond: RawResponder = Depends(get_responder),
):
    sub_area = service.create(payload.model_dump())
    return respond.created(sub_area, message="Sub-area created successfully")


@router.get("/sub-areas/{sub_area_id}")
def get_sub_area(
    sub_area_id: str,
    service: EntityService = Depends(get_sub_area_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.get(sub_area_id))


@router.put("/sub-areas/{sub_area_id}")
def update_sub_area(
    sub_area_id: str,
    payload: SubAreaPayload,
    service: EntityService = Depends(get_sub_area_service),
    respond: RawResponder = Depends(get_responder),
):
    sub_area = service.update(sub_area_id, payload.model_dump())
    return respond.ok(sub_area, message="Sub-area updated successfully")


@router.delete("/sub-areas/{sub_area_id}", status_code=204)
def delete_sub_area(
    sub_area_id: str,
    service: EntityService = Depends(get_sub_area_service),
    respond: RawResponder = Depends(get_responder),
):
    service.delete(sub_area_id)
    return respond.no_content()


# Branches


@router.get("/branches")
def list_branches(
    area_id: Optional[str] = Query(None),
    sub_area_id: Optional[str] = Query(None),
    service: EntityService = Depends(get_branch_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.list(sub_area_id=sub_area_id, area_id=area_id))


@router.post("/branches", status_code=201)
def create_branch(
    payload: BranchPayload,
    service: EntityService = Depends(get_branch_service),
    respond: RawResponder = Depends(get_responder),
):
    branch = service.create(payload.model_dump())
    return respond.created(branch, message="Branch created successfully")


@router.get("/branches/{branch_id}")
def get_branch(
    branch_id: str,
    service: EntityService = Depends(get_branch_service),
    respond: RawResponder = Depends(get_responder),
):
    return respond.ok(service.get(branch_id))


@router.put("/branches/{branch_id}")
def update_branch(
    branch_id: str,
    payload: BranchPayload,
    service: EntityService = Depends(get_branch_service),
    respond: RawResponder = Depends(get_responder),
):
    branch = service.update(branch_id, payload.model_dump())
    return respond.ok(branch, message="Branch updated successfully")


@router.delete("/branches/{branch_id}", status_code=204)
def delete_branch(
    branch_id: str,
    service: EntityService = Depends(get_branch_service),
    respond: RawResponder = Depends(get_responder),
):
    service.delete(branch_id)
    return respond.no_content()
