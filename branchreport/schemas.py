"""
Pydantic schemas for request bodies and response shapes.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class AreaPayload(BaseModel):
    name: str
    description: Optional[str] = None


class SubAreaPayload(BaseModel):
    name: str
    description: Optional[str] = None
    area_id: str


class BranchPayload(BaseModel):
    name: str
    description: Optional[str] = None
    area_id: str
    sub_area_id: str


class Envelope(BaseModel):
    success: bool
    data: Any = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str


class ComponentStatus(BaseModel):
    status: str = "UP"


class ActuatorHealthResponse(BaseModel):
    status: str = "UP"
    components: dict[str, ComponentStatus]
