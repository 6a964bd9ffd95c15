"""
Response conventions.

A deployment uses exactly one responder: `RawResponder` returns the entity
(or list) as-is and errors as `{"error": ...}`; `EnvelopeResponder` wraps
everything in `{"success", "data", "message"}`.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from branchreport.schemas import Envelope, ErrorResponse


class RawResponder:
    envelope = False

    def ok(
        self,
        data: Any,
        *,
        message: Optional[str] = None,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=jsonable_encoder(data))

    def created(self, data: Any, *, message: Optional[str] = None) -> JSONResponse:
        return self.ok(data, message=message, status_code=status.HTTP_201_CREATED)

    def no_content(self) -> Response:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    def error(self, status_code: int, message: str) -> JSONResponse:
        body = ErrorResponse(error=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())


class EnvelopeResponder(RawResponder):
    envelope = True

    def ok(
        self,
        data: Any,
        *,
        message: Optional[str] = None,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        body = Envelope(success=True, data=jsonable_encoder(data), message=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())

    def error(self, status_code: int, message: str) -> JSONResponse:
        body = Envelope(success=False, data=None, message=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())


def build_responder(envelope: bool) -> RawResponder:
    return EnvelopeResponder() if envelope else RawResponder()
