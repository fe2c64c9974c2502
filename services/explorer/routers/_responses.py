"""
ProviderOutcome -> HTTP response.

  success         200, record or array of records as the body
  empty           200 [] for list endpoints; 404 NO_RESULTS for /location
  provider_error  502 PROVIDER_ERROR

Error bodies use the API envelope: {success, error: {code, message}, requestId}.
"""

from __future__ import annotations

import uuid

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from services.explorer.providers import OutcomeStatus, ProviderOutcome


def request_id(request: Request) -> str:
    return getattr(request.state, "request_id", str(uuid.uuid4()))


def error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {"code": code, "message": message},
            "requestId": request_id(request),
        },
    )


def outcome_response(
    request: Request,
    outcome: ProviderOutcome,
    *,
    many: bool = True,
) -> JSONResponse:
    if outcome.status is OutcomeStatus.SUCCESS:
        return JSONResponse(content=jsonable_encoder(outcome.value))

    if outcome.status is OutcomeStatus.EMPTY:
        if many:
            return JSONResponse(content=[])
        return error_response(request, 404, "NO_RESULTS", "No results for this query.")

    return error_response(
        request,
        502,
        "PROVIDER_ERROR",
        outcome.reason or "Upstream provider failed.",
    )
