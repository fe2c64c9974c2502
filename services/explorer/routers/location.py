"""
Location endpoint — GET /location?data=<address>

Resolves a free-text address through the cache-aside location lookup.
Body is a single LocationRecord; 404 NO_RESULTS when the address matches nothing.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from services.explorer.routers._params import search_string_from
from services.explorer.routers._responses import outcome_response

router = APIRouter(tags=["location"])


@router.get("/location")
async def get_location(request: Request) -> Response:
    search_query = search_string_from(request)
    outcome = await request.app.state.explorer.resolve_location(search_query)
    return outcome_response(request, outcome, many=False)
