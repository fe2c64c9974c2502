"""
Movies endpoint — GET /movies?data=<location with short_name>

Searches movie metadata by the location's short name, not its coordinates.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from services.explorer.routers._params import movie_query_from
from services.explorer.routers._responses import outcome_response

router = APIRouter(tags=["movies"])


@router.get("/movies")
async def get_movies(request: Request) -> Response:
    query = movie_query_from(request)
    outcome = await request.app.state.explorer.movies(query)
    return outcome_response(request, outcome)
