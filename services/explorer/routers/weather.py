"""
Weather endpoint — GET /weather?data=<coordinates>

Returns one ForecastEntry per upstream day.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from services.explorer.routers._params import coordinates_from
from services.explorer.routers._responses import outcome_response

router = APIRouter(tags=["weather"])


@router.get("/weather")
async def get_weather(request: Request) -> Response:
    coords = coordinates_from(request)
    outcome = await request.app.state.explorer.forecast(coords)
    return outcome_response(request, outcome)
