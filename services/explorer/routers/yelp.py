"""Business listings endpoint — GET /yelp?data=<coordinates>"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from services.explorer.routers._params import coordinates_from
from services.explorer.routers._responses import outcome_response

router = APIRouter(tags=["yelp"])


@router.get("/yelp")
async def get_yelp(request: Request) -> Response:
    coords = coordinates_from(request)
    outcome = await request.app.state.explorer.businesses(coords)
    return outcome_response(request, outcome)
