"""
Decoding of the `data` query parameter shared by every endpoint.

Accepted forms:
  ?data=Seattle                                   plain search string
  ?data={"latitude": 47.6, "longitude": -122.3}   JSON object
  ?data[latitude]=47.6&data[longitude]=-122.3     bracket form (browser clients)
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError

from services.explorer.records import Coordinates, MovieQuery

PARAM = "data"


def read_data_param(request: Request) -> str | dict[str, Any]:
    """Return the raw search string, or a dict for object-shaped input."""
    params = request.query_params

    prefix = f"{PARAM}["
    bracketed = {
        key[len(prefix):-1]: value
        for key, value in params.multi_items()
        if key.startswith(prefix) and key.endswith("]")
    }
    if bracketed:
        return bracketed

    raw = params.get(PARAM)
    if raw is None or not raw.strip():
        raise HTTPException(status_code=422, detail="Missing 'data' query parameter.")

    if raw.lstrip().startswith("{"):
        try:
            value = json.loads(raw)
        except ValueError:
            raise HTTPException(status_code=422, detail="'data' is not valid JSON.")
        if not isinstance(value, dict):
            raise HTTPException(status_code=422, detail="'data' must be a JSON object.")
        return value

    # Kept verbatim: the raw string is the cache key
    return raw


def _validate(model: type[BaseModel], value: dict[str, Any]) -> Any:
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise HTTPException(status_code=422, detail=f"Invalid 'data' fields: {fields}.")


def search_string_from(request: Request) -> str:
    data = read_data_param(request)
    if not isinstance(data, str):
        raise HTTPException(status_code=422, detail="'data' must be a search string.")
    return data


def coordinates_from(request: Request) -> Coordinates | str:
    data = read_data_param(request)
    if isinstance(data, str):
        return data
    return _validate(Coordinates, data)


def movie_query_from(request: Request) -> MovieQuery | str:
    data = read_data_param(request)
    if isinstance(data, str):
        return data
    return _validate(MovieQuery, data)
