"""
Shared plumbing for the provider adapters.

Every adapter issues exactly one outbound GET and maps the JSON body into
normalized records. Failures are classified here so that each adapter only
has to describe its URL and its mapping:

  - missing API key                -> provider_error, no request sent
  - transport error / non-2xx      -> provider_error
  - body is not JSON               -> provider_error
  - mapping hits a missing field   -> provider_error ("malformed")

Request URLs are never logged: some providers carry the key in the path.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx

from services.explorer.providers.outcome import ProviderOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Mapping errors that mean "upstream shape was not what we expected"
_MALFORMED_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


class ProviderRequestError(Exception):
    """Outbound call failed before a usable JSON body was obtained."""


class ProviderClient:
    """
    Base class for one upstream provider.

    Subclasses set ``name`` and implement a public search method that calls
    ``self._call(url, build, ...)`` where ``build`` turns the decoded JSON
    payload into a ProviderOutcome.
    """

    name: str = "provider"

    def __init__(self, api_key: str, url: str, timeout_s: float = 10.0) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout_s = timeout_s

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def _get_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s) as client:
                resp = await client.get(url, params=params, headers=headers)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "%s returned %d: %s",
                self.name,
                exc.response.status_code,
                exc.response.text[:200],
            )
            raise ProviderRequestError(
                f"{self.name} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s request failed: %s", self.name, type(exc).__name__)
            raise ProviderRequestError(f"{self.name} unreachable") from exc
        except ValueError as exc:
            logger.warning("%s returned a non-JSON body", self.name)
            raise ProviderRequestError(f"{self.name} returned invalid JSON") from exc

    async def _call(
        self,
        url: str,
        build: Callable[[Any], ProviderOutcome[T]],
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ProviderOutcome[T]:
        if not self.configured:
            logger.warning("%s API key not set; skipping request", self.name)
            return ProviderOutcome.error(f"{self.name} API key not configured")

        try:
            payload = await self._get_json(url, params=params, headers=headers)
        except ProviderRequestError as exc:
            return ProviderOutcome.error(str(exc))

        try:
            return build(payload)
        except _MALFORMED_ERRORS as exc:
            logger.warning("%s response malformed: %r", self.name, exc)
            return ProviderOutcome.error(f"{self.name} response malformed")
