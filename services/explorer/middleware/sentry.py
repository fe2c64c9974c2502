"""
Sentry instrumentation for the explorer service.
Disabled unless SENTRY_DSN is set. Provider keys travel as query params or
bearer headers, so both are scrubbed before events leave the process.
"""

import re
from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from services.explorer.config import settings

SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}

_KEY_PARAM_RE = re.compile(r"((?:api_key|key)=)[^&\s]+", re.IGNORECASE)


def _scrub_headers(headers: Any) -> None:
    if isinstance(headers, dict):
        for key in list(headers.keys()):
            if key.lower() in SENSITIVE_HEADERS:
                headers[key] = "[FILTERED]"


def _scrub_url(url: Any) -> Any:
    if isinstance(url, str):
        return _KEY_PARAM_RE.sub(r"\1[FILTERED]", url)
    return url


def _strip_sensitive_data(event: dict[str, Any], hint: dict[str, Any]) -> dict[str, Any] | None:
    """before_send hook: strip auth headers and API keys from breadcrumbs and request data."""
    if "breadcrumbs" in event:
        for breadcrumb in event["breadcrumbs"].get("values", []):
            data = breadcrumb.get("data", {})
            if isinstance(data, dict):
                _scrub_headers(data.get("headers", {}))
                if "url" in data:
                    data["url"] = _scrub_url(data["url"])
    request = event.get("request", {})
    if isinstance(request, dict):
        _scrub_headers(request.get("headers", {}))
        if "query_string" in request:
            request["query_string"] = _scrub_url(request["query_string"])
    return event


def setup_sentry() -> None:
    if not settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        release=f"{settings.app_name}@{settings.app_version}",
        traces_sample_rate=settings.sentry_traces_sample_rate,
        before_send=_strip_sensitive_data,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )
