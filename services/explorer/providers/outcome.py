"""
Tagged result returned by every provider adapter.

Adapters never raise for upstream trouble. Callers branch on ``status``:

    success         value holds the record (or list of records)
    empty           the provider answered but had nothing for the query
    provider_error  transport/HTTP/parse failure; reason says why
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    PROVIDER_ERROR = "provider_error"


@dataclass(frozen=True)
class ProviderOutcome(Generic[T]):
    status: OutcomeStatus
    value: T | None = None
    reason: str | None = None

    @classmethod
    def success(cls, value: T) -> "ProviderOutcome[T]":
        return cls(status=OutcomeStatus.SUCCESS, value=value)

    @classmethod
    def empty(cls) -> "ProviderOutcome[T]":
        return cls(status=OutcomeStatus.EMPTY)

    @classmethod
    def error(cls, reason: str) -> "ProviderOutcome[T]":
        return cls(status=OutcomeStatus.PROVIDER_ERROR, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS
