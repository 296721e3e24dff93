"""
app/domain/api_result.py

Result envelope, fetch task and snapshot models for the aggregation core.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, ClassVar, Union


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Success:
    """
    Successful fetch outcome carrying the (reshaped) payload.
    """

    status: ClassVar[str] = "success"
    ok: ClassVar[bool] = True

    source: str
    data: Any
    fetched_at: datetime = field(default_factory=utc_now)
    attempts: int = 1


@dataclass(frozen=True)
class Failure:
    """
    Failed fetch outcome with a human-readable cause.
    """

    status: ClassVar[str] = "error"
    ok: ClassVar[bool] = False

    source: str
    error: str
    fetched_at: datetime = field(default_factory=utc_now)
    status_code: int | None = None
    attempts: int = 1


ApiResult = Union[Success, Failure]


def is_success(result: object) -> bool:
    """
    True only for a `Success` envelope; never raises.
    """

    return isinstance(result, Success)


def map_success(result: ApiResult, transform: Callable[[Any], Any]) -> ApiResult:
    """
    Reshape the payload of a success; failures pass through unchanged.
    """

    if not isinstance(result, Success):
        return result
    return replace(result, data=transform(result.data))


def format_result(result: object) -> str:
    """
    One-line status summary for logs and console output.
    """

    if result is None:
        return "[ERROR] NULL result received"
    if isinstance(result, Success):
        return f"[SUCCESS] {result.source} (fetched at {result.fetched_at:%H:%M:%S})"
    if isinstance(result, Failure):
        return f"[ERROR] {result.source}: {result.error}"
    return f"[WARNING] Non-standard result type: {type(result).__name__}"


def result_to_payload(result: ApiResult) -> dict[str, Any]:
    """
    Serialize an envelope into a JSON-safe dict.
    """

    payload: dict[str, Any] = {
        "status": result.status,
        "source": result.source,
        "fetched_at": result.fetched_at.isoformat(),
        "attempts": result.attempts,
    }
    if isinstance(result, Success):
        payload["data"] = result.data
    else:
        payload["error"] = result.error
        payload["status_code"] = result.status_code
    return payload


def result_from_payload(payload: Mapping[str, Any]) -> ApiResult:
    """
    Rebuild an envelope produced by `result_to_payload`.
    """

    fetched_at = datetime.fromisoformat(str(payload["fetched_at"]))
    if fetched_at.tzinfo is None:
        fetched_at = fetched_at.replace(tzinfo=timezone.utc)
    attempts = int(payload.get("attempts") or 1)

    if payload.get("status") == Success.status:
        return Success(
            source=str(payload["source"]),
            data=payload.get("data"),
            fetched_at=fetched_at,
            attempts=attempts,
        )
    return Failure(
        source=str(payload["source"]),
        error=str(payload.get("error") or "unknown error"),
        fetched_at=fetched_at,
        status_code=payload.get("status_code"),
        attempts=attempts,
    )


@dataclass(frozen=True)
class FetchTask:
    """
    One named unit of independent fetch-and-reshape work.
    """

    name: str
    invoke: Callable[[], ApiResult]
    label: str = ""
    section: str = "general"
    cacheable: bool = False

    @property
    def display_name(self) -> str:
        return self.label or self.name


@dataclass(frozen=True)
class Snapshot:
    """
    Complete set of per-task results for one aggregation run.
    """

    started_at: datetime
    results: dict[str, ApiResult]
    completed_at: datetime = field(default_factory=utc_now)
    sections: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> ApiResult:
        return self.results[name]

    def __contains__(self, name: object) -> bool:
        return name in self.results

    def __len__(self) -> int:
        return len(self.results)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for result in self.results.values() if is_success(result))

    def failures(self) -> dict[str, Failure]:
        return {
            name: result
            for name, result in self.results.items()
            if isinstance(result, Failure)
        }

    def summary_line(self) -> str:
        return f"{self.success_count}/{self.total} sources succeeded"

    def grouped(self) -> dict[str, dict[str, ApiResult]]:
        """
        Results grouped by task section, each task key appearing exactly once.
        """

        grouped: dict[str, dict[str, ApiResult]] = {}
        for name, result in self.results.items():
            section = self.sections.get(name, "general")
            grouped.setdefault(section, {})[name] = result
        return grouped
