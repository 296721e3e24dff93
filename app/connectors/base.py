"""
app/connectors/base.py

Shared HTTP mechanics: one GET with timeout, retry on transient status and backoff.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import requests

from app.config import FetchSettings
from app.domain.api_result import ApiResult, Failure, Success

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503})


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry rules independent of the HTTP library in use.
    """

    max_attempts: int = 2
    retryable_status_codes: frozenset[int] = RETRYABLE_STATUS_CODES
    backoff_initial_seconds: float = 0.3
    backoff_multiplier: float = 1.5
    backoff: Callable[[int], float] | None = None

    def is_transient(self, status_code: int | None) -> bool:
        return status_code in self.retryable_status_codes

    def backoff_seconds(self, attempt: int) -> float:
        """
        Delay before the attempt following `attempt` (1-based).
        """

        if self.backoff is not None:
            return max(0.0, self.backoff(attempt))
        return self.backoff_initial_seconds * (self.backoff_multiplier ** (attempt - 1))


@dataclass(frozen=True)
class FetchOptions:
    """
    Per-call HTTP options.
    """

    timeout_seconds: float = 8.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    user_agent: str = "CurrentInfoDashboard/1.0 (Python)"
    parse_json: bool = True

    @classmethod
    def from_settings(cls, settings: FetchSettings) -> FetchOptions:
        return cls(
            timeout_seconds=settings.timeout_seconds,
            retry=RetryPolicy(
                max_attempts=max(1, settings.max_attempts),
                backoff_initial_seconds=settings.backoff_initial_seconds,
                backoff_multiplier=settings.backoff_multiplier,
            ),
            user_agent=settings.user_agent,
        )


class FetchClient:
    """
    Issues GET requests and normalizes every outcome into an `ApiResult`.

    Failures are returned, never raised, so one broken source cannot abort
    a batch. The client holds no mutable state besides the session and is
    safe to share between worker threads.
    """

    def __init__(
        self,
        *,
        options: FetchOptions | None = None,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._options = options or FetchOptions()
        self._session = session or requests.Session()
        self._sleep = sleep

    @property
    def options(self) -> FetchOptions:
        return self._options

    def fetch(
        self,
        url: str,
        source_name: str,
        options: FetchOptions | None = None,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResult:
        opts = options or self._options
        policy = opts.retry
        max_attempts = max(1, policy.max_attempts)
        request_headers = {"User-Agent": opts.user_agent, "Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        attempt = 0
        while True:
            attempt += 1
            logger.info(
                "Fetching source=%s attempt=%s/%s url=%s",
                source_name,
                attempt,
                max_attempts,
                url,
            )
            try:
                response = self._session.get(
                    url,
                    params=params,
                    headers=request_headers,
                    timeout=opts.timeout_seconds,
                )
            except requests.Timeout as exc:
                return self._network_failure(source_name, url, attempt, "Request timed out", exc)
            except requests.ConnectionError as exc:
                return self._network_failure(source_name, url, attempt, "Connection failed", exc)
            except requests.RequestException as exc:
                return self._network_failure(source_name, url, attempt, "Request error", exc)

            status_code = response.status_code
            if policy.is_transient(status_code) and attempt < max_attempts:
                delay = policy.backoff_seconds(attempt)
                logger.warning(
                    "Retrying source=%s status=%s attempt=%s/%s wait_seconds=%.2f url=%s",
                    source_name,
                    status_code,
                    attempt,
                    max_attempts,
                    delay,
                    url,
                )
                self._sleep(delay)
                continue

            if not 200 <= status_code < 300:
                logger.error(
                    "Source request failed source=%s status=%s attempts=%s url=%s",
                    source_name,
                    status_code,
                    attempt,
                    url,
                )
                return Failure(
                    source=source_name,
                    error=f"HTTP {status_code}",
                    status_code=status_code,
                    attempts=attempt,
                )

            if not opts.parse_json:
                return Success(
                    source=source_name,
                    data={
                        "url": str(getattr(response, "url", "") or url),
                        "content_type": response.headers.get("Content-Type", ""),
                    },
                    attempts=attempt,
                )

            try:
                payload = response.json()
            except ValueError as exc:
                logger.error(
                    "Source returned unparseable body source=%s status=%s url=%s error=%s",
                    source_name,
                    status_code,
                    url,
                    exc,
                )
                return Failure(
                    source=source_name,
                    error=f"Parse error: response was not valid JSON ({exc})",
                    status_code=status_code,
                    attempts=attempt,
                )

            return Success(source=source_name, data=payload, attempts=attempt)

    @staticmethod
    def _network_failure(
        source_name: str,
        url: str,
        attempt: int,
        cause: str,
        exc: Exception,
    ) -> Failure:
        logger.error(
            "Source request failed source=%s attempts=%s url=%s error=%s",
            source_name,
            attempt,
            url,
            exc,
        )
        return Failure(source=source_name, error=f"{cause}: {exc}", attempts=attempt)
