"""
app/services/aggregation_service.py

Fan-out/fan-in orchestrator for independent fetch tasks.

Execution model
---------------
Tasks run on a scoped thread pool sized by ``concurrency``; tasks beyond the
pool size queue until a worker frees up. Each task is isolated: any exception
raised by its ``invoke`` is converted into a ``Failure`` for that task only.

A run-level timeout bounds the wall-clock time of the whole batch. Tasks still
pending at expiry are recorded as ``Failure`` with a timeout cause; results
that already completed are kept. The pool is torn down on every exit path
without waiting for stragglers.

Cacheable tasks consult the optional result cache first. With
``force_refresh`` their entries are invalidated before any work starts and
re-populated from the fresh results.

The returned ``Snapshot`` always holds exactly one entry per task. The only
exception raised is ``AggregationConfigError`` for a malformed task list,
detected before any task starts.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait

from app.cache.base import ResultCache
from app.config import AggregationSettings
from app.domain.api_result import (
    ApiResult,
    Failure,
    FetchTask,
    Snapshot,
    Success,
    is_success,
    utc_now,
)
from app.logging_utils import log_event

logger = logging.getLogger(__name__)


class AggregationConfigError(ValueError):
    """
    Raised when the task list or run parameters are malformed.
    """


class AggregationService:
    """
    Runs a batch of fetch tasks concurrently and assembles a Snapshot.
    """

    def __init__(self, *, settings: AggregationSettings | None = None) -> None:
        self._settings = settings or AggregationSettings()

    def run_all(
        self,
        tasks: Sequence[FetchTask],
        *,
        concurrency: int | None = None,
        cache: ResultCache | None = None,
        force_refresh: bool = False,
        run_timeout_seconds: float | None = None,
    ) -> Snapshot:
        """
        Execute every task and return one result per task name.
        """

        task_list = list(tasks)
        self._validate(task_list)
        workers = self._settings.effective_workers if concurrency is None else concurrency
        if workers < 1:
            raise AggregationConfigError(f"concurrency must be >= 1, got {workers}.")
        timeout = run_timeout_seconds if run_timeout_seconds is not None else self._settings.run_timeout_seconds
        if timeout is not None and timeout <= 0:
            raise AggregationConfigError(f"run timeout must be positive, got {timeout}.")

        started_at = utc_now()
        started_monotonic = time.monotonic()
        log_event(
            logger,
            logging.INFO,
            "aggregation_started",
            total_tasks=len(task_list),
            workers=workers,
            run_timeout_seconds=timeout,
            force_refresh=force_refresh,
        )

        if cache is not None and force_refresh:
            for task in task_list:
                if task.cacheable:
                    cache.invalidate(task.name)

        results: dict[str, ApiResult] = {}
        cached_names: set[str] = set()
        to_run: list[FetchTask] = []
        for task in task_list:
            cached = None
            if cache is not None and task.cacheable and not force_refresh:
                cached = cache.get(task.name)
            if cached is not None:
                results[task.name] = cached
                cached_names.add(task.name)
            else:
                to_run.append(task)

        if to_run:
            results.update(self._execute_batch(to_run, workers=workers, timeout=timeout))

        if cache is not None:
            for task in to_run:
                result = results[task.name]
                if task.cacheable and is_success(result):
                    cache.put(task.name, result)

        ordered = {task.name: results[task.name] for task in task_list}
        for task in task_list:
            self._log_task_result(task, ordered[task.name], cached=task.name in cached_names)

        snapshot = Snapshot(
            started_at=started_at,
            results=ordered,
            completed_at=utc_now(),
            sections={task.name: task.section for task in task_list},
        )
        log_event(
            logger,
            logging.INFO,
            "aggregation_completed",
            success_count=snapshot.success_count,
            total=snapshot.total,
            cached=len(cached_names),
            duration_seconds=round(time.monotonic() - started_monotonic, 3),
        )
        return snapshot

    def _execute_batch(
        self,
        tasks: list[FetchTask],
        *,
        workers: int,
        timeout: float | None,
    ) -> dict[str, ApiResult]:
        results: dict[str, ApiResult] = {}
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fetch-task")
        try:
            futures: dict[Future[ApiResult], FetchTask] = {
                executor.submit(self._execute_task, task): task for task in tasks
            }
            done, not_done = wait(futures, timeout=timeout)
            for future in done:
                task = futures[future]
                try:
                    results[task.name] = future.result()
                except BaseException as exc:
                    # Exception subclasses are already converted by _execute_task.
                    logger.error("Task aborted task=%s error=%r", task.name, exc)
                    results[task.name] = Failure(
                        source=task.display_name,
                        error=f"Unhandled error: {type(exc).__name__}",
                    )
            for future in not_done:
                task = futures[future]
                future.cancel()
                results[task.name] = Failure(
                    source=task.display_name,
                    error=f"Timed out after {timeout:g}s",
                )
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return results

    @staticmethod
    def _execute_task(task: FetchTask) -> ApiResult:
        try:
            outcome = task.invoke()
        except Exception as exc:
            logger.exception("Unhandled task failure task=%s error=%s", task.name, exc)
            return Failure(source=task.display_name, error=f"Unhandled error: {exc}")

        if isinstance(outcome, (Success, Failure)):
            return outcome
        return Success(source=task.display_name, data=outcome)

    @staticmethod
    def _validate(tasks: list[FetchTask]) -> None:
        seen: set[str] = set()
        for index, task in enumerate(tasks):
            if not isinstance(task, FetchTask):
                raise AggregationConfigError(
                    f"Task at index {index} is {type(task).__name__}, expected FetchTask."
                )
            if not isinstance(task.name, str) or not task.name.strip():
                raise AggregationConfigError(f"Task at index {index} has an empty name.")
            if task.name in seen:
                raise AggregationConfigError(f"Duplicate task name '{task.name}'.")
            if not callable(task.invoke):
                raise AggregationConfigError(f"Task '{task.name}' has a non-callable invoke.")
            seen.add(task.name)

    @staticmethod
    def _log_task_result(task: FetchTask, result: ApiResult, *, cached: bool) -> None:
        if isinstance(result, Success):
            log_event(
                logger,
                logging.INFO,
                "source_fetch_succeeded",
                task=task.name,
                source=result.source,
                attempts=result.attempts,
                cached=cached,
            )
        else:
            log_event(
                logger,
                logging.WARNING,
                "source_fetch_failed",
                task=task.name,
                source=result.source,
                error=result.error,
                status_code=result.status_code,
            )
