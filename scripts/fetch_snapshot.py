"""
Fetch one dashboard snapshot from CLI.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from app.config import get_dashboard_settings
from app.domain.api_result import format_result
from app.logging_utils import configure_logging
from app.schemas.snapshot import to_snapshot_response
from app.services.dashboard_service import build_dashboard_service


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch current information from all dashboard sources.")
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Bypass cached results and repopulate the cache.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Override the worker pool size.",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Run sources one at a time.",
    )
    parser.add_argument(
        "--extended",
        action="store_true",
        help="Include the opt-in extended sources.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional path to write the snapshot as JSON.",
    )
    args = parser.parse_args(argv)

    configure_logging()
    settings = get_dashboard_settings()
    if args.sequential or args.extended:
        aggregation = replace(
            settings.aggregation,
            sequential=settings.aggregation.sequential or args.sequential,
            include_extended=settings.aggregation.include_extended or args.extended,
        )
        settings = replace(settings, aggregation=aggregation)

    service = build_dashboard_service(settings)
    snapshot = service.build_snapshot(force_refresh=args.refresh, concurrency=args.workers)

    for section, results in snapshot.grouped().items():
        print(f"== {section} ==")
        for result in results.values():
            print(f"  {format_result(result)}")

    rate = (snapshot.success_count / snapshot.total * 100) if snapshot.total else 0.0
    print(f"{snapshot.summary_line()} ({rate:.1f}%)")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(to_snapshot_response(snapshot).model_dump(mode="json"), indent=2),
            encoding="utf-8",
        )
        print(f"Snapshot written to {output_path}")

    return 0 if snapshot.success_count > 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
