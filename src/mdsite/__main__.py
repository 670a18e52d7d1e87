"""Command line entry point: ``python -m mdsite``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from mdsite.config import MDSITE_LOG_LEVEL, IndexerSettings, resolve_settings
from mdsite.exceptions import ConfigError
from mdsite.orchestrator import (
    ArtifactReport,
    build_content_data,
    generate_navigation_json,
    generate_search_index_json,
)
from mdsite.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_ONLY_CHOICES = ("navigation", "search")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdsite",
        description="Generate _navigation.json and _search-index.json from a markdown content tree.",
    )
    parser.add_argument("domain", nargs="?", help="Domain identifier selecting <domain>.config.yml")
    parser.add_argument("--content-dir", type=Path, help="Content root (overrides config and CONTENT_DIR)")
    parser.add_argument("--output-dir", type=Path, help="Directory for the JSON artifacts (default: public)")
    parser.add_argument("--config-dir", type=Path, help="Directory holding content.config.yml (default: cwd)")
    parser.add_argument("--max-concurrency", type=int, help="Maximum concurrent file reads")
    parser.add_argument("--only", choices=_ONLY_CHOICES, help="Build a single artifact")
    parser.add_argument("--log-level", default=MDSITE_LOG_LEVEL, help="Logging level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    return parser


async def run(settings: IndexerSettings, only: str | None = None) -> list[ArtifactReport]:
    """Build the requested artifacts."""
    if only == "navigation":
        return [await generate_navigation_json(settings)]
    if only == "search":
        return [await generate_search_index_json(settings)]
    report = await build_content_data(settings)
    return [report.navigation, report.search_index]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.json_logs)

    try:
        settings = resolve_settings(
            Path.cwd(),
            domain=args.domain,
            content_dir=args.content_dir,
            output_dir=args.output_dir,
            config_dir=args.config_dir,
            max_concurrency=args.max_concurrency,
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Content path: %s", settings.content_dir)
    reports = asyncio.run(run(settings, args.only))
    for report in reports:
        print(f"{report.path} ({report.size_kb} KB, {report.item_count} items)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
