"""Command-line entry point that loads one classification view."""

from __future__ import annotations

import argparse
import asyncio
import sys

import msgspec

from .config import EmbedConfig
from .errors import EmbedConfigError
from .loader import DatasetLoader, LoadResult
from .logging import configure_logging, get_logger, log_warning

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landscape-embed",
        description="Load a landscape classification view and inspect it.",
    )
    parser.add_argument("classify_by", help="Classification dimension, e.g. category")
    parser.add_argument("key", help="Classification value, e.g. networking")
    parser.add_argument(
        "--base-path",
        default=None,
        help="Deployment base path (defaults to LANDSCAPE_EMBED_BASE_PATH)",
    )
    parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        default=None,
        help="Category filter; repeat to load the full dataset",
    )
    parser.add_argument(
        "--item-id",
        default=None,
        help="Print the joined item with this id as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to LANDSCAPE_EMBED_LOG_LEVEL)",
    )
    return parser


async def _run(
    config: EmbedConfig, args: argparse.Namespace
) -> tuple[LoadResult, DatasetLoader]:
    loader = DatasetLoader(config)
    try:
        result = await loader.load(
            args.classify_by, args.key, args.base_path, args.categories
        )
    finally:
        await loader.aclose()
    return result, loader


def main(argv: list[str] | None = None) -> int:
    """Load a view and print a summary, or one item as JSON.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 when the view (and item, if requested) was served,
        otherwise 1.

    """
    args = _build_parser().parse_args(argv)
    try:
        config = EmbedConfig.from_env()
    except EmbedConfigError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 1
    level, invalid = configure_logging(args.log_level or config.log_level)
    if invalid:
        log_warning(logger, "unknown log level, using %s", level)

    result, loader = asyncio.run(_run(config, args))
    if result.failed:
        print(f"failed to load {result.name}: {result.error}", file=sys.stderr)
        return 1

    if args.item_id is None:
        print(f"loaded {result.name} ({result.item_count} items) from {result.url}")
        return 0

    item = loader.get_item_by_id(args.classify_by, args.key, args.item_id)
    if item is None:
        print(f"item {args.item_id} not found in {result.name}", file=sys.stderr)
        return 1
    print(msgspec.json.encode(item).decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
