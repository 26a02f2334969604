"""Console entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from mytube.cli.menu import MenuSession
from mytube.core.config import settings
from mytube.core.log import configure_logging, perf_switch
from mytube.db.store import Store
from mytube.services.catalog import seed_catalog


def build_store(*, seed: bool) -> Store:
    """Create the registries, optionally populated with the demo catalogue."""

    store = Store()
    if seed:
        seed_catalog(store)
    return store


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mytube", description="Interactive video sharing simulation")
    parser.add_argument("--no-seed", action="store_true", help="Start without the demo channels and videos")
    parser.add_argument("--perf", action="store_true", help="Enable performance logging at startup")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(logging.getLevelNamesMapping()),
        default=None,
        help="Override MYTUBE_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    if args.perf:
        perf_switch.enabled = True

    store = build_store(seed=settings.seed_catalog and not args.no_seed)
    MenuSession(store, stdin=sys.stdin, stdout=sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
