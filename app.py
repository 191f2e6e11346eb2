from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence, TextIO

from dotenv import load_dotenv

from dispatcher import Dispatcher
from flatkv import PersistenceError, Store
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

BANNER = "Welcome to flatkv!"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive key-value store backed by a flat file."
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Persistence file (default: $KV_DB_PATH or data/flatkv.tsv)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default=None,
        help="Logging level for stderr (default: $KV_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def create_dispatcher(settings: Settings) -> Dispatcher:
    """Open the store at the configured path and wrap it in a dispatcher."""
    store = Store.open(settings.db_path)
    logger.info("STARTUP: loaded %d entries from %s", len(store), settings.db_path)
    return Dispatcher(store, delete_reports_miss=settings.delete_reports_miss)


def run_repl(dispatcher: Dispatcher, stdin: TextIO, stdout: TextIO, prompt: str = "> ") -> bool:
    """
    Read commands until EXIT succeeds or input ends.

    Returns True once the store has been saved.
    """
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # EOF behaves like EXIT
            stdout.write("\n")
            result = dispatcher.exit()
            print(result.output, file=stdout)
            return result.exit

        result = dispatcher.execute(line)
        if result.output is not None:
            print(result.output, file=stdout)
        if result.exit:
            return True


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv("local.env")
    args = parse_args(argv)

    settings = get_settings()
    if args.db is not None:
        settings = replace(settings, db_path=args.db)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)

    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    try:
        try:
            dispatcher = create_dispatcher(settings)
        except PersistenceError as e:
            print(f"Error: could not load {e.path}: {e.reason}", file=sys.stderr)
            return 1

        print(BANNER)
        saved = run_repl(dispatcher, sys.stdin, sys.stdout, settings.prompt)
    except KeyboardInterrupt:
        logger.warning("SHUTDOWN: interrupted, unsaved changes discarded")
        return 130
    return 0 if saved else 1


if __name__ == "__main__":
    raise SystemExit(main())
