"""Command line entry point for the NoitaEdit save-path helper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import ConfigStore, ConsoleInputError, KeyNotFoundError, SavePathError, SavePathResolver

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="NoitaEdit save path helper")
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory holding setup.cf instead of the per-user default.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the config file path, creating it if needed, and exit.",
    )
    parser.add_argument(
        "--get",
        metavar="KEY",
        help="Print the value stored under KEY.",
    )
    parser.add_argument(
        "--set",
        nargs=2,
        metavar=("KEY", "VALUE"),
        help="Store VALUE under KEY.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output.",
    )

    args = parser.parse_args(argv)
    if args.set:
        args.set[0] = args.set[0].strip()
        if not args.set[0] or "=" in args.set[0]:
            parser.error("--set KEY must be non-empty and must not contain '='.")
    if args.get is not None:
        args.get = args.get.strip()
    _configure_logging(args.verbose)

    store = ConfigStore(args.config_dir)

    try:
        config_path = store.ensure_file_exists()

        if args.show_config:
            sys.stdout.write(f"{config_path}\n")
            return 0

        if args.set:
            key, value = args.set
            store.set_value(config_path, key, value)
            return 0

        if args.get is not None:
            sys.stdout.write(f"{store.get_value(config_path, args.get)}\n")
            return 0

        save_path = SavePathResolver(store).resolve()
    except KeyNotFoundError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    except (ConsoleInputError, SavePathError, OSError) as exc:
        logger.debug("Save path resolution aborted", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1

    sys.stdout.write(f"{save_path}\n")
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
