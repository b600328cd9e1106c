"""Command-line interface: print the directory a path resolves to.

The program cannot change the calling shell's directory itself, so it is
meant to be wrapped by a shell function (see ``--shell-init``).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING

from wslcd.errors import WslcdError
from wslcd.load_config import load_config
from wslcd.resolve_target import resolve_target

if TYPE_CHECKING:
    from collections.abc import Sequence

CONFIG_ENV = "WSLCD_CONFIG"

SHELL_FUNCTION = (
    'wslcd() { local t; t="$(command wslcd "$@")" || return; '
    '[ -z "$t" ] && return; cd -- "$t"; }'
)

EPILOG = f"""examples:
  wslcd /var/log
  wslcd ../src
  wslcd ~/projects
  wslcd "C:\\\\Users\\\\me\\\\Documents"
  wslcd "D:/Work/Repo"
  wslcd c:JunkProjectsMyRepo   # collapsed Windows path without separators

This program prints the resolved target directory. Use a shell wrapper to
actually cd:
  {SHELL_FUNCTION}
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wslcd",
        description="Resolve Linux or Windows-style paths for cd.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", help="Directory to resolve")
    parser.add_argument(
        "--config",
        default=os.environ.get(CONFIG_ENV),
        help=f"Path to YAML configuration file (default: ${CONFIG_ENV})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr",
    )
    parser.add_argument(
        "--shell-init",
        action="store_true",
        help="Print the shell function that wraps wslcd and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Resolve the requested path and print it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.shell_init:
        print(SHELL_FUNCTION)
        return 0
    if args.path is None:
        parser.error("the following arguments are required: path")

    try:
        config = load_config(args.config)
    except WslcdError as exc:
        raise SystemExit(f"error: {exc}") from exc

    level = logging.DEBUG if args.verbose else config["logging"]["level"].upper()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cwd = os.getcwd()
    except OSError as exc:
        msg = f"error: unable to get current working directory: {exc}"
        raise SystemExit(msg) from exc
    home = os.environ.get("HOME", "")

    try:
        result = resolve_target(args.path, cwd, home, config)
    except WslcdError as exc:
        raise SystemExit(f"error: {exc}") from exc

    print(result.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
