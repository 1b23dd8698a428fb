"""Start-up arguments: database driver, connection string and version."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import NoReturn, Sequence

from dbadmin.utils import validate_db_driver

SHORT = "DbAdmin is a CLI database privilege manager"
LONG = (
    "A CLI for managing your database privilege or access right "
    "without the hassle of running SQL queries."
)
WELCOME = "\nWelcome to DbAdmin CLI. Use h or help for help."
VERSION = "DbAdmin Database Privilege Manager v0.9 -- HEAD"


class StartError(Exception):
    """Raised when the start-up arguments are missing or invalid."""


@dataclass(frozen=True)
class StartOptions:
    driver: str
    dsn: str
    command: str | None = None


class _StartParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise StartError(message)


def _build_parser() -> _StartParser:
    parser = _StartParser(prog="dbadmin", description=f"{SHORT}. {LONG}")
    parser.add_argument(
        "-d", "--dbdriver", help="Database engine to use (e.g. mysql, postgres)"
    )
    parser.add_argument("-D", "--dbstring", help="Database connection string")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["version"],
        help="version: Print the version number of DbAdmin",
    )
    return parser


def parse_start_args(argv: Sequence[str] | None = None) -> StartOptions:
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    if args.dbdriver is None or args.dbstring is None:
        raise StartError("both --dbdriver and --dbstring flags are required")
    if not validate_db_driver(args.dbdriver):
        raise StartError(f"unsupported database driver: {args.dbdriver}")
    return StartOptions(driver=args.dbdriver, dsn=args.dbstring, command=args.command)


def version_text() -> str:
    return VERSION