"""Random helpers and the interactive prompt loop used by commands."""

from __future__ import annotations

import secrets
import sys
from typing import Callable, Iterable, TextIO, TypeVar

from dbadmin.logger import Logger

CHARACTERS = "AaBbCcDdEeFfGgHhIiJjKkLlMmNnOoPpQqRrSsTtUuVvWwXxYyZz0123456789"
PASSWORD_LENGTH = 15
DB_DRIVERS = ("postgres", "mysql")

T = TypeVar("T")


class InputRejected(Exception):
    """Raised by a prompt handler to reject the input and ask again."""


def random_int(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    if high < low:
        raise ValueError(f"invalid range: {low} > {high}")
    return low + secrets.randbelow(high - low + 1)


def generate_random_chars(length: int) -> str:
    return "".join(secrets.choice(CHARACTERS) for _ in range(length))


def generate_random_password() -> str:
    return generate_random_chars(PASSWORD_LENGTH)


def validate_db_driver(driver: str) -> bool:
    return driver in DB_DRIVERS


def is_valid_subcommand(available: Iterable[str], sub: str) -> bool:
    return sub in set(available)


def run_interactive(
    intro: str,
    handler: Callable[[str], T],
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
    logger: Logger | None = None,
) -> T:
    """Prompt until the handler accepts a line and return what it returns.

    The handler raises InputRejected to have the error logged and the
    prompt repeated. Typing ``exit`` ends the program.
    """
    source = sys.stdin if input_stream is None else input_stream
    out = sys.stdout if output_stream is None else output_stream
    log = Logger(output_stream) if logger is None else logger
    while True:
        out.write(intro + "\n")
        out.flush()
        line = source.readline()
        if not line:
            raise EOFError("error reading input: EOF")
        answer = line.strip()
        if answer == "exit":
            raise SystemExit(0)
        try:
            return handler(answer)
        except InputRejected as exc:
            log.error(exc)