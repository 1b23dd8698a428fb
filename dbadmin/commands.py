"""Commands typed at the interactive prompt: add and help."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence, TextIO

from dbadmin.config import AppConfig
from dbadmin.queries import CreateUserWithPasswordParams
from dbadmin.start import LONG, SHORT
from dbadmin.utils import InputRejected, generate_random_password, run_interactive

ROOT_WELCOME = "Welcome to DbAdmin CLI. Use h or help for help."
HELP_HEADER = "\nDbAdmin help guide: \n\n"
TYPE_IGNORED = "role type not needed in when user and password are parsed"
AUTOGENERATE_PROMPT = "\nDo you want you autogenerate password, Yes/No (Y/N)? "
MANUAL_ENTRY_PROMPT = "\nEnter password: "
MIN_PASSWORD_LENGTH = 8

ADD_SHORT = "Add a new privilege to a database user"
ADD_LONG = """\
The 'add' command creates a new user in the target PostgreSQL database with the appropriate access privileges.

This command supports both manual and interactive modes for adding users:
- You can supply the username and password via flags (--user and --password).
- If the password is not provided, the CLI will prompt you to either generate a secure password or manually enter one.
- You may optionally specify a privilege type using the --type flag to assign predefined roles or permission sets."""
ADD_EXAMPLE = """\
examples:
  add --user alice --password strongpassword123
      Creates a new database user 'alice' with the specified password.

  add --user bob --type readonly
      Prompts to either generate or manually input a password for user 'bob',
      and then assigns the 'readonly' access privileges after creation.

notes:
  - The --user flag is required.
  - If --password is not specified, the CLI will ask whether to autogenerate one.
  - If both --user and --password are provided, --type is ignored."""

_YES = frozenset({"yes", "YES", "Yes", "Y", "y"})
_NO = frozenset({"no", "NO", "No", "N", "n"})
_COMMANDS = frozenset({"add", "help", "h"})


class CommandError(Exception):
    """Raised when a command cannot be parsed or fails."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise CommandError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="dbadmin", description=f"{SHORT}. {LONG}", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="help for dbadmin")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    add = commands.add_parser(
        "add",
        help=ADD_SHORT,
        description=ADD_LONG,
        epilog=ADD_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    add.add_argument("-h", "--help", action="store_true", help="help for add")
    add.add_argument(
        "-t",
        "--type",
        dest="ptype",
        help="Privilege type you'd like to assign (e.g. user, role) [required]",
    )
    add.add_argument("-u", "--user", help="Username to add [required]")
    add.add_argument(
        "-p",
        "--password",
        help="Password is the associated auth for a Username [required if type is user]",
    )
    add.set_defaults(command_parser=add)

    commands.add_parser("help", aliases=["h"], add_help=False)
    return parser


def _accept_password(text: str) -> str:
    if not text:
        raise InputRejected("password cannot be empty")
    if len(text) < MIN_PASSWORD_LENGTH:
        raise InputRejected(f"minimum of {MIN_PASSWORD_LENGTH} characters allowed")
    return text


def _prompt_password(
    username: str, config: AppConfig, input_stream: TextIO | None, out: TextIO
) -> str:
    def choose(answer: str) -> str:
        if answer in _YES:
            generated = generate_random_password()
            out.write(
                f"\nAdding {username} with password: {generated}... "
                "Make sure to write down generated password\n"
            )
            return generated
        if answer in _NO:
            return run_interactive(
                MANUAL_ENTRY_PROMPT, _accept_password, input_stream, out, config.logger
            )
        raise InputRejected("invalid input: password is required")

    return run_interactive(AUTOGENERATE_PROMPT, choose, input_stream, out, config.logger)


def _run_add(
    args: argparse.Namespace,
    config: AppConfig,
    input_stream: TextIO | None,
    out: TextIO,
) -> None:
    if args.user is None:
        raise CommandError('required flag(s) "user" not set')
    username = args.user
    if args.password is None:
        if args.ptype is None:
            raise CommandError('required flag(s) "type" not set')
        password = _prompt_password(username, config, input_stream, out)
    else:
        if args.ptype is not None:
            out.write(TYPE_IGNORED + "\n")
        password = args.password

    try:
        config.create_user_with_password(
            CreateUserWithPasswordParams(username=username, password=password)
        )
    except Exception as exc:
        raise CommandError(f"failed to create user: {exc}") from exc
    out.write(
        f"\nNew database user has been added successfully. "
        f"{username} with password: {password} \n"
    )


def execute(
    argv: Sequence[str],
    config: AppConfig,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> None:
    """Run one command line typed at the prompt."""
    out = sys.stdout if output_stream is None else output_stream
    args = list(argv)
    if args and not args[0].startswith("-") and args[0] not in _COMMANDS:
        raise CommandError(f'unknown command "{args[0]}" for "dbadmin"')

    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.command is None:
        out.write(parser.format_help() if parsed.help else ROOT_WELCOME + "\n\n")
    elif parsed.command in ("help", "h"):
        out.write(HELP_HEADER + parser.format_help())
    elif parsed.help:
        out.write(parsed.command_parser.format_help())
    else:
        _run_add(parsed, config, input_stream, out)