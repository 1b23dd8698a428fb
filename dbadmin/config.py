"""Application state shared by commands: queries and logger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

from dbadmin.logger import Logger
from dbadmin.queries import CreateUserWithPasswordParams, Queries


@dataclass
class AppConfig:
    queries: Queries
    logger: Logger
    conn: Any = None

    def create_user_with_password(self, params: CreateUserWithPasswordParams) -> None:
        self.queries.create_user_with_password(params)


def new_config(conn: Any, stream: TextIO | None = None) -> AppConfig:
    return AppConfig(queries=Queries(conn), logger=Logger(stream), conn=conn)