"""Database statements run against a DB-API connection."""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass
from typing import Any

CREATE_USER = "CREATE USER {username} WITH PASSWORD '{password}';"


@dataclass(frozen=True)
class CreateUserWithPasswordParams:
    username: str
    password: str


class Queries:
    """Runs statements on a connection, or on a transaction via with_tx."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn
        self._commits = True

    def with_tx(self, tx: Any) -> "Queries":
        """Return queries that run inside the given transaction without committing."""
        queries = Queries(tx)
        queries._commits = False
        return queries

    def create_user_with_password(self, params: CreateUserWithPasswordParams) -> None:
        if self._conn is None:
            raise ConnectionError("database connection is not available")
        statement = CREATE_USER.format(username=params.username, password=params.password)
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(statement)
        if self._commits:
            self._conn.commit()