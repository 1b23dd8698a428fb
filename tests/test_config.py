import io

from dbadmin.config import new_config
from dbadmin.queries import CreateUserWithPasswordParams


class FakeCursor:
    def __init__(self, sink):
        self.sink = sink

    def execute(self, statement):
        self.sink.append(statement)

    def close(self):
        pass


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.commits = 0

    def cursor(self):
        return FakeCursor(self.executed)

    def commit(self):
        self.commits += 1


def test_new_config_holds_connection():
    conn = FakeConnection()
    config = new_config(conn)
    assert config.conn is conn


def test_config_creates_user_through_queries():
    conn = FakeConnection()
    config = new_config(conn)
    password = "password"
    config.create_user_with_password(
        CreateUserWithPasswordParams(username="carol", password=password)
    )
    assert conn.executed == ["CREATE USER carol WITH PASSWORD 'password';"]
    assert conn.commits == 1


def test_config_logger_writes_to_stream():
    stream = io.StringIO()
    config = new_config(FakeConnection(), stream)
    config.logger.warn("heads up")
    assert "WARNING: " in stream.getvalue()
    assert stream.getvalue().endswith(" heads up\n")