from __future__ import annotations

import json
import re
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.db import DatabaseConnectionError, DatabaseQueryError
from core.settings import Settings
from main import create_app

_INSERT = re.compile(r"INSERT INTO (\w+) \(([^)]*)\)\s+VALUES \(([^)]*)\)", re.S)
_UPDATE = re.compile(r"UPDATE (\w+)\s+SET (.*?)\s+WHERE id = \$(\d+)", re.S)
_SELECT = re.compile(r"SELECT (.*?)\s+FROM (\w+)", re.S)
_DELETE = re.compile(r"DELETE FROM (\w+)\s+WHERE id = \$1", re.S)


class InMemoryDatabase:
    """
    Stand-in for `core.db.Database` that understands the handful of statement
    shapes the repositories issue. Every call is recorded as (sql, args).
    """

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {"announcements": [], "events": []}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._next_id = 1
        self.connection_error: str | None = None
        self.query_error: str | None = None

    def _check(self) -> None:
        if self.connection_error is not None:
            raise DatabaseConnectionError(self.connection_error)
        if self.query_error is not None:
            raise DatabaseQueryError(self.query_error)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append((sql, args))
        self._check()
        match = _SELECT.search(sql)
        assert match, sql
        columns = [c.strip() for c in match.group(1).split(",")]
        return [{c: row.get(c) for c in columns} for row in self.tables[match.group(2)]]

    async def execute(self, sql: str, *args: Any) -> int:
        self.calls.append((sql, args))
        self._check()

        match = _INSERT.search(sql)
        if match:
            columns = [c.strip() for c in match.group(2).split(",")]
            row = {"id": self._next_id}
            self._next_id += 1
            row.update(zip(columns, args))
            self.tables[match.group(1)].append(row)
            return 1

        match = _UPDATE.search(sql)
        if match:
            assignments = re.findall(r"(\w+) = \$(\d+)", match.group(2))
            target_id = args[int(match.group(3)) - 1]
            count = 0
            for row in self.tables[match.group(1)]:
                if row["id"] == target_id:
                    for column, position in assignments:
                        row[column] = args[int(position) - 1]
                    count += 1
            return count

        match = _DELETE.search(sql)
        if match:
            rows = self.tables[match.group(1)]
            kept = [row for row in rows if row["id"] != args[0]]
            self.tables[match.group(1)] = kept
            return len(rows) - len(kept)

        raise AssertionError(f"unexpected statement: {sql}")


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps(
            [
                {"username": "admin", "password": "s3cret"},
                {"username": "editor", "password": "karts2025"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(users_file) -> Settings:
    return Settings(users_file=str(users_file))


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
