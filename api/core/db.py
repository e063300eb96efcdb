"""
Database access helpers (raw SQL) using asyncpg.

There is no pool: every call opens its own TLS connection, runs exactly one
statement and closes the connection before returning. Routes only see the
`fetch_all` / `execute` surface, so a pooled implementation can replace
`Database` without touching feature code.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
import ssl
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg

from .settings import Settings

logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    pass


class DatabaseQueryError(RuntimeError):
    """
    A statement reached the server and failed. `str(exc)` is the backend text.
    """


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. "UPDATE 1" or "DELETE 0".
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class Database:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def password(self) -> str:
        return os.environ.get(self._settings.db_password_env, "").strip()

    def ssl_context(self) -> ssl.SSLContext | None:
        cafile = (self._settings.db_ssl_ca or "").strip()
        if not cafile:
            return None
        return ssl.create_default_context(cafile=cafile)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[asyncpg.Connection]:
        password = self.password()
        if not password:
            logger.error("%s environment variable is not set", self._settings.db_password_env)
            raise DatabaseConnectionError(f"{self._settings.db_password_env} is not set.")

        try:
            conn = await asyncpg.connect(
                host=self._settings.db_host,
                port=self._settings.db_port,
                user=self._settings.db_user,
                password=password,
                database=self._settings.db_name,
                ssl=self.ssl_context(),
                timeout=self._settings.db_connect_timeout,
                command_timeout=self._settings.db_command_timeout,
            )
        except (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError) as exc:
            logger.error(
                "db_connect_failed host=%s port=%s error=%s",
                self._settings.db_host,
                self._settings.db_port,
                exc,
            )
            raise DatabaseConnectionError(str(exc)) from exc

        try:
            yield conn
        finally:
            try:
                await conn.close()
            except (OSError, asyncpg.InterfaceError) as exc:
                # A reset connection may fail to close; the statement outcome stands.
                logger.warning("db_close_failed error=%s", exc)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self.connect() as conn:
            try:
                rows = await conn.fetch(sql, *args)
            except asyncio.TimeoutError as exc:
                # Must precede OSError: TimeoutError subclasses it on 3.11+.
                logger.exception("db_query_timeout")
                raise DatabaseQueryError("Query timed out.") from exc
            except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError) as exc:
                logger.exception("db_query_failed")
                raise DatabaseQueryError(str(exc)) from exc
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
        """
        async with self.connect() as conn:
            try:
                status = await conn.execute(sql, *args)
            except asyncio.TimeoutError as exc:
                logger.exception("db_statement_timeout")
                raise DatabaseQueryError("Statement timed out.") from exc
            except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError) as exc:
                logger.exception("db_statement_failed")
                raise DatabaseQueryError(str(exc)) from exc
        return _affected_rows(status)
