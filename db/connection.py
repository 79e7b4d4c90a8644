"""
db/connection.py
----------------
Store Gateway: owns a single MySQL connection for the lifetime of one
request and exposes typed query/execute operations.

Driver errors never escape this module. Every operation returns a
``StoreResult`` carrying either a value or a ``StoreError`` whose kind
tells the caller whether the store was unreachable or the statement failed.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

import pymysql
import pymysql.cursors

from config import StoreConfig
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Row = dict[str, Any]
Connector = Callable[..., Any]


class StoreErrorKind(str, Enum):
    CONNECTION = "connection"
    QUERY = "query"


@dataclass(frozen=True)
class StoreError:
    """A store failure with the underlying driver message."""
    kind: StoreErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation: exactly one of ``value`` / ``error`` is meaningful."""
    value: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: StoreErrorKind, message: str) -> "StoreResult[T]":
        return cls(error=StoreError(kind, message))


def _describe(exc: Exception) -> str:
    """Render a PyMySQL error as ``[code] message`` when it carries a code."""
    if len(exc.args) == 2 and isinstance(exc.args[0], int):
        return f"[{exc.args[0]}] {exc.args[1]}"
    return str(exc) or exc.__class__.__name__


class StoreGateway:
    """Thin wrapper around one DB-API connection returning ``StoreResult`` values."""

    def __init__(self, conn):
        self._conn = conn

    @classmethod
    def connect(
        cls, config: StoreConfig, connector: Optional[Connector] = None
    ) -> StoreResult["StoreGateway"]:
        """
        Open a connection to the store. No retry is attempted.

        Args:
            config: Connection parameters.
            connector: DB-API ``connect`` callable (defaults to ``pymysql.connect``).

        Returns:
            A result holding the gateway, or a ``connection`` error.
        """
        connector = connector or pymysql.connect
        try:
            conn = connector(
                host=config.host,
                port=config.port,
                user=config.user,
                password=config.password,
                database=config.dbname,
                connect_timeout=config.connect_timeout,
                charset="utf8mb4",
                cursorclass=pymysql.cursors.DictCursor,
            )
        except (pymysql.MySQLError, RuntimeError, OSError) as e:
            message = _describe(e)
            logger.error(f"Failed to connect to {config.host}:{config.port}/{config.dbname}: {message}")
            return StoreResult.failure(StoreErrorKind.CONNECTION, message)
        logger.debug(f"Connected to {config.host}:{config.port}/{config.dbname}")
        return StoreResult.success(cls(conn))

    def query(self, sql: str, params: Optional[tuple] = None) -> StoreResult[list[Row]]:
        """Run a statement that returns rows; each row is a column -> value dict."""
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
                rows = list(cur.fetchall())
        except pymysql.MySQLError as e:
            message = _describe(e)
            logger.error(f"Query failed: {message}")
            return StoreResult.failure(StoreErrorKind.QUERY, message)
        return StoreResult.success(rows)

    def execute(self, sql: str, params: Optional[tuple] = None) -> StoreResult[int]:
        """
        Run a statement that changes data and commit it.

        Returns:
            A result holding the affected row count, or a ``query`` error
            (the transaction is rolled back).
        """
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
                affected = cur.rowcount
            self._conn.commit()
        except pymysql.MySQLError as e:
            message = _describe(e)
            logger.error(f"Statement failed: {message}")
            self._rollback()
            return StoreResult.failure(StoreErrorKind.QUERY, message)
        return StoreResult.success(affected)

    def _rollback(self) -> None:
        try:
            self._conn.rollback()
        except pymysql.MySQLError as e:
            logger.warning(f"Rollback failed: {_describe(e)}")

    def close(self) -> None:
        """Release the underlying connection."""
        try:
            self._conn.close()
        except pymysql.MySQLError as e:
            logger.warning(f"Closing connection failed: {_describe(e)}")
        logger.debug("Connection closed.")


@contextmanager
def open_gateway(
    config: StoreConfig, connector: Optional[Connector] = None
) -> Iterator[StoreResult[StoreGateway]]:
    """
    Scoped store access: yields the connect result and always closes the
    connection on exit, including when the body raises.

    Usage:
        with open_gateway(config) as result:
            if result.ok:
                result.value.query("SELECT 1")
    """
    result = StoreGateway.connect(config, connector)
    try:
        yield result
    finally:
        if result.ok:
            result.value.close()
