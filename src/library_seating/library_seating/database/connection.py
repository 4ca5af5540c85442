from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import mysql.connector

from ..core.exceptions import StoreError


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: Outside a transaction we create short-lived connections per operation.
    Inside ``transaction()`` every repository call made by the same thread
    shares one connection, committed once when the block exits.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._local = threading.local()

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as exc:
            raise StoreError(f"Cannot connect to database: {exc}") from exc

    def active_connection(self):
        return getattr(self._local, "conn", None)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self.active_connection() is not None:
            # Nested blocks join the outer transaction.
            yield
            return

        conn = self.connect()
        self._local.conn = conn
        try:
            yield
            conn.commit()
        except mysql.connector.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        except BaseException:
            conn.rollback()
            raise
        finally:
            self._local.conn = None
            conn.close()
