from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class TransactionManager(Protocol):
    """What services need to run a unit of work atomically."""

    def transaction(self) -> Any:
        raise NotImplementedError


class DatabaseConnection:
    """DB connection factory with a per-thread transaction scope.

    Outside `transaction()` every repository call gets a short-lived connection
    that commits on its own. Inside it, all calls on the same thread share one
    connection, committed once at the end or rolled back on error.

    Note: Built once by the container and passed by reference; there is no
    module-level instance.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._local = threading.local()

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def current(self) -> Optional[Any]:
        """Connection bound by an open `transaction()` on this thread, if any."""
        return getattr(self._local, "conn", None)

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        active = self.current()
        if active is not None:
            # Nested scope joins the outer transaction.
            yield active
            return

        conn = self.connect()
        self._local.conn = conn
        try:
            yield conn
            conn.commit()
        except Exception:
            logger.warning("Rolling back transaction", exc_info=True)
            conn.rollback()
            raise
        finally:
            self._local.conn = None
            conn.close()
