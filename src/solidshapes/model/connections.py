"""
Data connections.

``GetCustomerData`` depends on the ``DbConnection`` abstraction only.
Switching from MySQL to Postgres means passing a different connection,
not editing ``GetCustomerData``.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class DbConnection(ABC):
    @abstractmethod
    def connect(self) -> str:
        ...


class MySqlConnection(DbConnection):
    def connect(self) -> str:
        logger.debug("Connecting to MySQL.")
        return "connection"


class PostgresConnection(DbConnection):
    def connect(self) -> str:
        logger.debug("Connecting to Postgres.")
        return "connection"


class GetCustomerData:
    def __init__(self, db_connection: DbConnection) -> None:
        if not isinstance(db_connection, DbConnection):
            raise TypeError("db_connection must implement DbConnection.")
        self._db_connection = db_connection

    def get_data(self) -> str:
        connection = self._db_connection.connect()
        logger.debug(f"Got '{connection}' from {type(self._db_connection).__name__}.")
        return "data"
