"""
Store client shared by every handler.

Handlers never open connections themselves: they receive a ``RecordStore``
through the ``get_record_store`` dependency, so tests can bind the same
queries to another DB-API driver.
"""
import logging
from typing import Any, Callable, ContextManager, Dict, List, Optional, Sequence, Tuple, Type

from portal.core.config import ConfigError
from portal.core.errors import StoreError
from portal.database import sql_connection

logger = logging.getLogger(__name__)

TABLE_NAME = "class_semester_info"


class RecordStore:
    def __init__(
        self,
        connection: Callable[[], ContextManager[Any]],
        errors: Tuple[Type[BaseException], ...],
    ):
        """
        :param connection: context manager factory that yields an open DB-API
            connection and closes it on exit
        :param errors: the driver's exception classes, reported as ``StoreError``
        """
        self._connection = connection
        self._errors = errors + (ConfigError,)

    def _run(self, operation: str, query: str, params: Sequence[Any], handle):
        try:
            with self._connection() as conn:
                cursor = conn.cursor()
                cursor.execute(query, tuple(params))
                return handle(conn, cursor)
        except self._errors as e:
            logger.error("Store error during %s: %s", operation, e)
            raise StoreError(operation, e) from e

    def fetch_all(self, operation: str, query: str, params: Sequence[Any] = ()) -> List[Dict]:
        def handle(conn, cursor):
            rows = cursor.fetchall()
            column_names = [column[0] for column in cursor.description]
            return [dict(zip(column_names, row)) for row in rows]

        return self._run(operation, query, params, handle)

    def fetch_one(self, operation: str, query: str, params: Sequence[Any] = ()) -> Optional[Dict]:
        def handle(conn, cursor):
            record = cursor.fetchone()
            if not record:
                return None
            column_names = [column[0] for column in cursor.description]
            return dict(zip(column_names, record))

        return self._run(operation, query, params, handle)

    def execute(self, operation: str, query: str, params: Sequence[Any] = ()) -> int:
        """Run a write statement, commit it and return the affected row count."""

        def handle(conn, cursor):
            affected = cursor.rowcount
            conn.commit()
            return affected

        return self._run(operation, query, params, handle)


def get_record_store() -> RecordStore:
    return RecordStore(
        connection=sql_connection.get_sql_db_connection,
        errors=sql_connection.driver_errors(),
    )
