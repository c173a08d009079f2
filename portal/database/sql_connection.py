from contextlib import contextmanager

from portal.core.config import get_settings


@contextmanager
def get_sql_db_connection():
    """Context manager that opens and closes the SQL connection safely."""
    # pyodbc loads the system ODBC driver manager, so it is imported on first use.
    import pyodbc

    settings = get_settings()
    conn = pyodbc.connect(settings.require_db_url(), timeout=settings.db_connect_timeout)
    try:
        yield conn
    finally:
        conn.close()


def driver_errors():
    import pyodbc

    return (pyodbc.Error,)
