# src/common/persistence/mysql_connection.py
"""Shared MySQL connection handling for the repositories."""

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError


class MySQLConnectionMixin:
    """Lazily opens one connection per repository instance and reuses it while alive."""

    _connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    port=settings.DB_PORT,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,  # Better control over transactions
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def _execute_ddl(self, query: str, table_name: str) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query)
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating {table_name} table: {e}", original_exception=e)
        finally:
            cursor.close()

    def close(self) -> None:
        if self._connection and self._connection.is_connected():
            self._connection.close()

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        try:
            self.close()
        except Error:
            pass
