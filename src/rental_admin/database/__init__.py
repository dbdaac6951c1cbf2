"""Database access helpers."""

from .connection import DatabaseManager
from .utils import build_insert_query, build_update_query, process_database_record

__all__ = [
    "DatabaseManager",
    "process_database_record",
    "build_insert_query",
    "build_update_query",
]
