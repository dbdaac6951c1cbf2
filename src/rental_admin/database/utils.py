"""
Database utility functions for common operations.
"""

from typing import Any, Dict, Iterable, List, Tuple
from uuid import UUID


def process_database_record(data: Any, uuid_fields: Iterable[str] = None) -> Dict[str, Any]:
    """Process a database record for entity conversion.

    Converts asyncpg.Record to dict and UUID columns to strings.

    Args:
        data: Raw database record (Dict or asyncpg.Record)
        uuid_fields: Field names that contain UUIDs (if None, auto-detects)

    Returns:
        Processed data ready for an entity
    """
    if hasattr(data, 'items'):
        data = dict(data)

    if uuid_fields is None:
        uuid_fields = ['id', 'user_id', 'customer_id']

    for field in uuid_fields:
        if isinstance(data.get(field), UUID):
            data[field] = str(data[field])

    return data


def build_update_query(
    table: str,
    values: Dict[str, Any],
    key_column: str = "id",
    touch_column: str = "updated_at",
) -> Tuple[str, List[Any]]:
    """Build an ``UPDATE ... RETURNING *`` query for the given columns.

    The key value is bound as ``$1``; columns follow in ``values`` order.

    Args:
        table: Table name
        values: Column to new value
        key_column: Column identifying the row
        touch_column: Timestamp column refreshed on every update

    Returns:
        Tuple of (query string, parameter list without the key)
    """
    if not values:
        raise ValueError("Values dictionary cannot be empty")

    assignments = [f"{column} = ${index}" for index, column in enumerate(values, start=2)]
    if touch_column:
        assignments.append(f"{touch_column} = timezone('utc', now())")

    query = f"""
        UPDATE
          {table}
        SET
          {', '.join(assignments)}
        WHERE
          {key_column} = $1
        RETURNING
          *
    """
    return query, list(values.values())


def build_insert_query(table: str, values: Dict[str, Any]) -> Tuple[str, List[Any]]:
    """Build an ``INSERT ... RETURNING *`` query.

    Args:
        table: Table name
        values: Column to value

    Returns:
        Tuple of (query string, parameter list)
    """
    if not values:
        raise ValueError("Values dictionary cannot be empty")

    columns = list(values)
    placeholders = ', '.join(f'${i + 1}' for i in range(len(columns)))
    query = f"""
        INSERT INTO
          {table} ({', '.join(columns)})
        VALUES
          ({placeholders})
        RETURNING
          *
    """
    return query, list(values.values())
