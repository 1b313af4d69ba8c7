"""
Row-level store interface consumed by the tenancy and provisioning core.

Rows cross this boundary as plain dicts. Every call is scoped by an explicit
equality filter; the only unscoped lookup is the website lookup by subdomain.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

Row = Dict[str, Any]
Filters = Mapping[str, Any]


class StoreError(Exception):
    """A store operation failed. Carries the table and operation for diagnosis."""

    def __init__(self, table: str, operation: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} on {table} failed{detail}")
        self.table = table
        self.operation = operation
        self.cause = cause


class Store(ABC):
    @abstractmethod
    def select(
        self,
        table: str,
        filters: Filters,
        order_by: Optional[Union[str, Sequence[str]]] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> List[Row]:
        """Rows matching every equality filter, optionally ordered (ascending)."""

    @abstractmethod
    def insert(self, table: str, rows: Iterable[Row]) -> List[Row]:
        """Insert rows and return them with ids, in submitted order."""

    @abstractmethod
    def update(self, table: str, id_or_filters: Union[str, Filters], patch: Row) -> int:
        """Patch one row by id, or every row matching the filters. Returns the row count."""

    @abstractmethod
    def delete(self, table: str, filters: Filters) -> int:
        """Delete rows matching the filters. Returns the row count."""

    def select_one(self, table: str, filters: Filters, columns: Optional[Sequence[str]] = None) -> Optional[Row]:
        rows = self.select(table, filters, columns=columns)
        return rows[0] if rows else None
