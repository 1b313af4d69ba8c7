import uuid
from datetime import timedelta
from typing import Iterable, List, Optional, Sequence, Union

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from sitebuilder.extensions import db
from sitebuilder.models.base import utc_now
from sitebuilder.utils.transaction import transactional
from .base import Filters, Row, Store, StoreError


class SqlAlchemyStore(Store):
    """
    Store backed by the Flask-SQLAlchemy session.

    Tables are resolved by name from ``db.metadata``, so every model must be
    imported (``sitebuilder.models``) before the store is used. Each call is
    its own transaction.
    """

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def _table(self, name: str):
        table = db.metadata.tables.get(name)
        if table is None:
            raise StoreError(name, "resolve", KeyError(f"unknown table {name!r}"))
        return table

    @staticmethod
    def _column(table, name: str):
        if name not in table.c:
            raise StoreError(table.name, "resolve", KeyError(f"unknown column {name!r}"))
        return table.c[name]

    def _where(self, table, filters: Filters):
        clauses = []
        for name, value in filters.items():
            column = self._column(table, name)
            clauses.append(column.is_(None) if value is None else column == value)
        return clauses

    def select(
        self,
        table: str,
        filters: Filters,
        order_by: Optional[Union[str, Sequence[str]]] = None,
        columns: Optional[Sequence[str]] = None,
    ) -> List[Row]:
        t = self._table(table)
        stmt = select(*(self._column(t, c) for c in columns)) if columns else select(t)
        stmt = stmt.where(*self._where(t, filters))

        if order_by:
            keys = [order_by] if isinstance(order_by, str) else list(order_by)
            stmt = stmt.order_by(*(self._column(t, k).asc() for k in keys))

        try:
            result = self.session.execute(stmt)
            return [dict(row._mapping) for row in result]
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(table, "select", exc) from exc

    def insert(self, table: str, rows: Iterable[Row]) -> List[Row]:
        t = self._table(table)
        now = utc_now()

        # Ids are assigned here so the result lines up with the submitted order.
        # created_at steps by a microsecond per row so it also orders rows of one batch.
        prepared = []
        for index, row in enumerate(rows):
            stamp = now + timedelta(microseconds=index)
            values = dict(row)
            values.setdefault("id", str(uuid.uuid4()))
            values.setdefault("created_at", stamp)
            values.setdefault("updated_at", stamp)
            prepared.append(values)

        if not prepared:
            return []

        # executemany binds every row against the first row's keys
        keys = set(prepared[0])
        if any(set(values) != keys for values in prepared[1:]):
            raise StoreError(table, "insert", ValueError("rows in one batch must share the same keys"))

        try:
            with transactional(self.session):
                self.session.execute(insert(t), prepared)
        except SQLAlchemyError as exc:
            raise StoreError(table, "insert", exc) from exc

        return prepared

    def update(self, table: str, id_or_filters: Union[str, Filters], patch: Row) -> int:
        t = self._table(table)
        filters = {"id": id_or_filters} if isinstance(id_or_filters, str) else id_or_filters
        values = dict(patch)
        if "updated_at" in t.c:
            values.setdefault("updated_at", utc_now())

        try:
            with transactional(self.session):
                result = self.session.execute(
                    update(t).where(*self._where(t, filters)).values(**values)
                )
        except SQLAlchemyError as exc:
            raise StoreError(table, "update", exc) from exc

        return result.rowcount

    def delete(self, table: str, filters: Filters) -> int:
        t = self._table(table)
        if not filters:
            raise StoreError(table, "delete", ValueError("refusing unscoped delete"))

        try:
            with transactional(self.session):
                result = self.session.execute(delete(t).where(*self._where(t, filters)))
        except SQLAlchemyError as exc:
            raise StoreError(table, "delete", exc) from exc

        return result.rowcount
