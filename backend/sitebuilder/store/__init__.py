from .base import Store, StoreError
from .sqlalchemy_store import SqlAlchemyStore

__all__ = ["Store", "StoreError", "SqlAlchemyStore"]
