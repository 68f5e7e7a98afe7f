"""
In-memory product store.

``ProductStore`` owns the ordered collection of product records for the
lifetime of the process.  Records are kept in insertion order and every
read returns copies, so callers never hold a reference into the store.
A lock serialises access; under the default event loop server this is
uncontended, but it keeps mutations atomic if handlers ever run in a
threadpool.

The application creates one store in ``create_app`` and keeps it on
``app.state.store``.  Route handlers receive it through the
``get_store`` dependency, which lets tests build isolated instances.
"""

import threading
import uuid
from typing import List, Optional

from fastapi import Request

from ..schemas.product import ProductCreate, ProductRead
from .errors import NotFoundError


class ProductStore:
    """Insertion-ordered collection of products keyed by generated id."""

    def __init__(self) -> None:
        self._records: List[ProductRead] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, product_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == product_id:
                return index
        return None

    def insert(self, fields: ProductCreate) -> ProductRead:
        """Store a new record under a freshly generated id and return a copy."""
        record = ProductRead(id=str(uuid.uuid4()), **fields.model_dump())
        with self._lock:
            self._records.append(record)
        return record.model_copy()

    def find_by_id(self, product_id: str) -> Optional[ProductRead]:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._records[index].model_copy()

    def replace_by_id(self, product_id: str, fields: ProductCreate) -> ProductRead:
        """Replace every non-id attribute of a record.

        Raises ``NotFoundError`` if no record has ``product_id``.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                raise NotFoundError()
            record = ProductRead(id=product_id, **fields.model_dump())
            self._records[index] = record
            return record.model_copy()

    def delete_by_id(self, product_id: str) -> None:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                raise NotFoundError()
            del self._records[index]

    def list_all(self) -> List[ProductRead]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return [record.model_copy() for record in self._records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the application's product store."""
    return request.app.state.store
