import copy
from typing import Dict, Optional, Set, Tuple

from quiz_admin.core.database import DocumentStore, DocumentStoreError, StoredDocument, new_key


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store. ``fail(op, collection, key)`` makes matching calls raise."""

    def __init__(self):
        self.collections: Dict[str, Dict[str, dict]] = {}
        self.failures: Set[Tuple[str, str, Optional[str]]] = set()
        self.calls = []

    def seed(self, collection: str, key: str, data: dict) -> None:
        self.collections.setdefault(collection, {})[key] = copy.deepcopy(data)

    def keys(self, collection: str):
        return set(self.collections.get(collection, {}))

    def raw(self, collection: str, key: str) -> Optional[dict]:
        return self.collections.get(collection, {}).get(key)

    def fail(self, op: str, collection: str, key: Optional[str] = None) -> None:
        self.failures.add((op, collection, key))

    def _check(self, op, collection, key=None):
        self.calls.append((op, collection, key))
        if (op, collection, None) in self.failures or (op, collection, key) in self.failures:
            raise DocumentStoreError(f"Document store {op} failed: simulated outage")

    def _docs(self, collection):
        return self.collections.setdefault(collection, {})

    async def get(self, collection, key):
        self._check("get", collection, key)
        data = self._docs(collection).get(key)
        return StoredDocument(key, copy.deepcopy(data)) if data is not None else None

    async def get_all(self, collection):
        self._check("get_all", collection)
        return [StoredDocument(k, copy.deepcopy(v)) for k, v in self._docs(collection).items()]

    async def set(self, collection, key, data):
        self._check("set", collection, key)
        self._docs(collection)[key] = copy.deepcopy(data)

    async def add(self, collection, data):
        key = new_key()
        self._check("add", collection, key)
        self._docs(collection)[key] = copy.deepcopy(data)
        return key

    async def update(self, collection, key, fields):
        self._check("update", collection, key)
        docs = self._docs(collection)
        if key not in docs:
            return False
        docs[key].update(copy.deepcopy(fields))
        return True

    async def delete(self, collection, key):
        self._check("delete", collection, key)
        self._docs(collection).pop(key, None)

    async def query(self, collection, order_by, descending=False):
        self._check("query", collection)
        docs = [StoredDocument(k, copy.deepcopy(v)) for k, v in self._docs(collection).items()]
        # missing fields sort first ascending, as MongoDB does
        return sorted(
            docs,
            key=lambda doc: (doc.data.get(order_by) is not None, doc.data.get(order_by) or 0),
            reverse=descending,
        )
