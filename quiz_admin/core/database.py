import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from quiz_admin.core.config import Settings
from quiz_admin.core.exceptions import UnexpectedServiceError

logger = logging.getLogger('infrastructure')

USERS = "users"
QUIZZES = "quizzes"
RESULTS = "results"


class DocumentStoreError(UnexpectedServiceError):
    pass


@dataclass
class StoredDocument:
    """A document as the store hands it out: its key and its fields, kept apart."""
    key: str
    data: Dict[str, Any] = field(default_factory=dict)


def new_key() -> str:
    return str(ObjectId())


class DocumentStore(ABC):
    @abstractmethod
    async def get(self, collection: str, key: str) -> Optional[StoredDocument]:
        raise NotImplementedError

    @abstractmethod
    async def get_all(self, collection: str) -> List[StoredDocument]:
        raise NotImplementedError

    @abstractmethod
    async def set(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        """Create or fully overwrite the document stored under ``key``."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        """Store ``data`` under a freshly generated key and return that key."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, collection: str, key: str, fields: Dict[str, Any]) -> bool:
        """Merge ``fields`` into an existing document. False if there is none."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, collection: str, key: str) -> None:
        """Remove the document; deleting an absent key is a no-op."""
        raise NotImplementedError

    @abstractmethod
    async def query(self, collection: str, order_by: str, descending: bool = False) -> List[StoredDocument]:
        raise NotImplementedError


class MongoDocumentStore(DocumentStore):
    """Document store on MongoDB. The document key lives in ``_id``."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    @contextmanager
    def _errors(self, operation: str, collection: str):
        try:
            yield
        except PyMongoError as e:
            logger.error(f"{operation} on '{collection}' failed: {e}")
            raise DocumentStoreError(f"Document store {operation} failed: {e}") from e

    @staticmethod
    def _to_stored(raw: dict) -> StoredDocument:
        key = raw.pop("_id")
        return StoredDocument(key=str(key), data=raw)

    @staticmethod
    def _strip_key(data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if k != "_id"}

    @staticmethod
    def _key_filter(key: str) -> Dict[str, Any]:
        # documents inserted without a chosen key carry an ObjectId, handed out as its hex string
        if ObjectId.is_valid(key):
            return {"_id": {"$in": [key, ObjectId(key)]}}
        return {"_id": key}

    async def _stored_id(self, collection: str, key: str) -> Any:
        if not ObjectId.is_valid(key):
            return key
        raw = await self.db[collection].find_one(self._key_filter(key), {"_id": 1})
        return raw["_id"] if raw else key

    async def get(self, collection, key):
        with self._errors("get", collection):
            raw = await self.db[collection].find_one(self._key_filter(key))
        return self._to_stored(raw) if raw else None

    async def get_all(self, collection):
        with self._errors("get_all", collection):
            docs = await self.db[collection].find().to_list(length=None)
        return [self._to_stored(raw) for raw in docs]

    async def set(self, collection, key, data):
        with self._errors("set", collection):
            stored_id = await self._stored_id(collection, key)
            await self.db[collection].replace_one(
                {"_id": stored_id}, self._strip_key(data), upsert=True
            )

    async def add(self, collection, data):
        key = new_key()
        with self._errors("add", collection):
            await self.db[collection].insert_one({"_id": key, **self._strip_key(data)})
        return key

    async def update(self, collection, key, fields):
        with self._errors("update", collection):
            result = await self.db[collection].update_one(
                self._key_filter(key), {"$set": self._strip_key(fields)}
            )
        return result.matched_count > 0

    async def delete(self, collection, key):
        with self._errors("delete", collection):
            await self.db[collection].delete_many(self._key_filter(key))

    async def query(self, collection, order_by, descending=False):
        direction = DESCENDING if descending else ASCENDING
        with self._errors("query", collection):
            docs = await self.db[collection].find().sort(order_by, direction).to_list(length=None)
        return [self._to_stored(raw) for raw in docs]


def init_db(settings: Settings):
    client = AsyncIOMotorClient(settings.MONGO_URL)
    store = MongoDocumentStore(client[settings.MONGO_DB])
    logger.info(f"Document store bound to database '{settings.MONGO_DB}'")
    return client, store
