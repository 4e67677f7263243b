"""
Repositories over MongoDB collections.

``Collection`` backs the list/get/create/update/delete content types and
``Singleton`` backs Hero, About and Contact, which are stored under a fixed
``_id`` so there can never be more than one document.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

import pydantic
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from database import create_document, get_documents, serialize_doc, to_object_id, utcnow
from exceptions import ResourceNotFoundError, ValidationError
from logging_config import get_logger

logger = get_logger("resources")

SEED_MARKERS = "_seeds"
DEFAULT_SORT = [("order", 1), ("createdAt", -1)]

# Keys owned by the store, never taken from a payload
_META_KEYS = {"_id", "id", "createdAt", "updatedAt"}


def validate_payload(schema: Type[pydantic.BaseModel], data: Dict[str, Any]) -> pydantic.BaseModel:
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc)


class Collection:
    """A plain content collection ordered for display."""

    def __init__(
        self,
        name: str,
        collection_name: str,
        schema: Type[pydantic.BaseModel],
        sort: Optional[List[Tuple[str, int]]] = None,
        seeds: Optional[List[Dict[str, Any]]] = None,
        create_defaults: Optional[Dict[str, Any]] = None,
        on_read: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
    ):
        self.name = name
        self.collection_name = collection_name
        self.schema = schema
        self.sort = sort or DEFAULT_SORT
        self.seeds = seeds or []
        self.create_defaults = create_defaults or {}
        self.on_read = on_read

    def _out(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        doc = serialize_doc(doc)
        if self.on_read:
            doc = self.on_read(doc)
        return doc

    def _find(self, database: Database, id: str) -> Dict[str, Any]:
        oid = to_object_id(id)
        doc = database[self.collection_name].find_one({"_id": oid}) if oid else None
        if doc is None:
            raise ResourceNotFoundError(self.name, id)
        return doc

    def ensure_seeded(self, database: Database) -> bool:
        """Insert the sample documents once, if the collection is empty.

        A marker per collection makes this run at most once even if every
        document is later deleted.
        """
        if not self.seeds:
            return False
        markers = database[SEED_MARKERS]
        if markers.find_one({"_id": self.collection_name}) is not None:
            return False
        try:
            markers.insert_one({"_id": self.collection_name, "seededAt": utcnow()})
        except DuplicateKeyError:
            return False

        collection = database[self.collection_name]
        if collection.count_documents({}) > 0:
            return False

        now = utcnow()
        docs = [
            {**copy.deepcopy(self.create_defaults), **seed, "createdAt": now, "updatedAt": now}
            for seed in self.seeds
        ]
        try:
            collection.insert_many(docs)
        except PyMongoError:
            # release the marker so the next read retries the seed
            markers.delete_one({"_id": self.collection_name})
            raise
        logger.info(f"Seeded {len(docs)} default {self.collection_name} documents")
        return True

    def list(self, database: Database, filter_dict: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        self.ensure_seeded(database)
        docs = get_documents(database, self.collection_name, filter_dict, sort=self.sort)
        return [self._out(d) for d in docs]

    def get(self, database: Database, id: str) -> Dict[str, Any]:
        return self._out(self._find(database, id))

    def create(self, database: Database, payload: pydantic.BaseModel) -> Dict[str, Any]:
        data = {**copy.deepcopy(self.create_defaults), **payload.model_dump(by_alias=True)}
        inserted_id = create_document(database, self.collection_name, data)
        logger.info(f"Created {self.name} {inserted_id}")
        return self.get(database, inserted_id)

    def update(self, database: Database, id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``payload`` over the stored fields, validate, and save."""
        existing = self._find(database, id)
        merged = {k: v for k, v in existing.items() if k not in _META_KEYS}
        merged.update({k: v for k, v in payload.items() if k not in _META_KEYS})
        validated = validate_payload(self.schema, merged)

        changes = validated.model_dump(by_alias=True)
        changes["updatedAt"] = utcnow()
        doc = database[self.collection_name].find_one_and_update(
            {"_id": existing["_id"]},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise ResourceNotFoundError(self.name, id)
        return self._out(doc)

    def delete(self, database: Database, id: str) -> Dict[str, Any]:
        oid = to_object_id(id)
        doc = database[self.collection_name].find_one_and_delete({"_id": oid}) if oid else None
        if doc is None:
            raise ResourceNotFoundError(self.name, id)
        logger.info(f"Deleted {self.name} {id}")
        return self._out(doc)

    def count(self, database: Database) -> int:
        return database[self.collection_name].count_documents({})


class Singleton:
    """A content type with exactly one document, addressed without an id."""

    def __init__(
        self,
        name: str,
        collection_name: str,
        schema: Type[pydantic.BaseModel],
        defaults: Dict[str, Any],
    ):
        self.name = name
        self.collection_name = collection_name
        self.schema = schema
        self.defaults = defaults
        self.doc_id = collection_name

    def get(self, database: Database) -> Dict[str, Any]:
        """Return the document, creating it from the defaults on first access."""
        now = utcnow()
        doc = database[self.collection_name].find_one_and_update(
            {"_id": self.doc_id},
            {"$setOnInsert": {**self.defaults, "createdAt": now, "updatedAt": now}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(doc)

    def put(self, database: Database, payload: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        """Merge ``payload`` into the document, creating it if absent.

        Returns the resulting document and whether it was created.
        """
        collection = database[self.collection_name]
        current = collection.find_one({"_id": self.doc_id})
        base = current if current is not None else self.defaults
        merged = {k: v for k, v in base.items() if k not in _META_KEYS}
        merged.update({k: v for k, v in payload.items() if k not in _META_KEYS})
        validated = validate_payload(self.schema, merged)

        now = utcnow()
        doc = collection.find_one_and_update(
            {"_id": self.doc_id},
            {
                "$set": {**validated.model_dump(by_alias=True), "updatedAt": now},
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.info(f"{'Created' if current is None else 'Updated'} {self.name}")
        return serialize_doc(doc), current is None
