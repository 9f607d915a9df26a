# backend/services/record_store.py

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from utils import config

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    pass


def open_record_store(
    uri: Optional[str] = None,
    collection_name: Optional[str] = None,
) -> Tuple[MongoClient, Collection]:
    """
    Build the Mongo client and resolve the records collection.
    MongoClient connects lazily, so an unreachable server only shows up
    on the first query.
    """
    client: MongoClient = MongoClient(uri or config.MONGO_URI)
    db = client.get_default_database(default=config.MONGO_DB)
    collection = db[collection_name or config.MONGO_COLLECTION]
    logger.info("Record store ready: %s.%s", db.name, collection.name)
    return client, collection


def _to_json_row(doc: Dict[str, Any]) -> Dict[str, Any]:
    row = dict(doc)
    for key, value in row.items():
        # NaN/inf are not valid JSON; send them as null
        if isinstance(value, float) and not math.isfinite(value):
            row[key] = None
    if "_id" in row:
        row["_id"] = str(row["_id"])
    return row


def fetch_all_records(collection: Collection) -> List[Dict[str, Any]]:
    """
    Every document in the collection, unchanged apart from a string _id
    and null in place of non-finite floats.
    No filtering, sorting or paging.
    """
    try:
        docs = list(collection.find())
    except PyMongoError as e:
        raise RecordStoreError(str(e)) from e

    return [_to_json_row(doc) for doc in docs]


def get_collection(state: Any) -> Collection:
    """The collection opened during app startup and kept on app.state."""
    collection = getattr(state, "records_collection", None)
    if collection is None:
        raise RecordStoreError("Record store is not connected")
    return collection
