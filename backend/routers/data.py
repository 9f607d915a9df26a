# backend/routers/data.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from pymongo.collection import Collection

from models.record_models import Record
from services.record_store import RecordStoreError, fetch_all_records, get_collection

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/data", tags=["Data"])


def get_records_collection(request: Request) -> Collection:
    """FastAPI dependency: the collection opened during app startup."""
    try:
        return get_collection(request.app.state)
    except RecordStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))


# Record is only used for the docs; rows go out exactly as stored
@router.get("", responses={200: {"model": List[Record]}})
def all_records(collection: Collection = Depends(get_records_collection)):
    """
    Returns every record in the collection, verbatim.
    No query parameters, no paging; the client filters and aggregates.
    """
    try:
        return fetch_all_records(collection)
    except RecordStoreError as e:
        logger.error("Record store query failed: %s", e)
        raise HTTPException(status_code=400, detail=f"Error: {e}")
