# backend/services/data_client.py

import logging
from typing import Any, Dict, List, Optional

import httpx

from utils import config

logger = logging.getLogger(__name__)

DATA_PATH = "/api/data"


class DataFetchError(Exception):
    pass


async def fetch_all_records(
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> List[Dict[str, Any]]:
    """
    One GET for the whole dataset. No retries.
    Raises DataFetchError on network errors, non-2xx responses,
    or a body that is not a JSON array.
    """
    base = (base_url or config.DATA_API_URL).rstrip("/")
    url = f"{base}{DATA_PATH}"

    try:
        async with httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.FETCH_TIMEOUT,
            transport=transport,
        ) as client:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        raise DataFetchError(f"Request to {url} failed: {e}") from e

    if not resp.is_success:
        raise DataFetchError(f"Failed to fetch {url} (status {resp.status_code})")

    try:
        payload = resp.json()
    except ValueError as e:
        raise DataFetchError(f"Response from {url} is not valid JSON") from e

    if not isinstance(payload, list):
        raise DataFetchError(f"Expected a JSON array from {url}, got {type(payload).__name__}")

    rows = [row for row in payload if isinstance(row, dict)]
    skipped = len(payload) - len(rows)
    if skipped:
        logger.warning("Skipped %d non-object rows from %s", skipped, url)

    logger.info("Fetched %d records from %s", len(rows), url, extra={"records": len(rows)})
    return rows
