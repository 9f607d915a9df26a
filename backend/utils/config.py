# backend/utils/config.py

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


# Document store
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/dashboard")
MONGO_DB = os.getenv("MONGO_DB", "dashboard")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "datas")

# HTTP server
PORT = int(os.getenv("PORT", "5000"))
CORS_ALLOWED_ORIGINS = _split_origins(os.getenv("CORS_ALLOWED_ORIGINS", "*"))

# Client side
DATA_API_URL = os.getenv("DATA_API_URL", "http://localhost:5000").rstrip("/")
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))
CHART_DELAY = float(os.getenv("CHART_DELAY", "0"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()
