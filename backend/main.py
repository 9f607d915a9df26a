# backend/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import data_router
from services.record_store import open_record_store
from utils import config
from utils.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("dashboard_api")


# ---------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    client, collection = open_record_store()
    app.state.records_collection = collection
    try:
        yield
    finally:
        client.close()
        logger.info("Record store connection closed")


# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

app = FastAPI(title="Data Visualization Dashboard API", version="0.1.0", lifespan=lifespan)

logger.info("Allowed CORS origins: %s", config.CORS_ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["*"],
)

# ---------------------------------------------------------
# ROUTERS
# ---------------------------------------------------------

app.include_router(data_router)


@app.get("/")
def root():
    return {"message": "Dashboard API running."}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT)
