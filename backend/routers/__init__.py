# backend/routers/__init__.py

from .data import router as data_router
