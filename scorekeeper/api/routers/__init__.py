"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .records import router as records_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    users_router,
    auth_router,
    records_router,
)

__all__ = ["ALL_ROUTERS"]
