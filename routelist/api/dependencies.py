"""Route dependencies: hand the app-owned store and settings to handlers."""

from fastapi import Request

from routelist.config import Settings
from routelist.core.table_store import TableStore


def get_store(request: Request) -> TableStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
