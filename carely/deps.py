# -*- coding: utf-8 -*-
"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Header

from .agent_service import ModelProvider
from .config import settings
from .kv import KeyValueStore, create_store

CLIENT_HEADER = "X-Carely-Client"
DEFAULT_CLIENT_ID = "default"

_store: KeyValueStore | None = None


def get_store() -> KeyValueStore:
    global _store
    if _store is None:
        _store = create_store(settings.storage_backend, settings.db_path)
    return _store


def get_client_id(x_carely_client: str | None = Header(default=None)) -> str:
    client_id = (x_carely_client or "").strip()
    return client_id or DEFAULT_CLIENT_ID


def get_model_provider() -> ModelProvider:
    return ModelProvider()
