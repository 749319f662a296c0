# -*- coding: utf-8 -*-
"""Saved user profile (one per client)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..kv import KeyValueStore


class ProfileRepository:
    def __init__(self, store: KeyValueStore, client_id: str) -> None:
        self.store = store
        self.key = f"{client_id}:carely_user"

    def get(self) -> Optional[Dict[str, Any]]:
        return self.store.get(self.key)

    def save(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(profile)
        previous = self.get() or {}
        record["createdAt"] = previous.get("createdAt") or datetime.now(timezone.utc).isoformat()
        self.store.set(self.key, record)
        return record

    def clear(self) -> None:
        self.store.delete(self.key)
