# -*- coding: utf-8 -*-
"""Progress log repository (weight / sleep / mood check-ins)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ..kv import KeyValueStore


def _parse_iso(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ProgressRepository:
    """Entries are kept sorted by date, oldest first."""

    def __init__(self, store: KeyValueStore, client_id: str) -> None:
        self.store = store
        self.key = f"{client_id}:carely_progress"

    def list(self) -> List[Dict[str, Any]]:
        return self.store.get(self.key, [])

    def add(self, weight: float, sleep: float, mood: int, date: Optional[str] = None) -> Dict[str, Any]:
        if date:
            try:
                stamp = _parse_iso(date)
            except ValueError as exc:
                raise HTTPException(status_code=400, detail="date must be ISO-8601") from exc
        else:
            stamp = datetime.now(timezone.utc)
        entry = {"weight": weight, "sleep": sleep, "mood": mood, "date": stamp.isoformat()}

        def _insert(progress: Any) -> List[Dict[str, Any]]:
            items = list(progress or [])
            items.append(entry)
            items.sort(key=lambda e: _parse_iso(e["date"]))
            return items

        self.store.update(self.key, _insert, [])
        return entry

    def clear(self) -> None:
        self.store.delete(self.key)

    def summary(self) -> Optional[Dict[str, Any]]:
        items = self.list()
        if not items:
            return None
        latest = items[-1]
        previous = items[-2] if len(items) > 1 else None

        def stat(field: str) -> Dict[str, float]:
            current = float(latest[field])
            change = current - float(previous[field]) if previous else 0.0
            return {"current": current, "change": round(change, 2)}

        return {
            "weight": stat("weight"),
            "sleep": stat("sleep"),
            "mood": int(latest["mood"]),
            "count": len(items),
        }
