# -*- coding: utf-8 -*-
"""Meditation history repository and text export."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..kv import KeyValueStore
from .models import MeditationRequest, MeditationScript


class MeditationRepository:
    """Generated meditations for one client, newest first."""

    def __init__(self, store: KeyValueStore, client_id: str) -> None:
        self.store = store
        self.key = f"{client_id}:carely_meditations"

    def list(self) -> List[Dict[str, Any]]:
        return self.store.get(self.key, [])

    def get(self, entry_id: str) -> Optional[Dict[str, Any]]:
        for entry in self.list():
            if entry.get("id") == entry_id:
                return entry
        return None

    def append(self, request: MeditationRequest, script: MeditationScript) -> Dict[str, Any]:
        entry = {
            "id": str(uuid4()),
            "date": datetime.now(timezone.utc).isoformat(),
            "title": script.title,
            "stressSource": request.stress_text(),
            "mood": request.mood_text(),
            "type": request.meditation_type,
            "duration": request.duration,
            "script": script.script,
            "affirmations": list(script.affirmations),
        }
        self.store.update(self.key, lambda history: [entry] + list(history or []), [])
        return entry

    def clear(self) -> None:
        self.store.delete(self.key)


def export_filename(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()
    return f"{slug}_meditation.txt"


def render_text(entry: Dict[str, Any]) -> str:
    title = entry.get("title") or ""
    text = f"{title}\n{'=' * len(title)}\n\nDuration: {entry.get('duration')} minutes\n\n{entry.get('script') or ''}"
    affirmations = entry.get("affirmations") or []
    if affirmations:
        lines = "\n".join(f"{i}. {a}" for i, a in enumerate(affirmations, start=1))
        text += f"\n\nAffirmations:\n{lines}"
    return text
