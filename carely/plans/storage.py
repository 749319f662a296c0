# -*- coding: utf-8 -*-
"""Plan history repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..kv import KeyValueStore
from .models import WellnessPlan, as_list

_DEFAULT_TITLE = "Your Personalized Wellness Plan"

_GOAL_TITLES = {
    "Weight Loss": "Your Path to a Lighter You",
    "Muscle Gain": "Blueprint for a Stronger Physique",
    "Better Sleep": "Journey to Restful Nights",
    "Stress Management": "Finding Your Inner Calm",
    "Increased Energy": "Unlocking Your Energy Potential",
    "Better Digestion": "A Guide to a Happy Gut",
    "Improve Flexibility": "Your Flexibility and Mobility Plan",
}


def plan_title(goals: Any) -> str:
    """Title keyed on the primary (first) goal."""
    goals = as_list(goals)
    if not goals or not isinstance(goals[0], str):
        return _DEFAULT_TITLE
    return _GOAL_TITLES.get(goals[0], _DEFAULT_TITLE)


class PlanHistoryRepository:
    """Saved plans for one client, newest first."""

    def __init__(self, store: KeyValueStore, client_id: str) -> None:
        self.store = store
        self.key = f"{client_id}:carely_history"

    def list(self) -> List[Dict[str, Any]]:
        return self.store.get(self.key, [])

    def get(self, entry_id: str) -> Optional[Dict[str, Any]]:
        for entry in self.list():
            if entry.get("id") == entry_id:
                return entry
        return None

    def append(self, profile: Dict[str, Any], plan: WellnessPlan) -> Dict[str, Any]:
        entry = {
            "id": str(uuid4()),
            "date": datetime.now(timezone.utc).isoformat(),
            "title": plan_title(profile.get("goals")),
            "profile": profile,
            "recommendations": plan.model_dump(by_alias=True),
        }
        self.store.update(self.key, lambda history: [entry] + list(history or []), [])
        return entry

    def clear(self) -> None:
        self.store.delete(self.key)
