# -*- coding: utf-8 -*-
"""Plan endpoints (generation + history)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..agent_service import ModelProvider
from ..deps import get_client_id, get_model_provider, get_store
from ..kv import KeyValueStore
from ..profile.storage import ProfileRepository
from .generator import clean_plan_text, generate_wellness_plan
from .models import HealthProfile, PlanHistoryEntry, PlanHistoryResponse, WellnessPlan
from .storage import PlanHistoryRepository

router = APIRouter(tags=["Plans"])


def get_history_repo(
    store: KeyValueStore = Depends(get_store),
    client_id: str = Depends(get_client_id),
) -> PlanHistoryRepository:
    return PlanHistoryRepository(store, client_id)


@router.post("/api/generate-plan", response_model=WellnessPlan, summary="Generate a wellness plan")
def generate_plan_api(
    request: HealthProfile,
    provider: ModelProvider = Depends(get_model_provider),
    store: KeyValueStore = Depends(get_store),
    client_id: str = Depends(get_client_id),
):
    plan = generate_wellness_plan(request, provider)

    profile = request.model_dump(by_alias=True, exclude_none=True)
    ProfileRepository(store, client_id).save(profile)
    PlanHistoryRepository(store, client_id).append(profile, clean_plan_text(plan))
    return plan


@router.get("/api/history", response_model=PlanHistoryResponse, summary="List saved plans (newest first)")
def list_history(repo: PlanHistoryRepository = Depends(get_history_repo)):
    return PlanHistoryResponse(items=[PlanHistoryEntry.model_validate(e) for e in repo.list()])


@router.get("/api/history/{entry_id}", response_model=PlanHistoryEntry, summary="Get one saved plan")
def get_history_entry(entry_id: str, repo: PlanHistoryRepository = Depends(get_history_repo)):
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Plan not found")
    return PlanHistoryEntry.model_validate(entry)


@router.delete("/api/history", summary="Clear saved plans")
def clear_history(repo: PlanHistoryRepository = Depends(get_history_repo)):
    repo.clear()
    return {"status": "ok"}
