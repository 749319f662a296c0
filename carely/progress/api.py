# -*- coding: utf-8 -*-
"""Progress log: API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..deps import get_client_id, get_store
from ..kv import KeyValueStore
from .models import ProgressEntry, ProgressEntryCreate, ProgressLogResponse, ProgressSummary
from .storage import ProgressRepository

router = APIRouter(prefix="/api/progress", tags=["Progress"])


def get_progress_repo(
    store: KeyValueStore = Depends(get_store),
    client_id: str = Depends(get_client_id),
) -> ProgressRepository:
    return ProgressRepository(store, client_id)


@router.get("", response_model=ProgressLogResponse, summary="Progress log (oldest first)")
def list_progress(repo: ProgressRepository = Depends(get_progress_repo)):
    return ProgressLogResponse(items=[ProgressEntry(**e) for e in repo.list()])


@router.post("", response_model=ProgressEntry, summary="Add a progress check-in")
def add_progress(request: ProgressEntryCreate, repo: ProgressRepository = Depends(get_progress_repo)):
    entry = repo.add(weight=request.weight, sleep=request.sleep, mood=request.mood, date=request.date)
    return ProgressEntry(**entry)


@router.get("/summary", response_model=Optional[ProgressSummary], summary="Latest stats with change")
def progress_summary(repo: ProgressRepository = Depends(get_progress_repo)):
    data = repo.summary()
    if data is None:
        return None
    return ProgressSummary.model_validate(data)


@router.delete("", summary="Clear the progress log")
def clear_progress(repo: ProgressRepository = Depends(get_progress_repo)):
    repo.clear()
    return {"status": "ok"}
