# -*- coding: utf-8 -*-
"""Meditation endpoints (generation, history, export)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from ..agent_service import ModelProvider
from ..deps import get_client_id, get_model_provider, get_store
from ..kv import KeyValueStore
from .generator import generate_meditation
from .models import MeditationEntry, MeditationHistoryResponse, MeditationRequest, MeditationResponse
from .storage import MeditationRepository, export_filename, render_text

router = APIRouter(tags=["Meditation"])


def get_meditation_repo(
    store: KeyValueStore = Depends(get_store),
    client_id: str = Depends(get_client_id),
) -> MeditationRepository:
    return MeditationRepository(store, client_id)


@router.post(
    "/api/generate-meditation",
    response_model=MeditationResponse,
    response_model_exclude_none=True,
    summary="Generate a guided meditation script",
)
def generate_meditation_api(
    request: MeditationRequest,
    provider: ModelProvider = Depends(get_model_provider),
    repo: MeditationRepository = Depends(get_meditation_repo),
):
    script = generate_meditation(request, provider)
    repo.append(request, script)
    payload = script.model_dump(by_alias=True)
    payload["duration"] = request.duration
    return MeditationResponse.model_validate(payload)


@router.get("/api/meditations", response_model=MeditationHistoryResponse, summary="List past meditations")
def list_meditations(repo: MeditationRepository = Depends(get_meditation_repo)):
    return MeditationHistoryResponse(items=[MeditationEntry.model_validate(e) for e in repo.list()])


@router.get("/api/meditations/{entry_id}", response_model=MeditationEntry, summary="Get one meditation")
def get_meditation(entry_id: str, repo: MeditationRepository = Depends(get_meditation_repo)):
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Meditation not found")
    return MeditationEntry.model_validate(entry)


@router.get("/api/meditations/{entry_id}/export", summary="Download a meditation as plain text")
def export_meditation(entry_id: str, repo: MeditationRepository = Depends(get_meditation_repo)):
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Meditation not found")
    filename = export_filename(entry.get("title") or "meditation")
    return PlainTextResponse(
        render_text(entry),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/api/meditations", summary="Clear meditation history")
def clear_meditations(repo: MeditationRepository = Depends(get_meditation_repo)):
    repo.clear()
    return {"status": "ok"}
