# -*- coding: utf-8 -*-
"""Profile: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_client_id, get_store
from ..kv import KeyValueStore
from ..plans.models import HealthProfile
from .models import StoredProfile
from .storage import ProfileRepository

router = APIRouter(prefix="/api/profile", tags=["Profile"])


def get_profile_repo(
    store: KeyValueStore = Depends(get_store),
    client_id: str = Depends(get_client_id),
) -> ProfileRepository:
    return ProfileRepository(store, client_id)


@router.get("", response_model=StoredProfile, response_model_exclude_none=True, summary="Get saved profile")
def get_profile(repo: ProfileRepository = Depends(get_profile_repo)):
    profile = repo.get()
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return StoredProfile.model_validate(profile)


@router.put("", response_model=StoredProfile, response_model_exclude_none=True, summary="Save profile")
def save_profile(request: HealthProfile, repo: ProfileRepository = Depends(get_profile_repo)):
    saved = repo.save(request.model_dump(by_alias=True, exclude_none=True))
    return StoredProfile.model_validate(saved)


@router.delete("", summary="Forget saved profile")
def delete_profile(repo: ProfileRepository = Depends(get_profile_repo)):
    repo.clear()
    return {"status": "ok"}
