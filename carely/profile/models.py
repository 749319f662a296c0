# -*- coding: utf-8 -*-
"""Profile: Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from ..plans.models import HealthProfile


class StoredProfile(HealthProfile):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    created_at: Optional[str] = Field(default=None, alias="createdAt")
