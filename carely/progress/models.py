# -*- coding: utf-8 -*-
"""Progress log: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ProgressEntryCreate(BaseModel):
    weight: float = Field(..., gt=0, description="kg")
    sleep: float = Field(..., ge=0, le=24, description="hours")
    mood: int = Field(3, ge=1, le=5, description="1 (low) .. 5 (great)")
    date: Optional[str] = Field(default=None, description="ISO-8601; defaults to now")


class ProgressEntry(BaseModel):
    weight: float
    sleep: float
    mood: int
    date: str


class ProgressLogResponse(BaseModel):
    items: List[ProgressEntry]


class ProgressStat(BaseModel):
    current: float
    change: float = Field(0.0, description="difference against the previous entry")


class ProgressSummary(BaseModel):
    weight: ProgressStat
    sleep: ProgressStat
    mood: int
    count: int = Field(0, ge=0)
