# -*- coding: utf-8 -*-
"""Plan models for API payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float, str]


def as_list(value: Any) -> List[Any]:
    """Multi-select fields arrive as a list, a single value or nothing."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class HealthProfile(BaseModel):
    """Free-form profile as submitted by the client. Nothing is validated."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[Any] = None
    age: Optional[Number] = None
    gender: Optional[Any] = None
    weight: Optional[Number] = None
    height: Optional[Number] = None
    activity_level: Optional[Any] = Field(default=None, alias="activityLevel")
    conditions: Optional[Any] = Field(default_factory=list)
    diet_preference: Optional[Any] = Field(default=None, alias="dietPreference")
    sleep_hours: Optional[Number] = Field(default=None, alias="sleepHours")
    goals: Optional[Any] = Field(default_factory=list)
    other_condition: Optional[Any] = Field(default=None, alias="otherCondition")
    other_goal: Optional[Any] = Field(default=None, alias="otherGoal")
    stress_level: Optional[Any] = Field(default=None, alias="stressLevel")
    sleep_quality: Optional[Any] = Field(default=None, alias="sleepQuality")
    alcohol_consumption: Optional[Any] = Field(default=None, alias="alcoholConsumption")
    smoking_habits: Optional[Any] = Field(default=None, alias="smokingHabits")
    work_life_balance: Optional[Any] = Field(default=None, alias="workLifeBalance")


class CategoryAdvice(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    advice: str
    reasoning: str
    confidence: float = Field(..., ge=0, le=100)


class Macros(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    protein: float = Field(..., ge=0, le=100)
    carbs: float = Field(..., ge=0, le=100)
    fat: float = Field(..., ge=0, le=100)


class DietAdvice(CategoryAdvice):
    macros: Macros


class WellnessPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    summary: str
    key_factors: List[str] = Field(..., alias="keyFactors")
    diet: DietAdvice
    exercise: CategoryAdvice
    sleep: CategoryAdvice
    stress: CategoryAdvice


class PlanHistoryEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    title: str
    profile: Dict[str, Any]
    recommendations: WellnessPlan


class PlanHistoryResponse(BaseModel):
    items: List[PlanHistoryEntry]
