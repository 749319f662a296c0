# -*- coding: utf-8 -*-
"""Meditation: Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

MeditationType = Literal["breathing", "body-scan", "visualization", "mindfulness", "sleep", "guided"]

Duration = Union[int, float, str]


class MeditationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    # The web form sends both the raw selections and pre-joined labels.
    stress_source: str = Field("", alias="stressSource")
    stress_sources: List[str] = Field(default_factory=list, alias="stressSources")
    custom_stress_source: str = Field("", alias="customStressSource")
    current_mood: str = Field("", alias="currentMood")
    current_moods: List[str] = Field(default_factory=list, alias="currentMoods")
    sleep_quality: str = Field("", alias="sleepQuality")
    meditation_type: MeditationType = Field("guided", alias="meditationType")
    duration: Duration = 5
    background_sound: str = Field("none", alias="backgroundSound")
    additional_context: str = Field("", alias="additionalContext")

    def stress_text(self) -> str:
        if self.stress_source.strip():
            return self.stress_source
        labels = [
            self.custom_stress_source if s == "other" and self.custom_stress_source else s
            for s in self.stress_sources
        ]
        return ", ".join(labels)

    def mood_text(self) -> str:
        if self.current_mood.strip():
            return self.current_mood
        return ", ".join(self.current_moods)


class BreathingPattern(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    inhale: float = Field(..., ge=0)
    hold: float = Field(..., ge=0)
    exhale: float = Field(..., ge=0)


class MeditationScript(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    script: str
    breathing_pattern: Optional[BreathingPattern] = Field(default=None, alias="breathingPattern")
    affirmations: List[str] = Field(default_factory=list)


class MeditationResponse(MeditationScript):
    duration: Duration


class MeditationEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    title: str
    stress_source: str = Field("", alias="stressSource")
    mood: str = ""
    type: MeditationType
    duration: Duration
    script: str
    affirmations: List[str] = Field(default_factory=list)


class MeditationHistoryResponse(BaseModel):
    items: List[MeditationEntry]
