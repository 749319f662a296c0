# -*- coding: utf-8 -*-
"""LLM-driven wellness plan generation."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from ..agent_service import ModelProvider
from ..decoder import try_decode
from .models import CategoryAdvice, HealthProfile, WellnessPlan, as_list

logger = logging.getLogger(__name__)


_PLAN_SCHEMA = {
    "summary": "string",
    "keyFactors": ["string"],
    "diet": {
        "advice": "string",
        "reasoning": "string",
        "confidence": "number (0-100)",
        "macros": {"protein": "number (%)", "carbs": "number (%)", "fat": "number (%)"},
    },
    "exercise": {"advice": "string", "reasoning": "string", "confidence": "number (0-100)"},
    "sleep": {"advice": "string", "reasoning": "string", "confidence": "number (0-100)"},
    "stress": {"advice": "string", "reasoning": "string", "confidence": "number (0-100)"},
}


def _listing(values: Any) -> str:
    items = [str(v) for v in as_list(values) if v not in (None, "")]
    return ", ".join(items) if items else "None"


def build_plan_prompt(profile: HealthProfile) -> str:
    """Render the fixed plan template. Values are interpolated as given."""
    return (
        "You are a certified wellness coach. Create a personalized, practical wellness plan "
        "for the person described below. This is general wellness guidance, not a diagnosis.\n"
        "\n"
        "Profile:\n"
        f"- Age: {profile.age}\n"
        f"- Gender: {profile.gender}\n"
        f"- Weight (kg): {profile.weight}\n"
        f"- Height (cm): {profile.height}\n"
        f"- Activity level: {profile.activity_level}\n"
        f"- Health conditions: {_listing(profile.conditions)}\n"
        f"- Diet preference: {profile.diet_preference}\n"
        f"- Sleep hours per night: {profile.sleep_hours}\n"
        f"- Sleep quality: {profile.sleep_quality}\n"
        f"- Stress level: {profile.stress_level}\n"
        f"- Alcohol consumption: {profile.alcohol_consumption}\n"
        f"- Smoking habits: {profile.smoking_habits}\n"
        f"- Work-life balance: {profile.work_life_balance}\n"
        f"- Goals: {_listing(profile.goals)}\n"
        "\n"
        "For each of diet, exercise, sleep and stress give concrete advice, the reasoning "
        "tied to the profile, and your confidence from 0 to 100. Suggest a daily macro split "
        "for the diet as percentages that add up to 100. List the key factors from the "
        "profile that shaped the plan.\n"
        "\n"
        "Return ONLY a JSON object with exactly this shape:\n"
        f"{json.dumps(_PLAN_SCHEMA, indent=2)}\n"
    )


def generate_wellness_plan(profile: HealthProfile, provider: ModelProvider) -> WellnessPlan:
    completion = provider.complete(build_plan_prompt(profile))
    result = try_decode(completion.text, WellnessPlan)
    if not result.ok:
        logger.warning(
            "plan decode failed (model=%s): %s; raw output: %r",
            completion.model,
            result.error,
            completion.text,
        )
    else:
        logger.info("plan decoded via %s strategy (model=%s)", result.strategy, completion.model)
    return result.unwrap()


_HEADING_RE = re.compile(r"\*(.*?)\*\n?")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def format_ai_text(text: str) -> str:
    """Drop ``*Heading*`` markers and squeeze runs of blank lines."""
    if not text:
        return ""
    cleaned = _HEADING_RE.sub("", text)
    cleaned = _BLANK_RUN_RE.sub("\n\n", cleaned)
    return cleaned.strip()


def _clean_category(block: CategoryAdvice) -> CategoryAdvice:
    return block.model_copy(
        update={
            "advice": format_ai_text(block.advice),
            "reasoning": format_ai_text(block.reasoning),
        }
    )


def clean_plan_text(plan: WellnessPlan) -> WellnessPlan:
    """Copy of ``plan`` with display-cleaned advice and reasoning."""
    return plan.model_copy(
        update={
            "diet": _clean_category(plan.diet),
            "exercise": _clean_category(plan.exercise),
            "sleep": _clean_category(plan.sleep),
            "stress": _clean_category(plan.stress),
        }
    )
