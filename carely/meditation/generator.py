# -*- coding: utf-8 -*-
"""Guided meditation script generation."""

from __future__ import annotations

import json
import logging

from ..agent_service import ModelProvider
from ..decoder import try_decode
from .models import MeditationRequest, MeditationScript

logger = logging.getLogger(__name__)


_MEDITATION_SCHEMA = {
    "title": "string",
    "script": "string (paragraphs separated by a blank line)",
    "breathingPattern": {"inhale": "seconds", "hold": "seconds", "exhale": "seconds"},
    "affirmations": ["string"],
}

_TYPE_LABELS = {
    "guided": "guided relaxation",
    "breathing": "breathing exercise",
    "body-scan": "body scan",
    "visualization": "visualization",
    "mindfulness": "mindfulness",
    "sleep": "sleep meditation",
}


def build_meditation_prompt(request: MeditationRequest) -> str:
    context = request.additional_context.strip() or "None"
    return (
        "You are a calm, compassionate meditation guide. Write a personalized "
        f"{_TYPE_LABELS[request.meditation_type]} script that takes about "
        f"{request.duration} minutes to read aloud slowly.\n"
        "\n"
        "About the listener:\n"
        f"- Sources of stress: {request.stress_text()}\n"
        f"- Current mood: {request.mood_text()}\n"
        f"- Sleep quality: {request.sleep_quality}\n"
        f"- Additional context: {context}\n"
        "\n"
        "Use second person, short sentences and natural pauses. Separate paragraphs with a "
        "blank line. Include a breathing pattern in whole seconds and 3 to 5 short "
        "affirmations that speak to the listener's situation.\n"
        "\n"
        "Return ONLY a JSON object with exactly this shape:\n"
        f"{json.dumps(_MEDITATION_SCHEMA, indent=2)}\n"
    )


def generate_meditation(request: MeditationRequest, provider: ModelProvider) -> MeditationScript:
    completion = provider.complete(build_meditation_prompt(request))
    result = try_decode(completion.text, MeditationScript)
    if not result.ok:
        logger.warning(
            "meditation decode failed (model=%s): %s; raw output: %r",
            completion.model,
            result.error,
            completion.text,
        )
    return result.unwrap()
