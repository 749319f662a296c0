# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

from carely.decoder import decode, extract_json_object, try_decode
from carely.errors import InvalidAiResponse
from carely.meditation.models import MeditationScript
from carely.plans.models import WellnessPlan


def sample_plan() -> dict:
    return {
        "summary": "ok",
        "keyFactors": ["Short sleep", "Sedentary job"],
        "diet": {
            "advice": "Add a portion of vegetables to lunch and dinner.",
            "reasoning": "Fiber supports steady energy.",
            "confidence": 88,
            "macros": {"protein": 30, "carbs": 45, "fat": 25},
        },
        "exercise": {"advice": "Walk 30 minutes daily.", "reasoning": "Low activity level.", "confidence": 92},
        "sleep": {"advice": "Keep a fixed bedtime.", "reasoning": "Reports 5h sleep.", "confidence": 80},
        "stress": {"advice": "Try box breathing.", "reasoning": "High stress level.", "confidence": 75.5},
    }


class TestDecoderStrategies(unittest.TestCase):
    def test_fenced_block_inside_prose(self) -> None:
        plan = sample_plan()
        text = "Sure! ```json\n" + json.dumps(plan, indent=2) + "\n```\nLet me know if you need more."

        result = try_decode(text, WellnessPlan)
        self.assertTrue(result.ok)
        self.assertEqual(result.strategy, "fenced")
        self.assertEqual(result.value.model_dump(by_alias=True), plan)

    def test_brace_span_without_fence(self) -> None:
        plan = sample_plan()
        text = "Here is your plan:\n" + json.dumps(plan) + "\nStay healthy!"

        result = try_decode(text, WellnessPlan)
        self.assertTrue(result.ok)
        self.assertEqual(result.strategy, "brace-span")
        self.assertEqual(result.value.summary, "ok")
        self.assertEqual(result.value.diet.macros.protein, 30)

    def test_plain_json_document(self) -> None:
        plan = sample_plan()
        decoded = decode("  " + json.dumps(plan) + "\n", WellnessPlan)
        self.assertEqual(decoded.model_dump(by_alias=True), plan)

    def test_unparseable_fence_falls_through_to_brace_span(self) -> None:
        text = '```json\nnot json at all\n```\nActually: {"a": 1}'
        found = extract_json_object(text)
        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found, ({"a": 1}, "brace-span"))

    def test_brace_span_is_greedy(self) -> None:
        # Two separate objects are not disambiguated.
        self.assertIsNone(extract_json_object('{"a": 1} and then {"b": 2}'))

    def test_non_object_json_is_not_accepted(self) -> None:
        self.assertIsNone(extract_json_object("```json\n[1, 2, 3]\n```"))
        self.assertIsNone(extract_json_object("42"))

    def test_meditation_without_fence(self) -> None:
        text = '{"title":"Calm","script":"Breathe in slowly.\\n\\nBreathe out."}'
        script = decode(text, MeditationScript)
        self.assertEqual(script.title, "Calm")
        self.assertEqual(script.script, "Breathe in slowly.\n\nBreathe out.")
        self.assertIsNone(script.breathing_pattern)
        self.assertEqual(script.affirmations, [])

    def test_other_fence_spellings_fall_through_to_brace_span(self) -> None:
        body = json.dumps(sample_plan())
        for raw in ("```json\r\n" + body + "\r\n```", "```JSON\n" + body + "\n```", "```\n" + body + "\n```"):
            result = try_decode(raw, WellnessPlan)
            self.assertTrue(result.ok, msg=repr(raw[:8]))
            self.assertEqual(result.strategy, "brace-span")


class TestDecoderFailures(unittest.TestCase):
    def test_refusal_text(self) -> None:
        raw = "I couldn't generate that."
        result = try_decode(raw, WellnessPlan)
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertIsInstance(result.error, InvalidAiResponse)
        self.assertEqual(result.error.raw_text, raw)

        with self.assertRaises(InvalidAiResponse) as ctx:
            decode(raw, WellnessPlan)
        self.assertEqual(ctx.exception.raw_text, raw)

    def test_missing_required_field(self) -> None:
        plan = sample_plan()
        del plan["stress"]
        result = try_decode(json.dumps(plan), WellnessPlan)
        self.assertFalse(result.ok)
        self.assertEqual(result.strategy, "brace-span")

    def test_missing_macros(self) -> None:
        plan = sample_plan()
        del plan["diet"]["macros"]
        with self.assertRaises(InvalidAiResponse):
            decode(json.dumps(plan), WellnessPlan)

    def test_confidence_out_of_range(self) -> None:
        plan = sample_plan()
        plan["sleep"]["confidence"] = 140
        with self.assertRaises(InvalidAiResponse):
            decode(json.dumps(plan), WellnessPlan)

    def test_non_string_and_empty_input(self) -> None:
        for raw in (None, "", "   ", "{", "}{", 123):
            result = try_decode(raw, MeditationScript)
            self.assertFalse(result.ok, msg=repr(raw))

    def test_decoded_plan_is_immutable(self) -> None:
        plan = decode(json.dumps(sample_plan()), WellnessPlan)
        with self.assertRaises(Exception):
            plan.summary = "changed"

    def test_non_finite_macro(self) -> None:
        for bad in ("NaN", "Infinity", "-Infinity"):
            raw = json.dumps(sample_plan()).replace('"protein": 30', f'"protein": {bad}')
            self.assertIn(bad, raw)
            result = try_decode(raw, WellnessPlan)
            self.assertFalse(result.ok, msg=bad)
            with self.assertRaises(InvalidAiResponse):
                result.unwrap()

    def test_macro_outside_percentage_range(self) -> None:
        for protein, carbs in ((-500, 45), (30, "1e308"), (101, 45)):
            plan = sample_plan()
            plan["diet"]["macros"]["protein"] = protein
            plan["diet"]["macros"]["carbs"] = carbs
            with self.assertRaises(InvalidAiResponse):
                decode(json.dumps(plan), WellnessPlan)

    def test_non_finite_breathing_pattern(self) -> None:
        raw = '{"title": "Calm", "script": "Breathe.", "breathingPattern": {"inhale": NaN, "hold": 7, "exhale": 8}}'
        with self.assertRaises(InvalidAiResponse):
            decode(raw, MeditationScript)

    def test_unwrap_returns_value_on_success(self) -> None:
        result = try_decode(json.dumps(sample_plan()), WellnessPlan)
        self.assertTrue(result.ok)
        self.assertIs(result.unwrap(), result.value)


if __name__ == "__main__":
    unittest.main()
