# -*- coding: utf-8 -*-
"""Decode structured results out of free-form model output.

Models wrap JSON in prose or markdown fences inconsistently, so extraction is
tolerant: the strategies below run in order and the first one that yields a
JSON object wins. Validation is strict: the object must satisfy the full
pydantic schema, otherwise the whole decode fails.

Known limitation: the brace-span strategy is greedy (first ``{`` to last
``}``). A response carrying two separate JSON objects is not split apart.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import InvalidAiResponse

T = TypeVar("T", bound=BaseModel)

# Lower-case tag and a bare "\n" only; other fence spellings fall to the brace span.
_FENCED_JSON_RE = re.compile(r"```json\n([\s\S]*?)```")


def _fenced_block(text: str) -> Optional[str]:
    match = _FENCED_JSON_RE.search(text)
    if not match:
        return None
    return match.group(1)


def _brace_span(text: str) -> Optional[str]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or start >= end:
        return None
    return text[start : end + 1]


def _whole_text(text: str) -> Optional[str]:
    return text.strip()


STRATEGIES: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("fenced", _fenced_block),
    ("brace-span", _brace_span),
    ("whole-text", _whole_text),
)


def _loads_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json_object(text: str) -> Optional[Tuple[Dict[str, Any], str]]:
    """Return ``(object, strategy_name)`` for the first strategy that parses."""
    for name, strategy in STRATEGIES:
        candidate = strategy(text)
        if candidate is None:
            continue
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed, name
    return None


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """Either a fully validated ``value`` or the ``error`` explaining why not."""

    value: Optional[T] = None
    error: Optional[InvalidAiResponse] = None
    strategy: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def try_decode(raw_text: Any, schema: Type[T]) -> DecodeResult[T]:
    text = raw_text if isinstance(raw_text, str) else ""

    found = extract_json_object(text)
    if found is None:
        return DecodeResult(
            error=InvalidAiResponse("No JSON object found in model output", raw_text=text)
        )

    parsed, strategy = found
    try:
        value = schema.model_validate(parsed)
    except ValidationError as exc:
        return DecodeResult(
            error=InvalidAiResponse(
                f"Model output does not match {schema.__name__}: {exc.error_count()} error(s)",
                raw_text=text,
            ),
            strategy=strategy,
        )
    return DecodeResult(value=value, strategy=strategy)


def decode(raw_text: Any, schema: Type[T]) -> T:
    """Decode ``raw_text`` into ``schema`` or raise :class:`InvalidAiResponse`."""
    return try_decode(raw_text, schema).unwrap()
