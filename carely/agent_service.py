# -*- coding: utf-8 -*-
"""Text-generation model access (OpenAI-compatible chat completions).

A request walks the configured candidate list in order and uses the first
model that initializes. Nothing is cached between requests: every call
probes the candidates again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import httpx

from .config import settings
from .errors import ModelCallFailed, ModelUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelSettings:
    base_url: str
    api_key: Optional[str]
    candidates: Tuple[str, ...]
    timeout: float
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class Completion:
    text: str
    model: str


def resolve_model_settings() -> ModelSettings:
    return ModelSettings(
        base_url=settings.model_base_url.rstrip("/"),
        api_key=settings.model_api_key,
        candidates=tuple(settings.model_candidates),
        timeout=settings.model_timeout,
        temperature=settings.model_temperature,
        max_tokens=settings.model_max_tokens,
    )


def _extract_text(data: object) -> str:
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list):
        return ""
    out: List[str] = []
    for choice in choices:
        if not isinstance(choice, dict):
            continue
        msg = choice.get("message")
        if isinstance(msg, dict):
            content = msg.get("content")
            if isinstance(content, str) and content:
                out.append(content)
                continue
        text = choice.get("text")
        if isinstance(text, str) and text:
            out.append(text)
    return "".join(out)


@dataclass
class ChatModel:
    """A model that passed initialization, bound to an open HTTP client."""

    model_id: str
    client: httpx.Client
    cfg: ModelSettings

    def generate(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model_id,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.cfg.temperature,
            "max_tokens": self.cfg.max_tokens,
        }
        try:
            resp = self.client.post("/chat/completions", json=payload)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise ModelCallFailed(
                f"Model API error ({exc.response.status_code}): {exc}", model=self.model_id
            ) from exc
        except httpx.HTTPError as exc:
            raise ModelCallFailed(f"Model API unreachable: {exc}", model=self.model_id) from exc
        except ValueError as exc:
            raise ModelCallFailed(f"Model API returned non-JSON body: {exc}", model=self.model_id) from exc
        return _extract_text(data)


@dataclass
class ModelProvider:
    """Selects a candidate model and runs one completion per call."""

    cfg: ModelSettings = field(default_factory=resolve_model_settings)
    transport: Optional[httpx.BaseTransport] = None

    def _client(self) -> httpx.Client:
        headers = {"Content-Type": "application/json"}
        if self.cfg.api_key:
            headers["Authorization"] = f"Bearer {self.cfg.api_key}"
        return httpx.Client(
            base_url=self.cfg.base_url,
            headers=headers,
            timeout=self.cfg.timeout,
            follow_redirects=True,
            transport=self.transport,
        )

    def init_model(self, client: httpx.Client, model_id: str) -> ChatModel:
        if not self.cfg.api_key:
            raise RuntimeError("CARELY_MODEL_API_KEY not set")
        resp = client.get(f"/models/{model_id}")
        resp.raise_for_status()
        return ChatModel(model_id=model_id, client=client, cfg=self.cfg)

    def select_model(self, client: httpx.Client) -> ChatModel:
        tried: List[str] = []
        for model_id in self.cfg.candidates:
            tried.append(model_id)
            try:
                model = self.init_model(client, model_id)
            except (httpx.HTTPError, RuntimeError) as exc:
                logger.warning("model %s failed to initialize: %s", model_id, exc)
                continue
            logger.info("using model %s", model_id)
            return model
        raise ModelUnavailable(
            f"No candidate model could be initialized (tried: {', '.join(tried) or 'none'})",
            tried=tried,
        )

    def complete(self, prompt: str) -> Completion:
        with self._client() as client:
            model = self.select_model(client)
            text = model.generate(prompt)
        return Completion(text=text, model=model.model_id)
