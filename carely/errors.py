# -*- coding: utf-8 -*-
"""Failure taxonomy for AI-backed generation requests.

Every error here is reported to clients as HTTP 500 with a generic
``details`` message. The diagnostic payload (provider error, raw model
text) stays on the exception and is only ever written to the server log.
"""

from __future__ import annotations

from typing import List, Optional


class AIServiceError(Exception):
    """Base class for failures while producing an AI-generated result."""

    user_message = "The AI service failed to process the request. Please try again."


class ModelUnavailable(AIServiceError):
    """No candidate model could be initialized."""

    user_message = "The AI service is currently unavailable. Please try again later."

    def __init__(self, message: str, tried: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.tried: List[str] = list(tried or [])


class ModelCallFailed(AIServiceError):
    """The provider rejected the generation call or could not be reached."""

    user_message = "The AI service could not generate a response. Please try again."

    def __init__(self, message: str, model: Optional[str] = None) -> None:
        super().__init__(message)
        self.model = model


class InvalidAiResponse(AIServiceError):
    """The model answered, but no well-formed result could be decoded."""

    user_message = "AI produced an invalid response, please try again."

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text
