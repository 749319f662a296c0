from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the Carely backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("CARELY_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("CARELY_DB_PATH") or (self.data_root / "carely.db")
        ).expanduser()
        # "sqlite" for deployments, "memory" for throwaway demos and tests.
        self.storage_backend: str = (
            os.environ.get("CARELY_STORAGE") or "sqlite"
        ).strip().lower()

        # ---- Text-generation model (OpenAI-compatible chat completions) ----
        self.model_base_url: str = os.environ.get(
            "CARELY_MODEL_BASE_URL",
            "https://generativelanguage.googleapis.com/v1beta/openai",
        )
        self.model_api_key: str | None = os.environ.get("CARELY_MODEL_API_KEY")
        # Ordered: the first candidate that initializes is used for the request.
        candidates = os.environ.get(
            "CARELY_MODELS", "gemini-2.0-flash,gemini-1.5-flash"
        )
        self.model_candidates: List[str] = [
            name.strip() for name in candidates.split(",") if name.strip()
        ]
        self.model_timeout: float = float(os.environ.get("CARELY_MODEL_TIMEOUT", "60"))
        self.model_max_tokens: int = int(os.environ.get("CARELY_MODEL_MAX_TOKENS", "2048"))
        self.model_temperature: float = float(
            os.environ.get("CARELY_MODEL_TEMPERATURE", "0.7")
        )

        self.log_level: str = (os.environ.get("CARELY_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("CARELY_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
