from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AnalysisConfig:
    min_note_length: int = int(os.getenv("NOTES_MIN_LENGTH", "10"))
    max_batch_size: int = int(os.getenv("NOTES_MAX_BATCH", "50"))
    enabled: bool = _env_flag("NOTES_ANALYSIS_ENABLED", "true")


DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()
