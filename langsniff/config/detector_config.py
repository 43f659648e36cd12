"""
Detector configuration.

Supports:
- Trigram engine tuning (temperature, result limits, script filter/boost)
- Script fast-path merge policy
- Backend selection ("trigram" or "langdetect")
"""

import os
from dataclasses import dataclass
from typing import Literal, Optional


BackendName = Literal["trigram", "langdetect"]


@dataclass(frozen=True)
class DetectorConfig:
    """Configuration for the language detector and its engine."""

    # Catalog
    profile_dir: Optional[str] = None  # None = packaged profiles

    # Backend
    backend: BackendName = "trigram"

    # Confidence normalization
    temperature: float = 10.0
    min_confidence: float = 0.001
    max_results: int = 10

    # Candidate selection / scoring
    script_filter_ratio: float = 0.5
    script_boost: float = 0.5

    # Script fast path
    fast_path_min_ratio: float = 0.7
    fast_path_boost_threshold: float = 0.9
    fast_path_boost_weight: float = 0.3

    # Lifecycle
    input_quota: int = 10000

    # langdetect is non-deterministic unless seeded
    langdetect_seed: int = 0

    def __post_init__(self):
        if self.backend not in ("trigram", "langdetect"):
            raise ValueError(f"Unknown backend '{self.backend}'. Expected 'trigram' or 'langdetect'")
        if self.temperature <= 0:
            raise ValueError(f"temperature must be positive, got {self.temperature}")
        if self.max_results < 1:
            raise ValueError(f"max_results must be at least 1, got {self.max_results}")
        if self.input_quota < 0:
            raise ValueError(f"input_quota cannot be negative, got {self.input_quota}")
        for name in (
            "min_confidence",
            "script_filter_ratio",
            "fast_path_min_ratio",
            "fast_path_boost_threshold",
            "fast_path_boost_weight",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.script_boost < 0:
            raise ValueError(f"script_boost cannot be negative, got {self.script_boost}")

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Load config from environment variables."""
        return cls(
            profile_dir=os.getenv("LANGSNIFF_PROFILE_DIR") or None,
            backend=os.getenv("LANGSNIFF_BACKEND", "trigram").lower(),
            temperature=float(os.getenv("LANGSNIFF_TEMPERATURE", "10.0")),
            min_confidence=float(os.getenv("LANGSNIFF_MIN_CONFIDENCE", "0.001")),
            max_results=int(os.getenv("LANGSNIFF_MAX_RESULTS", "10")),
            script_filter_ratio=float(os.getenv("LANGSNIFF_SCRIPT_FILTER_RATIO", "0.5")),
            script_boost=float(os.getenv("LANGSNIFF_SCRIPT_BOOST", "0.5")),
            fast_path_min_ratio=float(os.getenv("LANGSNIFF_FAST_PATH_MIN_RATIO", "0.7")),
            fast_path_boost_threshold=float(os.getenv("LANGSNIFF_FAST_PATH_BOOST_THRESHOLD", "0.9")),
            fast_path_boost_weight=float(os.getenv("LANGSNIFF_FAST_PATH_BOOST_WEIGHT", "0.3")),
            input_quota=int(os.getenv("LANGSNIFF_INPUT_QUOTA", "10000")),
            langdetect_seed=int(os.getenv("LANGSNIFF_LANGDETECT_SEED", "0")),
        )
