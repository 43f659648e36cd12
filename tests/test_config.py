"""
Tests for environment-driven detector configuration.
"""

import pytest
import sys
from pathlib import Path

# Add package to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from langsniff.config import DetectorConfig


ENV_VARS = [
    "LANGSNIFF_PROFILE_DIR",
    "LANGSNIFF_BACKEND",
    "LANGSNIFF_TEMPERATURE",
    "LANGSNIFF_MIN_CONFIDENCE",
    "LANGSNIFF_MAX_RESULTS",
    "LANGSNIFF_SCRIPT_FILTER_RATIO",
    "LANGSNIFF_SCRIPT_BOOST",
    "LANGSNIFF_FAST_PATH_MIN_RATIO",
    "LANGSNIFF_FAST_PATH_BOOST_THRESHOLD",
    "LANGSNIFF_FAST_PATH_BOOST_WEIGHT",
    "LANGSNIFF_INPUT_QUOTA",
    "LANGSNIFF_LANGDETECT_SEED",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDetectorConfig:

    def test_defaults(self):
        config = DetectorConfig()
        assert config.backend == "trigram"
        assert config.temperature == 10.0
        assert config.min_confidence == 0.001
        assert config.max_results == 10
        assert config.script_filter_ratio == 0.5
        assert config.script_boost == 0.5
        assert config.fast_path_min_ratio == 0.7
        assert config.fast_path_boost_threshold == 0.9
        assert config.fast_path_boost_weight == 0.3
        assert config.input_quota == 10000
        assert config.profile_dir is None

    def test_from_env_defaults(self, clean_env):
        assert DetectorConfig.from_env() == DetectorConfig()

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("LANGSNIFF_BACKEND", "LangDetect")
        clean_env.setenv("LANGSNIFF_TEMPERATURE", "5.5")
        clean_env.setenv("LANGSNIFF_MAX_RESULTS", "3")
        clean_env.setenv("LANGSNIFF_INPUT_QUOTA", "42")
        clean_env.setenv("LANGSNIFF_PROFILE_DIR", "/tmp/profiles")
        config = DetectorConfig.from_env()
        assert config.backend == "langdetect"
        assert config.temperature == 5.5
        assert config.max_results == 3
        assert config.input_quota == 42
        assert config.profile_dir == "/tmp/profiles"

    def test_empty_profile_dir_means_packaged(self, clean_env):
        clean_env.setenv("LANGSNIFF_PROFILE_DIR", "")
        assert DetectorConfig.from_env().profile_dir is None

    def test_frozen(self):
        config = DetectorConfig()
        with pytest.raises(Exception):
            config.temperature = 1.0

    @pytest.mark.parametrize("kwargs", [
        {"backend": "cld3"},
        {"temperature": 0},
        {"max_results": 0},
        {"input_quota": -1},
        {"min_confidence": 1.5},
        {"script_filter_ratio": -0.1},
        {"fast_path_boost_weight": 2},
        {"script_boost": -1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            DetectorConfig(**kwargs)

    def test_invalid_env_value(self, clean_env):
        clean_env.setenv("LANGSNIFF_MAX_RESULTS", "many")
        with pytest.raises(ValueError):
            DetectorConfig.from_env()
