"""
langsniff: offline language detection from character trigrams.

Quick use:
    from langsniff import detect
    detect("Bonjour le monde")[0].detected_language  # 'fr'
"""

from langsniff.config import DetectorConfig
from langsniff.detector import CreateMonitor, DownloadProgress, LanguageDetector
from langsniff.engine import classify_scripts, detect, extract_trigrams, fast_path_script
from langsniff.errors import (
    CatalogLoadError,
    DetectionAbortedError,
    DetectorDestroyedError,
    LangSniffError,
)
from langsniff.schemas import DetectionResult, ScriptInfo, UNDETERMINED

__version__ = "1.0.0"

__all__ = [
    "CatalogLoadError",
    "CreateMonitor",
    "DetectionAbortedError",
    "DetectionResult",
    "DetectorConfig",
    "DetectorDestroyedError",
    "DownloadProgress",
    "LangSniffError",
    "LanguageDetector",
    "ScriptInfo",
    "UNDETERMINED",
    "classify_scripts",
    "detect",
    "extract_trigrams",
    "fast_path_script",
]
