"""
Trigram language detection engine.

Identifies the language of a text from its Unicode scripts and its trigram
distribution, scored against static per-language profiles.
"""

from .confidence import ConfidenceNormalizer, boost_language
from .detect_script import ScriptClassifier, classify_scripts, get_script_summary
from .engine import TrigramEngine, detect, get_default_engine
from .fast_path import fast_path_script
from .loader import BaseCatalog, ProfileCatalog, get_default_catalog
from .normalizer import TextNormalizer
from .scorer import Scorer
from .trigrams import TrigramExtractor, extract_trigrams

__all__ = [
    "BaseCatalog",
    "ConfidenceNormalizer",
    "ProfileCatalog",
    "ScriptClassifier",
    "Scorer",
    "TextNormalizer",
    "TrigramEngine",
    "TrigramExtractor",
    "boost_language",
    "classify_scripts",
    "detect",
    "extract_trigrams",
    "fast_path_script",
    "get_default_catalog",
    "get_default_engine",
    "get_script_summary",
]
