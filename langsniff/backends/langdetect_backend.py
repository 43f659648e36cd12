"""
Model-based backend using the langdetect library.

langdetect ships its own profiles for 55 languages and picks among them with a
randomized naive-Bayes search; the factory seed is fixed so repeated calls on
the same text agree.
"""

import logging
from typing import Iterable, List, Optional

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from langsniff.config import DetectorConfig
from langsniff.engine.loader import BaseCatalog
from langsniff.schemas import DetectionResult, LanguageEntry
from .base import DetectionBackend


logger = logging.getLogger(__name__)

# code -> (name, scripts) for every language langdetect can report
LANGDETECT_LANGUAGES = {
    'af': ('Afrikaans', ['Latin']),
    'ar': ('Arabic', ['Arabic']),
    'bg': ('Bulgarian', ['Cyrillic']),
    'bn': ('Bengali', ['Bengali']),
    'ca': ('Catalan', ['Latin']),
    'cs': ('Czech', ['Latin']),
    'cy': ('Welsh', ['Latin']),
    'da': ('Danish', ['Latin']),
    'de': ('German', ['Latin']),
    'el': ('Greek', ['Greek']),
    'en': ('English', ['Latin']),
    'es': ('Spanish', ['Latin']),
    'et': ('Estonian', ['Latin']),
    'fa': ('Persian', ['Arabic']),
    'fi': ('Finnish', ['Latin']),
    'fr': ('French', ['Latin']),
    'gu': ('Gujarati', ['Gujarati']),
    'he': ('Hebrew', ['Hebrew']),
    'hi': ('Hindi', ['Devanagari']),
    'hr': ('Croatian', ['Latin']),
    'hu': ('Hungarian', ['Latin']),
    'id': ('Indonesian', ['Latin']),
    'it': ('Italian', ['Latin']),
    'ja': ('Japanese', ['Han', 'Hiragana', 'Katakana']),
    'kn': ('Kannada', ['Kannada']),
    'ko': ('Korean', ['Hangul']),
    'lt': ('Lithuanian', ['Latin']),
    'lv': ('Latvian', ['Latin']),
    'mk': ('Macedonian', ['Cyrillic']),
    'ml': ('Malayalam', ['Malayalam']),
    'mr': ('Marathi', ['Devanagari']),
    'ne': ('Nepali', ['Devanagari']),
    'nl': ('Dutch', ['Latin']),
    'no': ('Norwegian', ['Latin']),
    'pa': ('Punjabi', ['Gurmukhi']),
    'pl': ('Polish', ['Latin']),
    'pt': ('Portuguese', ['Latin']),
    'ro': ('Romanian', ['Latin']),
    'ru': ('Russian', ['Cyrillic']),
    'sk': ('Slovak', ['Latin']),
    'sl': ('Slovenian', ['Latin']),
    'so': ('Somali', ['Latin']),
    'sq': ('Albanian', ['Latin']),
    'sv': ('Swedish', ['Latin']),
    'sw': ('Swahili', ['Latin']),
    'ta': ('Tamil', ['Tamil']),
    'te': ('Telugu', ['Telugu']),
    'th': ('Thai', ['Thai']),
    'tl': ('Tagalog', ['Latin']),
    'tr': ('Turkish', ['Latin']),
    'uk': ('Ukrainian', ['Cyrillic']),
    'ur': ('Urdu', ['Arabic']),
    'vi': ('Vietnamese', ['Latin']),
    'zh': ('Chinese', ['Han']),
}


class ModelLanguageCatalog(BaseCatalog):
    """Catalog over langdetect's fixed language set; same lookup contract as ProfileCatalog."""

    def __init__(self):
        super().__init__()
        self._index(
            LanguageEntry(code=code, name=name, scripts=scripts)
            for code, (name, scripts) in LANGDETECT_LANGUAGES.items()
        )


class LangDetectBackend(DetectionBackend):
    """Detection through langdetect; no script fast path."""

    name = "langdetect"

    def __init__(self, config: Optional[DetectorConfig] = None):
        self.config = config or DetectorConfig()
        self._catalog = ModelLanguageCatalog()
        DetectorFactory.seed = self.config.langdetect_seed

    @property
    def catalog(self) -> BaseCatalog:
        return self._catalog

    def detect(self, text: str, expected_languages: Optional[Iterable[str]] = None) -> List[DetectionResult]:
        if not text.strip():
            return [DetectionResult.undetermined()]

        try:
            languages = detect_langs(text)
        except LangDetectException as e:
            logger.debug(f"langdetect found no usable features: {e}")
            return [DetectionResult.undetermined()]

        allowed = {entry.code for entry in self._catalog.resolve(expected_languages)}

        # zh-cn / zh-tw collapse onto 'zh'; keep the first (highest) of each code
        merged = {}
        for language in languages:
            code = BaseCatalog.normalize_code(language.lang)
            if code is None or (allowed and code not in allowed):
                continue
            merged.setdefault(code, min(1.0, max(0.0, float(language.prob))))

        results = [
            DetectionResult(detected_language=code, confidence=confidence)
            for code, confidence in merged.items()
            if confidence > self.config.min_confidence
        ]
        results.sort(key=lambda r: r.confidence, reverse=True)
        results = results[:self.config.max_results]
        if not results:
            return [DetectionResult.undetermined()]
        return results
