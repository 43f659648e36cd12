"""
Trigram detection engine.

Pure and synchronous: given the same text and hints it always returns the same
ranked list, reading nothing but the immutable profile catalog. Safe to call
from any number of threads.
"""

import logging
from collections import Counter
from functools import lru_cache
from typing import Iterable, List, Optional

from langsniff.config import DetectorConfig
from langsniff.schemas import DetectionResult, ScriptInfo
from .confidence import ConfidenceNormalizer
from .detect_script import ScriptClassifier
from .fast_path import fast_path_script
from .loader import BaseCatalog, get_default_catalog
from .scorer import Scorer
from .trigrams import TrigramExtractor


logger = logging.getLogger(__name__)


class TrigramEngine:
    """Script classification + trigram scoring + confidence normalization."""

    def __init__(self, catalog: Optional[BaseCatalog] = None, config: Optional[DetectorConfig] = None):
        """
        Initialize engine.

        Args:
            catalog: Profile catalog (defaults to the shared packaged catalog)
            config: Tuning parameters (defaults to DetectorConfig())
        """
        self.config = config or DetectorConfig()
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.classifier = ScriptClassifier()
        self.extractor = TrigramExtractor()
        self.scorer = Scorer(
            self.catalog,
            script_filter_ratio=self.config.script_filter_ratio,
            script_boost=self.config.script_boost,
        )
        self.normalizer = ConfidenceNormalizer(
            temperature=self.config.temperature,
            min_confidence=self.config.min_confidence,
            max_results=self.config.max_results,
        )

    def classify_scripts(self, text: str) -> List[ScriptInfo]:
        return self.classifier.classify_scripts(text)

    def extract_trigrams(self, text: str) -> Counter:
        return self.extractor.extract(text)

    def fast_path_script(self, text: str) -> Optional[DetectionResult]:
        return fast_path_script(text, min_ratio=self.config.fast_path_min_ratio, classifier=self.classifier)

    def detect(self, text: str, expected_languages: Optional[Iterable[str]] = None) -> List[DetectionResult]:
        """
        Rank candidate languages for `text`.

        Args:
            text: Input text
            expected_languages: Optional BCP-47 hints narrowing the candidates;
                unknown or malformed hints are ignored

        Returns:
            Non-empty, confidence-descending list; [('und', 0.0)] when the text
            carries no usable signal
        """
        text = text.strip()
        if not text:
            return [DetectionResult.undetermined()]

        scripts = self.classify_scripts(text)
        if not scripts:
            logger.debug("No script-matched characters, result undetermined")
            return [DetectionResult.undetermined()]

        text_trigrams = self.extract_trigrams(text)
        if not text_trigrams:
            logger.debug("No trigrams extracted, result undetermined")
            return [DetectionResult.undetermined()]

        candidates = self.scorer.select_candidates(scripts, expected_languages)
        # All-zero scores normalize to an even split across the candidates
        scored = self.scorer.score_candidates(text_trigrams, scripts, candidates)
        results = self.normalizer.normalize(scored)
        logger.debug(
            f"Scored {len(candidates)} candidates over {sum(text_trigrams.values())} trigrams, "
            f"top: {results[0].detected_language} ({results[0].confidence:.3f})"
        )
        return results


@lru_cache(maxsize=None)
def get_default_engine() -> TrigramEngine:
    """Process-wide engine over the default catalog and configuration."""
    return TrigramEngine()


def detect(text: str, expected_languages: Optional[Iterable[str]] = None) -> List[DetectionResult]:
    return get_default_engine().detect(text, expected_languages)
