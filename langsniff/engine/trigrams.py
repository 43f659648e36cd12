"""
Trigram extraction over normalized text.
"""

from collections import Counter
from typing import Optional

from .normalizer import TextNormalizer


class TrigramExtractor:
    """Counts 3-character windows of normalized text."""

    WINDOW = 3

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()

    def extract(self, text: str) -> Counter:
        """
        Slide a 3-character window across the normalized text.

        Windows containing two consecutive spaces are skipped; windows with a
        single interior space (word boundaries) are kept.

        Returns:
            Counter of trigram -> occurrences; empty when the normalized text
            is shorter than three characters
        """
        normalized = self.normalizer.normalize_text(text)
        trigrams = Counter()
        for i in range(len(normalized) - self.WINDOW + 1):
            trigram = normalized[i:i + self.WINDOW]
            if '  ' in trigram:
                continue
            trigrams[trigram] += 1
        return trigrams


_default_extractor = TrigramExtractor()


def extract_trigrams(text: str) -> Counter:
    return _default_extractor.extract(text)
