"""
Text normalization ahead of trigram extraction.

Lowercases, strips digit characters, collapses whitespace runs to a single
space and trims. Punctuation is left in place: it forms part of the trigram
stream exactly as the text presents it.
"""

import re


class TextNormalizer:
    """Normalizes text for trigram comparison against language profiles."""

    _DIGITS = re.compile(r'\d')
    _WHITESPACE = re.compile(r'\s+')

    def normalize_text(self, text: str) -> str:
        """
        Normalize text for trigram extraction.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text (possibly empty)
        """
        if not text:
            return ""

        text = text.lower()
        text = self._DIGITS.sub('', text)
        text = self._WHITESPACE.sub(' ', text)
        return text.strip()
