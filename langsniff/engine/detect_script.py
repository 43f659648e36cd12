"""
Unicode script classification.

Identifies the scripts present in a text and their share of all
script-matched characters. Characters outside every known range (digits,
punctuation, whitespace, symbols, emoji) are ignored entirely.
"""

from bisect import bisect_right
from collections import Counter
from typing import Dict, List, Optional, Tuple

from langsniff.schemas import ScriptInfo, ScriptSummary


class ScriptClassifier:
    """Classifies code points into named Unicode scripts."""

    # Unicode ranges for each script (inclusive)
    SCRIPT_RANGES = {
        'Latin': [
            (0x0041, 0x005A),  # A-Z
            (0x0061, 0x007A),  # a-z
            (0x00C0, 0x00D6),  # Latin-1 Supplement letters
            (0x00D8, 0x00F6),
            (0x00F8, 0x00FF),
            (0x0100, 0x017F),  # Latin Extended-A
            (0x0180, 0x024F),  # Latin Extended-B
            (0x1E00, 0x1EFF),  # Latin Extended Additional
        ],
        'Greek': [
            (0x0370, 0x03FF),  # Greek and Coptic
            (0x1F00, 0x1FFF),  # Greek Extended
        ],
        'Cyrillic': [
            (0x0400, 0x04FF),  # Cyrillic
            (0x0500, 0x052F),  # Cyrillic Supplement
            (0x2DE0, 0x2DFF),  # Cyrillic Extended-A
            (0xA640, 0xA69F),  # Cyrillic Extended-B
        ],
        'Armenian': [
            (0x0530, 0x058F),
        ],
        'Hebrew': [
            (0x0590, 0x05FF),
            (0xFB1D, 0xFB4F),  # Hebrew presentation forms
        ],
        'Arabic': [
            (0x0600, 0x06FF),  # Arabic
            (0x0750, 0x077F),  # Arabic Supplement
            (0x08A0, 0x08FF),  # Arabic Extended-A
            (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
            (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
        ],
        'Devanagari': [
            (0x0900, 0x097F),
            (0xA8E0, 0xA8FF),  # Devanagari Extended
        ],
        'Bengali': [
            (0x0980, 0x09FF),
        ],
        'Gurmukhi': [
            (0x0A00, 0x0A7F),
        ],
        'Gujarati': [
            (0x0A80, 0x0AFF),
        ],
        'Tamil': [
            (0x0B80, 0x0BFF),
        ],
        'Telugu': [
            (0x0C00, 0x0C7F),
        ],
        'Kannada': [
            (0x0C80, 0x0CFF),
        ],
        'Malayalam': [
            (0x0D00, 0x0D7F),
        ],
        'Sinhala': [
            (0x0D80, 0x0DFF),
        ],
        'Thai': [
            (0x0E00, 0x0E7F),
        ],
        'Lao': [
            (0x0E80, 0x0EFF),
        ],
        'Myanmar': [
            (0x1000, 0x109F),
        ],
        'Georgian': [
            (0x10A0, 0x10FF),
        ],
        'Hangul': [
            (0x1100, 0x11FF),  # Hangul Jamo
            (0x3130, 0x318F),  # Hangul Compatibility Jamo
            (0xA960, 0xA97F),  # Hangul Jamo Extended-A
            (0xAC00, 0xD7AF),  # Hangul Syllables
            (0xD7B0, 0xD7FF),  # Hangul Jamo Extended-B
        ],
        'Ethiopic': [
            (0x1200, 0x139F),
        ],
        'Khmer': [
            (0x1780, 0x17FF),
        ],
        'Hiragana': [
            (0x3040, 0x309F),
        ],
        'Katakana': [
            (0x30A0, 0x30FF),
            (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
            (0xFF66, 0xFF9F),  # Halfwidth Katakana
        ],
        'Han': [
            (0x3400, 0x4DBF),    # CJK Unified Ideographs Extension A
            (0x4E00, 0x9FFF),    # CJK Unified Ideographs
            (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
            (0x20000, 0x2A6DF),  # Extension B
            (0x2A700, 0x2B73F),  # Extension C
            (0x2B740, 0x2B81F),  # Extension D
            (0x2B820, 0x2CEAF),  # Extension E
            (0x2CEB0, 0x2EBEF),  # Extension F
        ],
    }

    def __init__(self):
        """Flatten the range table into sorted intervals for bisect lookup."""
        intervals = sorted(
            (start, end, script)
            for script, ranges in self.SCRIPT_RANGES.items()
            for start, end in ranges
        )
        for (_, prev_end, prev_script), (start, _, script) in zip(intervals, intervals[1:]):
            if start <= prev_end:
                raise ValueError(
                    f"Overlapping script ranges: {prev_script} ends at {prev_end:#x}, "
                    f"{script} starts at {start:#x}"
                )
        self._starts = [start for start, _, _ in intervals]
        self._ends = [end for _, end, _ in intervals]
        self._scripts = [script for _, _, script in intervals]

    @property
    def scripts(self) -> List[str]:
        """Names of all scripts this classifier recognizes."""
        return list(self.SCRIPT_RANGES)

    def get_char_script(self, char: str) -> Optional[str]:
        """Get the script for a single character, or None if it is in no known range."""
        code = ord(char)
        i = bisect_right(self._starts, code) - 1
        if i >= 0 and code <= self._ends[i]:
            return self._scripts[i]
        return None

    def detect_scripts(self, text: str) -> Dict[str, int]:
        """
        Count characters by script in the given text.

        Args:
            text: Input text to analyze

        Returns:
            Dictionary mapping script names to character counts, in order of
            first appearance
        """
        script_counts = Counter()
        for char in text:
            script = self.get_char_script(char)
            if script is not None:
                script_counts[script] += 1
        return dict(script_counts)

    def classify_scripts(self, text: str) -> List[ScriptInfo]:
        """
        Ranked script distribution of `text`.

        Args:
            text: Input text to analyze

        Returns:
            ScriptInfo list sorted by count descending (ties keep first
            appearance order); empty when no character matches any script
        """
        script_counts = self.detect_scripts(text)
        total = sum(script_counts.values())
        if total == 0:
            return []

        ranked = sorted(script_counts.items(), key=lambda item: item[1], reverse=True)
        return [ScriptInfo(script=script, count=count, ratio=count / total) for script, count in ranked]

    def get_dominant_script(self, text: str) -> Tuple[Optional[str], float]:
        """
        Get the dominant script and its ratio.

        Returns:
            Tuple of (script_name, ratio), or (None, 0.0) for text without
            script-matched characters
        """
        scripts = self.classify_scripts(text)
        if not scripts:
            return None, 0.0
        return scripts[0].script, scripts[0].ratio

    def is_mixed_script(self, text: str, threshold: float = 0.3) -> bool:
        """True if at least two scripts each hold `threshold` of the matched characters."""
        significant = [s for s in self.classify_scripts(text) if s.ratio >= threshold]
        return len(significant) > 1

    def get_script_summary(self, text: str, mixed_threshold: float = 0.3) -> ScriptSummary:
        """Comprehensive script analysis summary."""
        scripts = self.classify_scripts(text)
        if not scripts:
            return ScriptSummary()

        significant = [s for s in scripts if s.ratio >= mixed_threshold]
        return ScriptSummary(
            total_characters=sum(s.count for s in scripts),
            scripts=scripts,
            dominant_script=scripts[0].script,
            dominant_ratio=scripts[0].ratio,
            is_mixed_script=len(significant) > 1,
        )


default_classifier = ScriptClassifier()


def classify_scripts(text: str) -> List[ScriptInfo]:
    """classify_scripts() on a shared classifier; the range table is read-only after construction."""
    return default_classifier.classify_scripts(text)


def get_script_summary(text: str) -> ScriptSummary:
    return default_classifier.get_script_summary(text)
