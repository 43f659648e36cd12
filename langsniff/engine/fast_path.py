"""
Script-only shortcut for languages that own a distinctive script.
"""

from typing import Optional

from langsniff.schemas import DetectionResult
from .detect_script import ScriptClassifier, default_classifier


SCRIPT_LANGUAGES = {
    'Hangul': 'ko',
    'Thai': 'th',
    'Hebrew': 'he',
    'Bengali': 'bn',
    'Tamil': 'ta',
    'Devanagari': 'hi',
}

KANA_SCRIPTS = ('Hiragana', 'Katakana')


def fast_path_script(
    text: str,
    min_ratio: float = 0.7,
    classifier: Optional[ScriptClassifier] = None,
) -> Optional[DetectionResult]:
    """
    Single high-confidence guess from the dominant script alone.

    Applies only when the dominant script holds at least `min_ratio` of the
    script-matched characters. Any kana means Japanese; otherwise dominant Han
    means Chinese; a few scripts map to one language each. Confidence is the
    dominant script's ratio.

    Returns:
        DetectionResult, or None when the script does not settle the language
    """
    scripts = (classifier or default_classifier).classify_scripts(text)
    if not scripts:
        return None

    dominant = scripts[0]
    if dominant.ratio < min_ratio:
        return None

    if any(s.script in KANA_SCRIPTS for s in scripts):
        return DetectionResult(detected_language='ja', confidence=dominant.ratio)

    if dominant.script == 'Han':
        return DetectionResult(detected_language='zh', confidence=dominant.ratio)

    language = SCRIPT_LANGUAGES.get(dominant.script)
    if language:
        return DetectionResult(detected_language=language, confidence=dominant.ratio)

    return None
