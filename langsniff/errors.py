"""
Exception types raised by langsniff.

The detection engine itself never raises for text input; these errors come
from catalog loading and from the detector lifecycle wrapper.
"""


class LangSniffError(Exception):
    """Base class for all langsniff errors."""


class CatalogLoadError(LangSniffError):
    """Language profiles could not be loaded or failed validation."""


class DetectorDestroyedError(LangSniffError):
    """A LanguageDetector was used after destroy() was called."""


class DetectionAbortedError(LangSniffError):
    """The caller's abort signal was set before or during the operation."""
