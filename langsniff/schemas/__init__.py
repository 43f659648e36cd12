from .detection import (
    KNOWN_SCRIPTS,
    UNDETERMINED,
    Availability,
    DetectionResult,
    LanguageEntry,
    LanguageProfile,
    ScriptInfo,
    ScriptSummary,
)

__all__ = [
    "KNOWN_SCRIPTS",
    "UNDETERMINED",
    "Availability",
    "DetectionResult",
    "LanguageEntry",
    "LanguageProfile",
    "ScriptInfo",
    "ScriptSummary",
]
