"""
Pydantic schema for language profiles and detection results.

Profiles are validated once at catalog load and fail fast on malformed data;
results and script statistics are small frozen models built fresh per call.
"""

import re
from types import MappingProxyType
from typing import FrozenSet, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator


UNDETERMINED = "und"

Availability = Literal["available", "unavailable"]

KNOWN_SCRIPTS = frozenset({
    "Latin", "Cyrillic", "Greek", "Armenian", "Georgian", "Arabic", "Hebrew",
    "Devanagari", "Bengali", "Gurmukhi", "Gujarati", "Tamil", "Telugu",
    "Kannada", "Malayalam", "Sinhala", "Thai", "Lao", "Khmer", "Myanmar",
    "Ethiopic", "Han", "Hiragana", "Katakana", "Hangul",
})

_CODE_PATTERN = re.compile(r'^[a-z]{2,3}$')
_VERSION_PATTERN = re.compile(r'^\d+\.\d+\.\d+$')


class ScriptInfo(BaseModel):
    """Count of characters in one Unicode script, relative to all script-matched characters."""
    script: str
    count: int = Field(..., ge=1)
    ratio: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True}


class ScriptSummary(BaseModel):
    """Aggregate view over classify_scripts() output."""
    total_characters: int = 0
    scripts: List[ScriptInfo] = Field(default_factory=list)
    dominant_script: Optional[str] = None
    dominant_ratio: float = 0.0
    is_mixed_script: bool = False


class DetectionResult(BaseModel):
    """One ranked candidate language for an input text."""
    detected_language: str = Field(..., description="BCP-47 primary language subtag, or 'und'")
    confidence: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @classmethod
    def undetermined(cls) -> "DetectionResult":
        return cls(detected_language=UNDETERMINED, confidence=0.0)

    @property
    def is_undetermined(self) -> bool:
        return self.detected_language == UNDETERMINED


class LanguageEntry(BaseModel):
    """Catalog entry: a supported language and the scripts it is written in."""
    code: str = Field(..., description="Lowercase primary language subtag (e.g. 'en', 'fil')")
    name: str = Field(..., description="Human-readable language name")
    scripts: FrozenSet[str] = Field(..., description="Unicode scripts the language is normally written in")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator('code')
    @classmethod
    def validate_code(cls, v):
        if not _CODE_PATTERN.match(v):
            raise ValueError(f"Invalid language code '{v}'. Expected a lowercase primary subtag such as 'en'")
        return v

    @field_validator('scripts')
    @classmethod
    def validate_scripts(cls, v):
        if not v:
            raise ValueError("At least one script is required")
        unknown = sorted(s for s in v if s not in KNOWN_SCRIPTS)
        if unknown:
            raise ValueError(f"Unknown scripts {unknown}. Valid scripts: {sorted(KNOWN_SCRIPTS)}")
        return v


class LanguageProfile(LanguageEntry):
    """
    Trigram profile for one language.

    `trigrams` is ranked by corpus frequency, most diagnostic first. The
    rank index is built once here so scoring never searches the tuple.
    """
    version: str = Field(..., description="Semantic version of the profile data")
    trigrams: Tuple[str, ...] = Field(..., description="Ranked trigrams, no duplicates")

    _rank: Mapping[str, int] = PrivateAttr(default_factory=dict)

    @field_validator('version')
    @classmethod
    def validate_version(cls, v):
        if not _VERSION_PATTERN.match(v):
            raise ValueError(f"Invalid version '{v}'. Expected semantic version: '1.0.0'")
        return v

    @field_validator('trigrams')
    @classmethod
    def validate_trigrams(cls, v):
        if not v:
            raise ValueError("Profile must list at least one trigram")
        bad = [t for t in v if len(t) != 3]
        if bad:
            raise ValueError(f"Trigrams must be exactly 3 characters, got {bad[:5]}")
        return v

    @model_validator(mode='after')
    def validate_unique_trigrams(self):
        if len(set(self.trigrams)) != len(self.trigrams):
            seen = set()
            dupes = [t for t in self.trigrams if t in seen or seen.add(t)]
            raise ValueError(f"Profile '{self.code}' has duplicate trigrams: {dupes[:5]}")
        return self

    def model_post_init(self, __context) -> None:
        self._rank = MappingProxyType({t: i for i, t in enumerate(self.trigrams)})

    @property
    def rank(self) -> Mapping[str, int]:
        """Read-only trigram -> position mapping."""
        return self._rank
