"""
Language profile catalog with validation and a shared read-only instance.

Loads YAML language profiles, validates them against the schema, and provides
lookup by language code and filtering by compatible script. Once loaded the
catalog never changes, so any number of threads may read it without locking.
"""

import logging
import os
import threading
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import yaml
from pydantic import ValidationError

from langsniff.errors import CatalogLoadError
from langsniff.schemas import LanguageEntry, LanguageProfile
from .detect_script import ScriptClassifier


logger = logging.getLogger(__name__)

PROFILES_DIR = Path(__file__).parent.parent / "resources" / "profiles"


class BaseCatalog:
    """
    Lookup contract shared by every catalog variant.

    Subclasses fill the index through `_index()`; callers only ever use the
    methods below, so detection code is independent of where entries come from.
    """

    def __init__(self):
        self._entries: Dict[str, LanguageEntry] = {}
        self._by_script: Dict[str, Tuple[LanguageEntry, ...]] = {}

    def _ensure_loaded(self) -> None:
        """Hook for lazily-loaded catalogs."""

    def _index(self, entries: Iterable[LanguageEntry]) -> None:
        by_code = {entry.code: entry for entry in sorted(entries, key=lambda e: e.code)}
        by_script: Dict[str, List[LanguageEntry]] = {}
        for entry in by_code.values():
            for script in entry.scripts:
                by_script.setdefault(script, []).append(entry)
        self._entries = by_code
        self._by_script = {script: tuple(items) for script, items in by_script.items()}

    @staticmethod
    def normalize_code(code) -> Optional[str]:
        """
        Reduce a BCP-47 tag to its lowercase primary subtag.

        'en-US' -> 'en', 'zh_Hant_TW' -> 'zh'. Non-strings and empty tags
        give None.
        """
        if not isinstance(code, str):
            return None
        primary = code.strip().replace('_', '-').split('-')[0].lower()
        return primary or None

    def get(self, code) -> Optional[LanguageEntry]:
        """Entry for a language tag (region and script subtags ignored), or None."""
        self._ensure_loaded()
        normalized = self.normalize_code(code)
        if normalized is None:
            return None
        return self._entries.get(normalized)

    def resolve(self, hints: Optional[Iterable]) -> List[LanguageEntry]:
        """
        Resolve expected-language hints to catalog entries.

        Unknown, malformed and duplicate hints are dropped; order is kept.
        """
        if not hints:
            return []
        if isinstance(hints, str):
            hints = [hints]
        resolved: List[LanguageEntry] = []
        seen = set()
        for hint in hints:
            entry = self.get(hint)
            if entry is not None and entry.code not in seen:
                seen.add(entry.code)
                resolved.append(entry)
        return resolved

    def get_by_script(self, script: str) -> Tuple[LanguageEntry, ...]:
        """All entries normally written in `script`."""
        self._ensure_loaded()
        return self._by_script.get(script, ())

    @staticmethod
    def filter_by_script(entries: Sequence[LanguageEntry], script: str) -> List[LanguageEntry]:
        """Subset of `entries` compatible with `script`, order kept."""
        return [entry for entry in entries if script in entry.scripts]

    @property
    def entries(self) -> Tuple[LanguageEntry, ...]:
        self._ensure_loaded()
        return tuple(self._entries.values())

    @property
    def codes(self) -> List[str]:
        self._ensure_loaded()
        return list(self._entries)

    def is_supported(self, code) -> bool:
        return self.get(code) is not None

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._entries)

    def __contains__(self, code) -> bool:
        return self.is_supported(code)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self.entries)


class ProfileCatalog(BaseCatalog):
    """Loads and serves trigram language profiles from YAML files."""

    def __init__(self, profile_dir: Optional[str] = None, strict: bool = True):
        """
        Initialize profile catalog.

        Args:
            profile_dir: Directory containing language profile YAML files
                (defaults to LANGSNIFF_PROFILE_DIR, then the packaged profiles)
            strict: Raise on the first bad profile instead of skipping it
        """
        super().__init__()
        self.profile_dir = Path(profile_dir or os.getenv('LANGSNIFF_PROFILE_DIR') or PROFILES_DIR)
        self.strict = strict
        self._loaded = False
        self._lock = threading.Lock()

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load_all()

    def load_all(self) -> None:
        """Load all language profiles from the directory."""
        with self._lock:
            if self._loaded:
                return

            if not self.profile_dir.is_dir():
                raise CatalogLoadError(f"Language profile directory not found: {self.profile_dir}")

            profiles: Dict[str, LanguageProfile] = {}
            # Skip documentation / helper files like _schema.yaml
            for yaml_file in sorted(self.profile_dir.glob('*.yaml')):
                if yaml_file.name.startswith('_'):
                    continue
                profile = self._load_single_profile(yaml_file)
                if profile is None:
                    continue
                if profile.code in profiles:
                    self._fail(f"Duplicate language code '{profile.code}' in {yaml_file}")
                    continue
                profiles[profile.code] = profile

            if not profiles:
                raise CatalogLoadError(f"No language profiles loaded from {self.profile_dir}")

            self._index(profiles.values())
            self._loaded = True
            logger.info(f"Loaded {len(profiles)} language profiles from {self.profile_dir}")

    def _load_single_profile(self, yaml_file: Path) -> Optional[LanguageProfile]:
        """Load a single YAML profile; None when skipped in non-strict mode."""
        try:
            with open(yaml_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if not isinstance(data, dict):
                raise ValueError(f"Expected a YAML mapping at top-level, got {type(data).__name__}")

            profile = LanguageProfile(**data)
            logger.debug(f"Loaded language profile: {profile.code} v{profile.version} ({len(profile.trigrams)} trigrams)")
            return profile

        except yaml.YAMLError as e:
            self._fail(f"Invalid YAML in {yaml_file}: {e}")
        except (ValidationError, ValueError, TypeError) as e:
            self._fail(f"Failed to load profile {yaml_file}: {e}")
        except OSError as e:
            self._fail(f"Could not read profile {yaml_file}: {e}")
        return None

    def _fail(self, message: str) -> None:
        if self.strict:
            raise CatalogLoadError(message)
        logger.error(message)

    @property
    def profiles(self) -> Tuple[LanguageProfile, ...]:
        return self.entries

    def validate_all_profiles(self, min_trigrams: int = 50) -> Dict[str, List[str]]:
        """
        Soft checks beyond schema validation.

        Returns:
            Dictionary mapping language codes to a list of issues
        """
        known_scripts = set(ScriptClassifier.SCRIPT_RANGES)
        errors: Dict[str, List[str]] = {}

        for profile in self.profiles:
            issues = []
            if len(profile.trigrams) < min_trigrams:
                issues.append(f"Only {len(profile.trigrams)} trigrams (minimum {min_trigrams})")
            unclassified = sorted(s for s in profile.scripts if s not in known_scripts)
            if unclassified:
                issues.append(f"Scripts without classifier ranges: {unclassified}")
            if issues:
                errors[profile.code] = issues

        return errors


@lru_cache(maxsize=None)
def get_default_catalog() -> ProfileCatalog:
    """Process-wide catalog, loaded on first use and shared read-only afterwards."""
    catalog = ProfileCatalog()
    catalog.load_all()
    return catalog
