"""
Detection backend contract.

Every backend answers detect(text, expected_languages) with a non-empty,
confidence-descending list of DetectionResult, so callers never need to know
which one is active.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from langsniff.engine.loader import BaseCatalog
from langsniff.schemas import DetectionResult


class DetectionBackend(ABC):
    """Interchangeable language identification backend."""

    name: str = "base"

    @property
    @abstractmethod
    def catalog(self) -> BaseCatalog:
        """Catalog of the languages this backend can report."""

    @abstractmethod
    def detect(self, text: str, expected_languages: Optional[Iterable[str]] = None) -> List[DetectionResult]:
        """Rank candidate languages; never raises for str input."""

    def fast_path_script(self, text: str) -> Optional[DetectionResult]:
        """Script-only shortcut; backends without one return None."""
        return None

    def supported_languages(self) -> List[str]:
        return sorted(self.catalog.codes)

    def is_supported(self, code) -> bool:
        return self.catalog.is_supported(code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(languages={len(self.catalog)})"
