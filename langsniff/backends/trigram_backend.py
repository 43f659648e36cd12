"""
Backend over the built-in trigram engine.
"""

from typing import Iterable, List, Optional

from langsniff.config import DetectorConfig
from langsniff.engine import BaseCatalog, ProfileCatalog, TrigramEngine
from langsniff.schemas import DetectionResult
from .base import DetectionBackend


class TrigramBackend(DetectionBackend):
    """Trigram-profile detection with the script fast path."""

    name = "trigram"

    def __init__(self, config: Optional[DetectorConfig] = None, engine: Optional[TrigramEngine] = None):
        config = config or DetectorConfig()
        if engine is None:
            catalog = None
            if config.profile_dir:
                catalog = ProfileCatalog(config.profile_dir)
                catalog.load_all()
            engine = TrigramEngine(catalog=catalog, config=config)
        self.engine = engine

    @property
    def catalog(self) -> BaseCatalog:
        return self.engine.catalog

    def detect(self, text: str, expected_languages: Optional[Iterable[str]] = None) -> List[DetectionResult]:
        return self.engine.detect(text, expected_languages)

    def fast_path_script(self, text: str) -> Optional[DetectionResult]:
        return self.engine.fast_path_script(text)
