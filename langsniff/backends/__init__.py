"""
Interchangeable detection backends.

Supports:
- trigram (built-in profiles, script fast path)
- langdetect (library-provided profiles)
"""

from typing import Optional

from langsniff.config import DetectorConfig
from .base import DetectionBackend
from .langdetect_backend import LangDetectBackend, ModelLanguageCatalog
from .trigram_backend import TrigramBackend


BACKENDS = {
    TrigramBackend.name: TrigramBackend,
    LangDetectBackend.name: LangDetectBackend,
}


def create_backend(name: Optional[str] = None, config: Optional[DetectorConfig] = None) -> DetectionBackend:
    """
    Build a backend by name.

    Args:
        name: Backend name (defaults to config.backend)
        config: Detector configuration

    Raises:
        ValueError: Unknown backend name
    """
    config = config or DetectorConfig()
    name = (name or config.backend).lower()
    try:
        backend_cls = BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend '{name}'. Available: {sorted(BACKENDS)}") from None
    return backend_cls(config=config)


__all__ = [
    "BACKENDS",
    "DetectionBackend",
    "LangDetectBackend",
    "ModelLanguageCatalog",
    "TrigramBackend",
    "create_backend",
]
