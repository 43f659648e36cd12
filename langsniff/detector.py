"""
LanguageDetector lifecycle wrapper.

Adds what a long-lived detector object needs on top of a backend: expected
input languages fixed at creation, an input quota, an abort signal, a
download-progress monitor, and explicit destruction.

Usage:
    with LanguageDetector.create(expected_input_languages=["en", "fr"]) as detector:
        results = detector.detect("Bonjour tout le monde")
        print(results[0].detected_language, results[0].confidence)
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from langsniff.backends import DetectionBackend, create_backend
from langsniff.config import DetectorConfig
from langsniff.engine.confidence import boost_language
from langsniff.errors import DetectionAbortedError, DetectorDestroyedError
from langsniff.schemas import Availability, DetectionResult


logger = logging.getLogger(__name__)

DOWNLOAD_PROGRESS = "downloadprogress"


@dataclass(frozen=True)
class DownloadProgress:
    """Progress event; profiles ship with the package so it is always complete."""
    loaded: float
    total: float


class CreateMonitor:
    """Event target handed to the `monitor` callback of LanguageDetector.create()."""

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {}

    def add_event_listener(self, event_type: str, listener: Callable) -> None:
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: Callable) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event_type: str, event) -> None:
        for listener in list(self._listeners.get(event_type, [])):
            listener(event)


def _check_signal(signal: Optional[threading.Event], action: str) -> None:
    if signal is not None and signal.is_set():
        raise DetectionAbortedError(f"Language detector {action} aborted")


def _as_hints(expected_input_languages) -> Tuple[str, ...]:
    if not expected_input_languages:
        return ()
    if isinstance(expected_input_languages, str):
        return (expected_input_languages,)
    return tuple(expected_input_languages)


class LanguageDetector:
    """Detects the language of text; build with LanguageDetector.create()."""

    def __init__(
        self,
        backend: DetectionBackend,
        expected_input_languages: Iterable[str] = (),
        config: Optional[DetectorConfig] = None,
    ):
        self._backend = backend
        self._config = config or DetectorConfig()
        self._expected_input_languages = _as_hints(expected_input_languages)
        self._input_quota = self._config.input_quota
        self._destroyed = False
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        expected_input_languages: Optional[Iterable[str]] = None,
        monitor: Optional[Callable[[CreateMonitor], None]] = None,
        signal: Optional[threading.Event] = None,
        backend: Union[str, DetectionBackend, None] = None,
        config: Optional[DetectorConfig] = None,
    ) -> "LanguageDetector":
        """
        Create a detector.

        Args:
            expected_input_languages: BCP-47 tags the input is expected to be in
            monitor: Called with a CreateMonitor before download progress fires
            signal: Abort signal; creation fails if it is already set
            backend: Backend name or instance (defaults to config.backend)
            config: Detector configuration (defaults to DetectorConfig.from_env())

        Raises:
            DetectionAbortedError: signal already set
            CatalogLoadError: profile catalog failed to load
            ValueError: unknown backend name
        """
        _check_signal(signal, "creation")
        config = config or DetectorConfig.from_env()

        if monitor is not None:
            create_monitor = CreateMonitor()
            monitor(create_monitor)
            create_monitor.dispatch_event(DOWNLOAD_PROGRESS, DownloadProgress(loaded=1, total=1))

        if not isinstance(backend, DetectionBackend):
            backend = create_backend(backend, config)
            # Force the catalog now so load failures surface from create()
            len(backend.catalog)

        _check_signal(signal, "creation")
        logger.debug(f"Created LanguageDetector with backend '{backend.name}'")
        return cls(backend, expected_input_languages or (), config)

    @classmethod
    def availability(
        cls,
        expected_input_languages: Optional[Iterable[str]] = None,
        config: Optional[DetectorConfig] = None,
    ) -> Availability:
        """'unavailable' when more than half of the expected languages are unsupported."""
        hints = _as_hints(expected_input_languages)
        if hints:
            backend = create_backend(config=config or DetectorConfig.from_env())
            unsupported = [hint for hint in hints if not backend.is_supported(hint)]
            if len(unsupported) > len(hints) / 2:
                return "unavailable"
        return "available"

    @classmethod
    def supported_languages(cls, config: Optional[DetectorConfig] = None) -> List[str]:
        return create_backend(config=config or DetectorConfig.from_env()).supported_languages()

    @property
    def input_quota(self) -> int:
        self._check_destroyed()
        return self._input_quota

    @property
    def expected_input_languages(self) -> Tuple[str, ...]:
        self._check_destroyed()
        return self._expected_input_languages

    @property
    def backend(self) -> DetectionBackend:
        return self._backend

    def detect(self, text: str, signal: Optional[threading.Event] = None) -> List[DetectionResult]:
        """
        Detect the language(s) of `text`.

        Returns:
            Non-empty list sorted by descending confidence

        Raises:
            DetectorDestroyedError: detector was destroyed
            TypeError: text is not a str
            DetectionAbortedError: signal is set
        """
        self._check_destroyed()
        self._check_text(text)
        _check_signal(signal, "detection")

        with self._lock:
            self._input_quota = max(0, self._input_quota - len(text))

        hints = self._expected_input_languages or None
        script_result = self._backend.fast_path_script(text)
        results = self._backend.detect(text, hints)

        if script_result is None:
            return results

        if len(results) == 1 and results[0].is_undetermined:
            if self._allows(script_result.detected_language):
                logger.debug(f"No trigram evidence, using script result '{script_result.detected_language}'")
                return [script_result]
            return results

        if script_result.confidence > self._config.fast_path_boost_threshold:
            logger.debug(
                f"Boosting '{script_result.detected_language}' by script "
                f"({script_result.confidence:.2f})"
            )
            return boost_language(results, script_result, weight=self._config.fast_path_boost_weight)

        return results

    def measure_input_usage(self, text: str) -> int:
        """Quota a detect() call on `text` would consume."""
        self._check_destroyed()
        self._check_text(text)
        return len(text)

    def destroy(self) -> None:
        self._destroyed = True

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _allows(self, code: str) -> bool:
        """False only when resolvable hints exist and exclude `code`."""
        resolved = self._backend.catalog.resolve(self._expected_input_languages)
        return not resolved or any(entry.code == code for entry in resolved)

    def _check_destroyed(self) -> None:
        if self._destroyed:
            raise DetectorDestroyedError("LanguageDetector has been destroyed")

    @staticmethod
    def _check_text(text) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Input must be a string, got {type(text).__name__}")

    def __enter__(self) -> "LanguageDetector":
        self._check_destroyed()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else f"quota={self._input_quota}"
        return f"LanguageDetector(backend={self._backend.name!r}, {state})"
