"""
Tests for the LanguageDetector lifecycle wrapper.
"""

import threading

import pytest
import sys
from pathlib import Path

# Add package to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from langsniff import (
    CatalogLoadError,
    CreateMonitor,
    DetectionAbortedError,
    DetectionResult,
    DetectorConfig,
    DetectorDestroyedError,
    DownloadProgress,
    LanguageDetector,
    detect,
)
from langsniff.backends import DetectionBackend
from langsniff.engine import BaseCatalog
from langsniff.schemas import LanguageEntry


class FakeCatalog(BaseCatalog):
    def __init__(self, codes):
        super().__init__()
        self._index(LanguageEntry(code=code, name=code.upper(), scripts=['Latin']) for code in codes)


class FakeBackend(DetectionBackend):
    """Backend returning canned results so merge policy is observable."""

    name = "fake"

    def __init__(self, results, script_result=None, codes=('aa', 'bb', 'cc')):
        self.results = results
        self.script_result = script_result
        self._catalog = FakeCatalog(codes)
        self.calls = []

    @property
    def catalog(self):
        return self._catalog

    def detect(self, text, expected_languages=None):
        self.calls.append((text, expected_languages))
        return list(self.results)

    def fast_path_script(self, text):
        return self.script_result


def result(code, confidence):
    return DetectionResult(detected_language=code, confidence=confidence)


@pytest.fixture
def config():
    return DetectorConfig()


@pytest.fixture
def detector(config):
    return LanguageDetector.create(config=config)


class TestCreate:

    def test_create_defaults(self, detector):
        assert detector.input_quota == 10000
        assert detector.expected_input_languages == ()
        assert detector.backend.name == "trigram"

    def test_expected_languages_kept_as_given(self, config):
        detector = LanguageDetector.create(expected_input_languages=['en-US', 'zh'], config=config)
        assert detector.expected_input_languages == ('en-US', 'zh')

    def test_single_string_hint(self, config):
        detector = LanguageDetector.create(expected_input_languages='fr', config=config)
        assert detector.expected_input_languages == ('fr',)

    def test_aborted_signal(self, config):
        signal = threading.Event()
        signal.set()
        with pytest.raises(DetectionAbortedError):
            LanguageDetector.create(signal=signal, config=config)

    def test_unset_signal(self, config):
        assert LanguageDetector.create(signal=threading.Event(), config=config) is not None

    def test_monitor_receives_download_progress(self, config):
        events = []

        def monitor(m):
            assert isinstance(m, CreateMonitor)
            m.add_event_listener("downloadprogress", events.append)

        LanguageDetector.create(monitor=monitor, config=config)
        assert events == [DownloadProgress(loaded=1, total=1)]

    def test_monitor_rejects_non_callable(self):
        with pytest.raises(TypeError):
            CreateMonitor().add_event_listener("downloadprogress", "not callable")

    def test_removed_listener_not_called(self):
        events = []
        monitor = CreateMonitor()
        monitor.add_event_listener("downloadprogress", events.append)
        monitor.remove_event_listener("downloadprogress", events.append)
        monitor.dispatch_event("downloadprogress", DownloadProgress(loaded=1, total=1))
        assert events == []

    def test_unknown_backend(self, config):
        with pytest.raises(ValueError):
            LanguageDetector.create(backend="nope", config=config)

    def test_catalog_failure_surfaces(self, tmp_path):
        config = DetectorConfig(profile_dir=str(tmp_path / "missing"))
        with pytest.raises(CatalogLoadError):
            LanguageDetector.create(config=config)

    def test_backend_instance(self):
        backend = FakeBackend([result('aa', 1.0)])
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        assert detector.backend is backend


class TestAvailability:

    @pytest.mark.parametrize("hints,expected", [
        (None, "available"),
        ([], "available"),
        (['en', 'fr'], "available"),
        (['en-US', 'zh-Hans'], "available"),
        (['xx', 'en'], "available"),
        (['xx', 'yy', 'en'], "unavailable"),
        (['xx'], "unavailable"),
    ])
    def test_availability(self, hints, expected):
        assert LanguageDetector.availability(hints, config=DetectorConfig()) == expected

    def test_supported_languages(self):
        languages = LanguageDetector.supported_languages(config=DetectorConfig())
        assert languages == sorted(languages)
        assert {'en', 'fr', 'zh', 'ja'} <= set(languages)


class TestDetect:

    def test_detects_french(self, detector):
        results = detector.detect("Bonjour le monde, c'est une belle journée aujourd'hui.")
        assert results[0].detected_language == 'fr'

    def test_quota_decrements(self, detector):
        detector.detect("Hello world")
        assert detector.input_quota == 10000 - len("Hello world")

    def test_quota_floored_at_zero(self):
        detector = LanguageDetector.create(config=DetectorConfig(input_quota=5))
        detector.detect("Hello world")
        assert detector.input_quota == 0
        detector.detect("again")
        assert detector.input_quota == 0

    def test_non_string_rejected(self, detector):
        with pytest.raises(TypeError):
            detector.detect(123)
        with pytest.raises(TypeError):
            detector.detect(None)
        with pytest.raises(TypeError):
            detector.measure_input_usage(b"bytes")

    def test_abort_signal(self, detector):
        signal = threading.Event()
        signal.set()
        with pytest.raises(DetectionAbortedError):
            detector.detect("Hello world", signal=signal)
        assert detector.input_quota == 10000

    def test_measure_input_usage(self, detector):
        assert detector.measure_input_usage("Hello") == 5
        assert detector.measure_input_usage("") == 0
        assert detector.input_quota == 10000

    def test_empty_text(self, detector):
        assert detector.detect("") == [DetectionResult.undetermined()]

    def test_hints_passed_to_backend(self):
        backend = FakeBackend([result('aa', 1.0)])
        detector = LanguageDetector.create(expected_input_languages=['aa'], backend=backend, config=DetectorConfig())
        detector.detect("text")
        assert backend.calls == [("text", ('aa',))]

    def test_no_hints_passed_as_none(self):
        backend = FakeBackend([result('aa', 1.0)])
        LanguageDetector.create(backend=backend, config=DetectorConfig()).detect("text")
        assert backend.calls == [("text", None)]

    def test_concurrent_quota(self, detector):
        def worker():
            for _ in range(10):
                detector.detect("abcde")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert detector.input_quota == 10000 - 8 * 10 * 5


class TestScriptMerge:
    """Merge of the script fast path into backend results."""

    def test_high_confidence_script_boosts(self):
        backend = FakeBackend([result('aa', 0.55), result('bb', 0.45)], script_result=result('bb', 1.0))
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        results = detector.detect("text")
        assert [r.detected_language for r in results] == ['bb', 'aa']
        assert results[0].confidence == pytest.approx(0.75 / 1.3)
        assert sum(r.confidence for r in results) == pytest.approx(1.0)

    def test_threshold_is_exclusive(self):
        backend = FakeBackend([result('aa', 0.55), result('bb', 0.45)], script_result=result('bb', 0.9))
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        assert detector.detect("text") == backend.results

    def test_script_language_absent_from_results(self):
        backend = FakeBackend([result('aa', 1.0)], script_result=result('cc', 1.0))
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        assert detector.detect("text") == [result('aa', 1.0)]

    def test_undetermined_falls_back_to_script(self):
        backend = FakeBackend([DetectionResult.undetermined()], script_result=result('cc', 0.8))
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        assert detector.detect("text") == [result('cc', 0.8)]

    def test_undetermined_respects_hints(self):
        backend = FakeBackend([DetectionResult.undetermined()], script_result=result('cc', 1.0))
        detector = LanguageDetector.create(expected_input_languages=['aa'], backend=backend, config=DetectorConfig())
        assert detector.detect("text") == [DetectionResult.undetermined()]

    def test_undetermined_without_script(self):
        backend = FakeBackend([DetectionResult.undetermined()])
        detector = LanguageDetector.create(backend=backend, config=DetectorConfig())
        assert detector.detect("text") == [DetectionResult.undetermined()]

    def test_chinese_tie_broken_by_script(self, detector):
        text = "敏捷的棕色狐狸跳过了懒惰的狗，然后跑进了森林。"
        assert {r.detected_language for r in detect(text)} == {'ja', 'zh'}
        results = detector.detect(text)
        assert [r.detected_language for r in results] == ['zh', 'ja']
        assert results[0].confidence == pytest.approx(0.8 / 1.3)

    def test_short_han_via_script(self, detector):
        # Too short for a trigram
        assert detect("中国") == [DetectionResult.undetermined()]
        assert detector.detect("中国") == [result('zh', 1.0)]

    def test_short_han_with_other_hint(self):
        detector = LanguageDetector.create(expected_input_languages=['en'], config=DetectorConfig())
        assert detector.detect("中国") == [DetectionResult.undetermined()]

    def test_chinese_sentence_with_other_hint(self):
        detector = LanguageDetector.create(expected_input_languages=['en'], config=DetectorConfig())
        text = "敏捷的棕色狐狸跳过了懒惰的狗，然后跑进了森林。"
        assert detector.detect(text) == [result('en', 1.0)]

    @pytest.mark.parametrize("text", [
        "今日はいい天気ですね",
        "これは日本語の文章です。",
    ])
    def test_japanese_sentence(self, detector, text):
        assert detect(text)[0].detected_language == 'ja'
        assert detector.detect(text)[0].detected_language == 'ja'

    def test_hebrew_boosted(self, detector):
        text = "השועל החום המהיר קופץ מעל הכלב העצלן ורץ אל היער."
        plain = detect(text)
        boosted = detector.detect(text)
        assert boosted[0].detected_language == 'he'
        assert boosted[0].confidence > plain[0].confidence


class TestDestroy:

    def test_destroyed_detector_raises(self, detector):
        detector.destroy()
        assert detector.destroyed
        with pytest.raises(DetectorDestroyedError):
            detector.detect("Hello")
        with pytest.raises(DetectorDestroyedError):
            detector.measure_input_usage("Hello")
        with pytest.raises(DetectorDestroyedError):
            detector.input_quota
        with pytest.raises(DetectorDestroyedError):
            detector.expected_input_languages

    def test_destroy_checked_before_type(self, detector):
        detector.destroy()
        with pytest.raises(DetectorDestroyedError):
            detector.detect(123)

    def test_destroy_is_idempotent(self, detector):
        detector.destroy()
        detector.destroy()
        assert detector.destroyed

    def test_context_manager(self, config):
        with LanguageDetector.create(config=config) as detector:
            assert detector.detect("Hello world")[0].detected_language == 'en'
        with pytest.raises(DetectorDestroyedError):
            detector.detect("Hello world")

    def test_repr(self, detector):
        assert "quota=10000" in repr(detector)
        detector.destroy()
        assert "destroyed" in repr(detector)
