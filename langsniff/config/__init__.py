from .detector_config import DetectorConfig

__all__ = ["DetectorConfig"]
