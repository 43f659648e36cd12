"""
Confidence normalization and boosting.

Turns raw similarity scores into a probability-like ranked list using
temperature-scaled exponential weighting.
"""

import math
from typing import List, Sequence, Tuple

from langsniff.schemas import DetectionResult


class ConfidenceNormalizer:
    """Converts raw scores into ranked DetectionResults."""

    def __init__(self, temperature: float = 10.0, min_confidence: float = 0.001, max_results: int = 10):
        """
        Args:
            temperature: Sharpness of separation between candidates (the K in exp(score * K))
            min_confidence: Results at or below this confidence are dropped
            max_results: Maximum number of results returned
        """
        self.temperature = temperature
        self.min_confidence = min_confidence
        self.max_results = max_results

    def normalize(self, scored: Sequence[Tuple[str, float]]) -> List[DetectionResult]:
        """
        Normalize (code, score) pairs into a confidence-descending list.

        The denominator sums over every scored candidate, including those later
        dropped. Always returns at least one entry: the undetermined sentinel
        when nothing survives.
        """
        if not scored:
            return [DetectionResult.undetermined()]

        # Exponents are shifted by the max score; ratios are unchanged.
        top = max(score for _, score in scored)
        weights = [(code, math.exp((score - top) * self.temperature)) for code, score in scored]
        total = sum(weight for _, weight in weights)

        results = [
            DetectionResult(detected_language=code, confidence=weight / total if total > 0 else 0.0)
            for code, weight in weights
        ]
        results.sort(key=lambda r: r.confidence, reverse=True)

        kept = [r for r in results if r.confidence > self.min_confidence][:self.max_results]
        if not kept:
            return [DetectionResult.undetermined()]
        return kept


def boost_language(
    results: Sequence[DetectionResult],
    boost: DetectionResult,
    weight: float = 0.3,
) -> List[DetectionResult]:
    """
    Raise the entry matching `boost` and renormalize the list to sum to 1.

    The matching entry gains `boost.confidence * weight`, capped at 1. Lists
    without the boosted language come back unchanged.
    """
    if not any(r.detected_language == boost.detected_language for r in results):
        return list(results)

    boosted = [
        (r.detected_language, min(1.0, r.confidence + boost.confidence * weight))
        if r.detected_language == boost.detected_language
        else (r.detected_language, r.confidence)
        for r in results
    ]
    total = sum(confidence for _, confidence in boosted)
    renormalized = [
        DetectionResult(detected_language=code, confidence=confidence / total if total > 0 else 0.0)
        for code, confidence in boosted
    ]
    renormalized.sort(key=lambda r: r.confidence, reverse=True)
    return renormalized
