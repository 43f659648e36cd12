"""
Trigram similarity scoring against language profiles.

Selects candidate profiles (expected-language hints, then a dominant-script
filter) and scores each one by rank-weighted trigram overlap with the text,
boosted when the profile is written in a script present in the text.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from langsniff.schemas import LanguageProfile, ScriptInfo
from .loader import BaseCatalog


logger = logging.getLogger(__name__)


class Scorer:
    """Scores text trigram distributions against catalog profiles."""

    def __init__(
        self,
        catalog: BaseCatalog,
        script_filter_ratio: float = 0.5,
        script_boost: float = 0.5,
    ):
        """
        Initialize scorer.

        Args:
            catalog: Profile catalog providing candidates
            script_filter_ratio: Top-script share above which candidates are
                restricted to profiles written in that script
            script_boost: Multiplier weight applied to the matching script ratio
        """
        self.catalog = catalog
        self.script_filter_ratio = script_filter_ratio
        self.script_boost = script_boost

    def select_candidates(
        self,
        scripts: Sequence[ScriptInfo],
        hints: Optional[Iterable] = None,
    ) -> List[LanguageProfile]:
        """
        Candidate profiles for one detection call.

        Hints narrow the catalog when at least one resolves; otherwise the full
        catalog is used. A dominant script then filters the candidates unless
        no candidate is written in it.
        """
        candidates = self.catalog.resolve(hints)
        if not candidates:
            candidates = list(self.catalog.entries)

        if scripts and scripts[0].ratio > self.script_filter_ratio:
            dominant = scripts[0].script
            filtered = self.catalog.filter_by_script(candidates, dominant)
            if filtered:
                candidates = filtered
            else:
                logger.debug(f"No candidate written in dominant script '{dominant}', skipping script filter")

        return candidates

    def score(self, text_trigrams: Mapping[str, int], profile: LanguageProfile, total: Optional[int] = None) -> float:
        """
        Rank-weighted trigram overlap in [0, 1).

        Each shared trigram contributes its share of the text's trigrams times
        `1 - rank / len(profile.trigrams)`.
        """
        if total is None:
            total = sum(text_trigrams.values())
        if total == 0:
            return 0.0

        rank = profile.rank
        length = len(profile.trigrams)
        score = 0.0
        for trigram, count in text_trigrams.items():
            index = rank.get(trigram)
            if index is not None:
                score += (count / total) * (1 - index / length)
        return score

    def apply_script_boost(self, score: float, profile: LanguageProfile, scripts: Sequence[ScriptInfo]) -> float:
        """Boost by the first (most frequent) detected script the profile is written in."""
        for info in scripts:
            if info.script in profile.scripts:
                return score * (1 + info.ratio * self.script_boost)
        return score

    def score_candidates(
        self,
        text_trigrams: Mapping[str, int],
        scripts: Sequence[ScriptInfo],
        candidates: Sequence[LanguageProfile],
    ) -> List[Tuple[str, float]]:
        """
        Score every candidate.

        Returns:
            (language code, raw score) pairs sorted by score descending; ties
            keep catalog order
        """
        total = sum(text_trigrams.values())
        scored = []
        for profile in candidates:
            raw = self.score(text_trigrams, profile, total)
            scored.append((profile.code, self.apply_script_boost(raw, profile, scripts)))

        scored.sort(key=lambda item: item[1], reverse=True)
        return scored
