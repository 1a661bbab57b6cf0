from __future__ import annotations

from typing import Callable, Iterable, Optional

from fuzzywuzzy import fuzz


# score(query, candidate) -> distance in [0.0, 1.0], 0.0 meaning identical
Scorer = Callable[[str, str], float]


def levenshtein_distance(query: str, candidate: str) -> float:
    return 1.0 - fuzz.ratio(query, candidate) / 100.0


class FuzzyMatcher:
    """Finds the closest known prompt within a distance threshold.

    The default threshold of 0.4 only accepts moderately close prompts;
    lower it to be stricter.
    """

    def __init__(self, threshold: float = 0.4, scorer: Scorer = levenshtein_distance) -> None:
        self.threshold = threshold
        self.scorer = scorer

    def find(self, query: str, candidates: Iterable[str]) -> Optional[str]:
        best: Optional[str] = None
        best_distance = None
        for candidate in candidates:
            distance = self.scorer(query, candidate)
            if distance > self.threshold:
                continue
            # strict comparison keeps the earliest candidate on ties
            if best_distance is None or distance < best_distance:
                best, best_distance = candidate, distance
        return best
