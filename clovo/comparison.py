"""
clovo.comparison

Password similarity for change policies:
- edit_distance(a, b): Levenshtein distance with unit costs
- compare_passwords(a, b): SimilarityResult with score, distance and overlap counts
- are_passwords_too_similar(old, new, threshold)
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional

DEFAULT_SIMILARITY_THRESHOLD = 0.7


@dataclass(frozen=True)
class SimilarityResult:
    similarity_score: float = 0.0  # 0.0 to 1.0
    edit_distance: int = 0
    is_similar: bool = False
    common_chars: int = 0
    common_positions: int = 0


def edit_distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Levenshtein distance. Keeps only the previous row of the DP table,
    where row i column j holds the distance between a[:i] and b[:j].
    Returns -1 if either input is None.
    """
    if a is None or b is None:
        return -1
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        row = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                row[j] = prev[j - 1]
            else:
                row[j] = min(prev[j], row[j - 1], prev[j - 1]) + 1
        prev = row
    return prev[-1]


def compare_passwords(
    a: Optional[str],
    b: Optional[str],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> SimilarityResult:
    if a is None or b is None:
        return SimilarityResult()

    max_len = max(len(a), len(b))
    if max_len == 0:
        return SimilarityResult(similarity_score=1.0, is_similar=True)

    distance = edit_distance(a, b)
    score = min(1.0, max(0.0, 1.0 - distance / max_len))

    # multiset intersection
    common_chars = sum((Counter(a) & Counter(b)).values())
    common_positions = sum(1 for x, y in zip(a, b) if x == y)

    return SimilarityResult(
        similarity_score=score,
        edit_distance=distance,
        is_similar=score > threshold,
        common_chars=common_chars,
        common_positions=common_positions,
    )


def are_passwords_too_similar(old: Optional[str], new: Optional[str], threshold: float) -> bool:
    if old is None or new is None:
        return False
    return compare_passwords(old, new).similarity_score > threshold
