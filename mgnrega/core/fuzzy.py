"""Fuzzy matching utilities using RapidFuzz."""
from typing import List, Tuple, Optional, Sequence
from rapidfuzz import fuzz, process
from mgnrega.core.config import FUZZY_THRESHOLD
from mgnrega.core.normalization import (
    MAHARASHTRA_DISTRICTS,
    normalize_district_name,
    normalize_text,
)


def fuzzy_match(
    query: str,
    choices: Sequence[str],
    threshold: float = 0.7,
    limit: int = 5
) -> List[Tuple[str, float, int]]:
    """
    Perform fuzzy matching between query and choices.

    Uses token sort ratio and WRatio on normalized text and keeps the
    better of the two scores per choice.

    Args:
        query: Query string to match
        choices: Candidate strings
        threshold: Minimum similarity score (0-1)
        limit: Maximum number of results to return

    Returns:
        List of tuples (matched_string, score, index) sorted by score descending
    """
    if not query or not choices:
        return []

    normalized_query = normalize_text(query)
    normalized_choices = [normalize_text(choice) for choice in choices]
    cutoff = threshold * 100

    combined = {}
    for scorer in (fuzz.token_sort_ratio, fuzz.WRatio):
        results = process.extract(
            normalized_query,
            normalized_choices,
            scorer=scorer,
            limit=limit,
            score_cutoff=cutoff
        )
        for _, score, idx in results:
            score_normalized = score / 100.0
            if idx not in combined or combined[idx][1] < score_normalized:
                combined[idx] = (choices[idx], score_normalized, idx)

    # Ties keep the order of the choices
    sorted_results = sorted(combined.values(), key=lambda x: (-x[1], x[2]))

    return sorted_results[:limit]


def best_match(
    query: str,
    choices: Sequence[str],
    threshold: float = 0.7
) -> Optional[Tuple[str, float, int]]:
    """
    Get the best fuzzy match for a query.

    Args:
        query: Query string to match
        choices: Candidate strings
        threshold: Minimum similarity score (0-1)

    Returns:
        Tuple (matched_string, score, index) or None if no match above threshold
    """
    matches = fuzzy_match(query, choices, threshold, limit=1)
    return matches[0] if matches else None


def match_confidence(score: float) -> str:
    """Bucket a similarity score into high / medium / low confidence."""
    if score >= 0.9:
        return "high"
    if score >= 0.75:
        return "medium"
    return "low"


def reconcile_district_name(
    raw: Optional[str],
    choices: Sequence[str] = MAHARASHTRA_DISTRICTS,
    threshold: float = FUZZY_THRESHOLD
) -> Optional[str]:
    """
    Map a free-form district name onto one of the known district names.

    The correction table is tried first; fuzzy matching only handles
    names it does not know, such as misspellings.

    Args:
        raw: District name as typed or returned by a provider
        choices: Known canonical district names
        threshold: Minimum similarity score (0-1)

    Returns:
        Matching entry of choices, or None
    """
    normalized = normalize_district_name(raw)
    if normalized is None:
        return None

    for choice in choices:
        if choice.upper() == normalized:
            return choice

    match = best_match(normalized, choices, threshold)
    return match[0] if match else None
