"""Compatibility score shown on discovery cards."""

TRAVEL_PREFERENCES_WEIGHT = 70
BUDGET_PREFERENCE_WEIGHT = 30
MAX_SCORE = 100
MIN_POPULATED_SCORE = 40


def _is_populated(profile):
    return bool(profile.travel_preferences) or profile.has_answered_questions


def calculate_match_percentage(viewer, candidate):
    """
    Score how well candidate fits viewer, from 0 to 100.

    Shared travel preferences (Jaccard similarity) are worth up to 70 points
    and an identical budget preference 30. Candidates who filled in any
    preferences or profile questions never score below 40.
    """
    score = 0
    viewer_prefs = set(viewer.travel_preferences or [])
    candidate_prefs = set(candidate.travel_preferences or [])
    union = viewer_prefs | candidate_prefs
    if union:
        score += len(viewer_prefs & candidate_prefs) / len(union) * TRAVEL_PREFERENCES_WEIGHT

    if viewer.budget_preference and viewer.budget_preference == candidate.budget_preference:
        score += BUDGET_PREFERENCE_WEIGHT

    # halves round up
    final = int(min(score, MAX_SCORE) + 0.5)
    if _is_populated(candidate):
        return max(final, MIN_POPULATED_SCORE)
    return final
