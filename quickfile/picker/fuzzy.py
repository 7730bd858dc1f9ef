"""Label ranking for picker queries.

Entry labels are bare child names, so word starts are marked by separators
and camelCase humps rather than by path slashes.
"""

from __future__ import annotations

MATCH_BONUS = 16
RUN_BONUS_STEP = 4
RUN_BONUS_CAP = 16
GAP_PENALTY_STEP = 2
GAP_PENALTY_CAP = 40
WORD_START_BONUS = 24
WORD_SEPARATORS = frozenset("_-. ")


def _is_word_start(label: str, idx: int) -> bool:
    if idx == 0:
        return True
    before, here = label[idx - 1], label[idx]
    return before in WORD_SEPARATORS or (before.islower() and here.isupper())


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``query`` as an in-order subsequence of ``candidate``.

    Contiguous runs and word starts raise the score, gaps lower it. Returns
    ``None`` when some query character is missing.
    """
    if not query:
        return 0
    folded = candidate.casefold()
    # casefold() may expand characters; fall back to folded text for humps.
    shape = candidate if len(folded) == len(candidate) else folded

    score = 0
    last = -1
    streak = 0
    for ch in query.casefold():
        pos = folded.find(ch, last + 1)
        if pos < 0:
            return None
        if pos == last + 1:
            streak += 1
            score += MATCH_BONUS + min(RUN_BONUS_CAP, streak * RUN_BONUS_STEP)
        else:
            streak = 0
            score -= min(GAP_PENALTY_CAP, (pos - last - 1) * GAP_PENALTY_STEP)
        if _is_word_start(shape, pos):
            score += WORD_START_BONUS
        last = pos

    return score - len(folded) // 5


def substring_index(query: str, candidate: str) -> int | None:
    """Case-insensitive position of ``query`` in ``candidate``, or ``None``."""
    pos = candidate.casefold().find(query.casefold())
    return pos if pos >= 0 else None


def fuzzy_match_labels(query: str, labels: list[str], limit: int = 200) -> list[tuple[int, str, int]]:
    """Rank ``labels`` against ``query`` as ``(index, label, score)`` tuples.

    An empty query keeps every label in its original order. Otherwise
    substring hits win outright; subsequence scoring is the fallback when no
    label contains the query verbatim.
    """
    cap = max(1, limit)
    if not query:
        return [(idx, label, 0) for idx, label in enumerate(labels[:cap])]

    hits: list[tuple[int, int, str, int]] = []
    for idx, label in enumerate(labels):
        pos = substring_index(query, label)
        if pos is not None:
            hits.append((pos, len(label), label, idx))
    if hits:
        hits.sort(key=lambda hit: hit[:3])
        return [(idx, label, 10_000 - pos * 50 - length) for pos, length, label, idx in hits[:cap]]

    ranked: list[tuple[int, int, str, int]] = []
    for idx, label in enumerate(labels):
        score = fuzzy_score(query, label)
        if score is not None:
            ranked.append((score, len(label), label, idx))
    ranked.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(idx, label, score) for score, _length, label, idx in ranked[:cap]]


def exact_match_labels(query: str, labels: list[str], limit: int = 200) -> list[tuple[int, str, int]]:
    """Case-insensitive substring filter that keeps listing order."""
    matches = [
        (idx, label, 0)
        for idx, label in enumerate(labels)
        if substring_index(query, label) is not None
    ]
    return matches[: max(1, limit)]


__all__ = ["fuzzy_score", "substring_index", "fuzzy_match_labels", "exact_match_labels"]
