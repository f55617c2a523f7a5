"""Subsequence fuzzy matching with word-boundary scoring, and cell widths."""

from __future__ import annotations

import unicodedata

SCORE_MATCH = 16
GAP_START = -3
GAP_EXTENSION = -1
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + GAP_EXTENSION
BONUS_CONSECUTIVE = -(GAP_START + GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_ZERO_WIDTH = {"\u200b", "\u200c", "\u200d", "\u2060", "\ufeff"}


def _char_class(ch: str) -> str:
    if ch.islower():
        return "lower"
    if ch.isupper():
        return "upper"
    if ch.isdigit():
        return "number"
    if ch.isalpha():
        return "letter"
    return "nonword"


def _bonus(prev: str, curr: str) -> int:
    if curr == "nonword":
        return BONUS_NON_WORD
    if prev == "nonword":
        return BONUS_BOUNDARY
    if (prev == "lower" and curr == "upper") or (prev != "number" and curr == "number"):
        return BONUS_CAMEL
    return 0


def fuzzy_indices(choice: str, pattern: str) -> tuple[int, list[int]] | None:
    """Best-scoring match of ``pattern`` as a subsequence of ``choice``.

    Matching ignores case unless the pattern holds an upper-case letter.
    Returns the score and the matched character positions, or None.
    """
    if not pattern:
        return 0, []
    case_sensitive = any(ch.isupper() for ch in pattern)

    def fold(ch: str) -> str:
        return ch if case_sensitive else ch.lower()

    text = [fold(ch) for ch in choice]
    pat = [fold(ch) for ch in pattern]

    bonuses = []
    prev_class = "nonword"
    for ch in choice:
        cls = _char_class(ch)
        bonuses.append(_bonus(prev_class, cls))
        prev_class = cls

    prev_row: dict[int, int] = {}
    back: list[dict[int, int | None]] = []
    for i, pc in enumerate(pat):
        row: dict[int, int] = {}
        links: dict[int, int | None] = {}
        for j, tc in enumerate(text):
            if tc != pc:
                continue
            if i == 0:
                row[j] = SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER
                links[j] = None
                continue
            best: int | None = None
            best_k: int | None = None
            for k, score in prev_row.items():
                if k >= j:
                    break
                if k == j - 1:
                    cand = score + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
                else:
                    gap = j - k - 1
                    cand = score + SCORE_MATCH + bonuses[j] + GAP_START + GAP_EXTENSION * (gap - 1)
                if best is None or cand > best:
                    best, best_k = cand, k
            if best is not None:
                row[j] = best
                links[j] = best_k
        if not row:
            return None
        prev_row = row
        back.append(links)

    end = max(prev_row, key=lambda j: (prev_row[j], -j))
    score = prev_row[end]
    indices: list[int] = []
    position: int | None = end
    for links in reversed(back):
        assert position is not None
        indices.append(position)
        position = links[position]
    indices.reverse()
    return score, indices


def char_width(ch: str) -> int:
    """Terminal cells taken by a character; control characters count as one."""
    if ch in _ZERO_WIDTH or "\u1160" <= ch <= "\u11ff":
        return 0
    if unicodedata.category(ch) in ("Mn", "Me"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1