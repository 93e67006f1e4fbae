"""Order scored tokens."""

from __future__ import annotations

from typing import Iterable, List

from .models import RankedToken, Token


def rank_by_score(tokens: Iterable[Token]) -> List[RankedToken]:
    """Sort by score descending; equal scores are ordered by token id ascending."""
    ordered = sorted(tokens, key=lambda token: (-token.score, token.id))
    return [RankedToken(rank=position, token=token) for position, token in enumerate(ordered, start=1)]


def rank_by_id(ranked: Iterable[RankedToken]) -> List[RankedToken]:
    """Re-order an already ranked sequence by token id ascending, keeping ranks."""
    return sorted(ranked, key=lambda entry: entry.token.id)
