"""Calculate rarity scores for NFTs within a collection."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from .aggregator import FrequencyTable
from .models import Token

logger = logging.getLogger(__name__)

TraitKey = Tuple[str, str]


class AttributeNotAggregatedError(KeyError):
    """Raised when a token carries a trait absent from the score table."""

    def __init__(self, token_id: int, key: TraitKey) -> None:
        super().__init__(key)
        self.token_id = token_id
        self.key = key

    def __str__(self) -> str:
        name, value = self.key
        return f"Attribute {name!r}={value!r} of token {self.token_id} was not aggregated before scoring"


def _check_total(collection_total: int) -> None:
    if collection_total <= 0:
        raise ValueError(f"collection_total must be positive, got {collection_total}")


def compute_scores(table: FrequencyTable, collection_total: int) -> Dict[TraitKey, float]:
    """Score every trait as ``collection_total / count``.

    ``collection_total`` is the nominal size of the collection, not the number
    of tokens that were actually resolved.
    """
    _check_total(collection_total)
    return {(name, value): collection_total / count for name, value, count in table.pairs()}


def compute_percentages(table: FrequencyTable, collection_total: int) -> Dict[TraitKey, float]:
    """Share of the collection carrying each trait, ``count / collection_total``."""
    _check_total(collection_total)
    return {(name, value): count / collection_total for name, value, count in table.pairs()}


def compute_token_score(token: Token, scores: Dict[TraitKey, float]) -> float:
    """Sum the scores of every trait carried by ``token``."""
    score = 0.0
    for attribute in token.attributes:
        try:
            score += scores[attribute.key]
        except KeyError:
            raise AttributeNotAggregatedError(token.id, attribute.key) from None
    return score


def score_tokens(tokens: Iterable[Token], scores: Dict[TraitKey, float]) -> None:
    """Assign ``score`` on every token."""
    count = 0
    for token in tokens:
        token.score = compute_token_score(token, scores)
        count += 1
    logger.info("Computed rarity scores for %d tokens", count)
