"""CSV exports of the ranked collection."""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Tuple

import pandas as pd

from .aggregator import FrequencyTable
from .models import RankedToken

logger = logging.getLogger(__name__)

RANK_COLUMNS = ["rank", "id", "score"]
ID_COLUMNS = ["id", "rank", "score"]
ATTRIBUTE_COLUMNS = ["name", "value", "count", "score", "percentage"]


def format_token_id(token_id: int, padding: int = 4) -> str:
    """Zero-pad ``token_id`` to ``padding`` digits; ``padding=0`` leaves it unpadded."""
    if padding < 0:
        raise ValueError(f"padding must be >= 0, got {padding}")
    return str(token_id).zfill(padding)


def _ranked_frame(ranked: Iterable[RankedToken], padding: int) -> pd.DataFrame:
    rows = [
        {"rank": entry.rank, "id": format_token_id(entry.token.id, padding), "score": entry.token.score}
        for entry in ranked
    ]
    df = pd.DataFrame(rows, columns=RANK_COLUMNS)
    return df.astype({"rank": "int64", "id": str, "score": "float64"})


def _write_csv(df: pd.DataFrame, path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    df.to_csv(path, index=False, lineterminator="\n")
    logger.info("Wrote %d rows to %s", len(df), path)


def write_rank_report(ranked: Iterable[RankedToken], path: str, padding: int = 4) -> None:
    """Write ``rank,id,score`` rows in the given (score) order."""
    _write_csv(_ranked_frame(ranked, padding)[RANK_COLUMNS], path)


def write_id_report(ranked_by_id: Iterable[RankedToken], path: str, padding: int = 4) -> None:
    """Write ``id,rank,score`` rows in the given (id) order."""
    _write_csv(_ranked_frame(ranked_by_id, padding)[ID_COLUMNS], path)


def write_attribute_report(
    table: FrequencyTable,
    scores: Dict[Tuple[str, str], float],
    percentages: Dict[Tuple[str, str], float],
    path: str,
) -> None:
    """Write one row per trait with its count, rarity score and share."""
    rows = [
        {
            "name": name,
            "value": value,
            "count": count,
            "score": scores[(name, value)],
            "percentage": percentages[(name, value)],
        }
        for name, value, count in table.pairs()
    ]
    _write_csv(pd.DataFrame(rows, columns=ATTRIBUTE_COLUMNS), path)
