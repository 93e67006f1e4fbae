"""Tally trait frequencies across a collection."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from .models import Attribute, Token

logger = logging.getLogger(__name__)


class FrequencyTable:
    """Read-only view of trait counts, produced by :meth:`AttributeAggregator.finalize`.

    Names and values keep the order in which they were first seen.
    """

    def __init__(
        self,
        names: List[str],
        values: Dict[str, List[str]],
        counts: Dict[str, Dict[str, int]],
        token_count: int,
    ) -> None:
        self._names = tuple(names)
        self._values = MappingProxyType({name: tuple(vals) for name, vals in values.items()})
        self._counts = MappingProxyType(
            {name: MappingProxyType(dict(by_value)) for name, by_value in counts.items()}
        )
        self.token_count = token_count

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def counts(self) -> Mapping[str, Mapping[str, int]]:
        return self._counts

    def values(self, name: str) -> Tuple[str, ...]:
        return self._values.get(name, ())

    def count(self, name: str, value: str) -> int:
        """Return how many tokens carry ``(name, value)``, or 0 if never seen."""
        return self._counts.get(name, {}).get(value, 0)

    def pairs(self) -> Iterator[Tuple[str, str, int]]:
        for name in self._names:
            for value in self._values[name]:
                yield name, value, self._counts[name][value]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        name, value = key
        return self.count(name, value) > 0

    def __len__(self) -> int:
        return sum(len(vals) for vals in self._values.values())


class AttributeAggregator:
    """Append-only accumulator of trait counts.

    Not thread-safe: attributes are recorded one token at a time.
    """

    def __init__(self) -> None:
        self.names: List[str] = []
        self.values: Dict[str, List[str]] = {}
        self.counts: Dict[str, Dict[str, int]] = {}
        self.token_count = 0
        self._finalized = False

    def record(self, token: Token, attribute: Attribute) -> None:
        """Count one attribute carried by ``token``."""
        if self._finalized:
            raise RuntimeError(
                f"Cannot record attribute {attribute.key} for token {token.id}: aggregation is finalized"
            )
        name, value = attribute.name, attribute.value
        if name not in self.values:
            self.names.append(name)
            self.values[name] = []
            self.counts[name] = {}
        if value not in self.counts[name]:
            self.values[name].append(value)
            self.counts[name][value] = 0
        self.counts[name][value] += 1

    def record_token(self, token: Token) -> None:
        for attribute in token.attributes:
            self.record(token, attribute)
        self.token_count += 1

    def finalize(self) -> FrequencyTable:
        """Close the aggregation and return the read-only frequency table."""
        self._finalized = True
        table = FrequencyTable(self.names, self.values, self.counts, self.token_count)
        logger.info(
            "Aggregated %d trait values over %d trait types from %d tokens",
            len(table),
            len(table.names),
            table.token_count,
        )
        return table
