"""On-disk cache of resolved token metadata documents."""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from .models import CatalogEntry

StalePredicate = Callable[[Dict[str, Any]], bool]


class MetadataResolver(Protocol):
    def fetch_metadata(self, uri: str) -> Dict[str, Any]:
        ...


def is_unrevealed_placeholder(document: Dict[str, Any]) -> bool:
    """Match the pre-hatch placeholder trait set cached before the reveal.

    One-time migration rule: such documents carry a single
    ``Vital Signs: Normal`` attribute instead of the token's real traits.
    """
    attributes = document.get("attributes") or []
    return (
        len(attributes) == 1
        and attributes[0].get("name") == "Vital Signs"
        and attributes[0].get("value") == "Normal"
    )


class MetadataCache:
    """One JSON file per token; existence of the file is the only hit signal."""

    def __init__(
        self,
        directory: str,
        resolver: MetadataResolver,
        prefix: str = "gogo",
        stale_predicates: Iterable[StalePredicate] = (is_unrevealed_placeholder,),
        refetch_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.directory = directory
        self.resolver = resolver
        self.prefix = prefix
        self.stale_predicates = tuple(stale_predicates)
        self.refetch_delay = refetch_delay
        self.sleep = sleep
        self.logger = logging.getLogger(self.__class__.__name__)

    def path_for(self, token_id: int) -> str:
        return os.path.join(self.directory, f"{self.prefix}_{token_id}.json")

    def load(self, token_id: int) -> Optional[Dict[str, Any]]:
        """Return the cached document for ``token_id``, or ``None`` on a miss."""
        path = self.path_for(token_id)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def store(self, token_id: int, document: Dict[str, Any]) -> None:
        path = self.path_for(token_id)
        if os.path.exists(path):
            self.logger.info("Skipping. Cached token metadata exists already at %s", path)
            return
        os.makedirs(self.directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f)

    def evict(self, token_id: int) -> None:
        os.remove(self.path_for(token_id))

    def is_stale(self, document: Dict[str, Any]) -> bool:
        return any(predicate(document) for predicate in self.stale_predicates)

    def load_or_fetch(self, entry: CatalogEntry) -> Dict[str, Any]:
        """Return the token's metadata, resolving and caching it on a miss.

        A stale cached document is deleted and re-resolved after
        ``refetch_delay`` seconds.
        """
        document = self.load(entry.token_id)
        if document is None:
            self.logger.debug("Retrieving token metadata from IPFS for Token ID %s", entry.token_id)
            document = self.resolver.fetch_metadata(entry.metadata_uri)
            self.store(entry.token_id, document)
            return document

        self.logger.debug("Loading token metadata from cache for Token ID %s", entry.token_id)
        if not self.is_stale(document):
            return document

        self.logger.warning(
            "Cache contains stale data for Token ID %s: %s", entry.token_id, document.get("attributes")
        )
        self.evict(entry.token_id)
        self.sleep(self.refetch_delay)
        self.logger.info("Refetching token metadata from IPFS for Token ID %s", entry.token_id)
        document = self.resolver.fetch_metadata(entry.metadata_uri)
        self.store(entry.token_id, document)
        return document
