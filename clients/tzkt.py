"""Token catalog client for the TzKT Tezos indexer."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from nft.models import CatalogEntry
from utils import bytes_to_str


class TzktClient:
    """Reads token ids and metadata locators from a contract's ``token_metadata`` big map."""

    def __init__(
        self,
        base_url: str = "https://api.tzkt.io/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.base = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def token_metadata_url(self, contract: str) -> str:
        return f"{self.base}/contracts/{contract}/bigmaps/token_metadata/keys"

    @staticmethod
    def parse_record(record: Dict[str, Any]) -> CatalogEntry:
        """Turn one big map value into a :class:`CatalogEntry`."""
        token_info = record["token_info"]
        return CatalogEntry(token_id=int(record["token_id"]), metadata_uri=bytes_to_str(token_info[""]))

    def fetch_token_catalog(self, contract: str, limit: int = 10000) -> List[CatalogEntry]:
        """Return every active token of ``contract`` sorted by id ascending."""
        url = self.token_metadata_url(contract)
        params = {"active": "true", "select": "value", "limit": limit}
        self.logger.info("Getting token info for all tokens of %s from TzKT", contract)
        resp = self.session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        records = resp.json()

        entries: Dict[int, CatalogEntry] = {}
        for record in records:
            entry = self.parse_record(record)
            if entry.token_id in entries:
                self.logger.warning("Duplicate token id %s in TzKT response, keeping first", entry.token_id)
                continue
            entries[entry.token_id] = entry
        self.logger.info("Discovered %d tokens", len(entries))
        return [entries[token_id] for token_id in sorted(entries)]
