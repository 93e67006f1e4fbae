"""Resolve token metadata documents through an IPFS HTTP gateway."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from utils import ipfs_to_gateway


class IPFSClient:
    def __init__(
        self,
        gateway_url: str = "https://ipfs.io/ipfs",
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.gateway_url = gateway_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def gateway_url_for(self, uri: str) -> str:
        return ipfs_to_gateway(uri, self.gateway_url)

    def fetch_metadata(self, uri: str) -> Dict[str, Any]:
        """Download and decode the JSON metadata document behind ``uri``."""
        url = self.gateway_url_for(uri)
        self.logger.debug("GET %s", url)
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
