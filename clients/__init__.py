"""HTTP clients for the indexer and the IPFS gateway."""

from .ipfs import IPFSClient
from .tzkt import TzktClient

__all__ = ["IPFSClient", "TzktClient"]
