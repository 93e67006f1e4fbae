"""Helpers for decoding on-chain metadata locators."""
from __future__ import annotations

IPFS_SCHEME = "ipfs://"


def bytes_to_str(hex_bytes: str) -> str:
    """Decode a Michelson ``bytes`` value (hex text) into a UTF-8 string."""
    if hex_bytes.startswith("0x"):
        hex_bytes = hex_bytes[2:]
    return bytes.fromhex(hex_bytes).decode("utf-8")


def ipfs_to_gateway(uri: str, gateway_url: str) -> str:
    """Rewrite an ``ipfs://`` URI to an HTTP gateway URL.

    URIs using any other scheme are returned unchanged.
    """
    if not uri.startswith(IPFS_SCHEME):
        return uri
    return f"{gateway_url.rstrip('/')}/{uri[len(IPFS_SCHEME):]}"
