"""Data model for tokens of a collection and their traits."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List


def trait_text(raw: Dict[str, Any], field_name: str) -> str:
    """Render a trait field as text the way metadata tools print JSON scalars.

    Booleans are lowercase, integral floats drop their fraction (``3.0`` and
    ``3`` tally together), a missing field is ``"undefined"`` and ``null`` is
    ``"null"``.
    """
    if field_name not in raw:
        return "undefined"
    value = raw[field_name]
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class Attribute:
    """A single ``(name, value)`` trait carried by a token."""

    name: str
    value: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.value)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Attribute":
        return cls(name=trait_text(raw, "name"), value=trait_text(raw, "value"))


@dataclass(frozen=True)
class CatalogEntry:
    """Token identifier and metadata locator as reported by the indexer."""

    token_id: int
    metadata_uri: str


@dataclass
class Token:
    id: int
    name: str
    display_uri: str
    attributes: List[Attribute] = field(default_factory=list)
    score: float = 0.0

    @classmethod
    def from_metadata(cls, token_id: int, document: Dict[str, Any]) -> "Token":
        """Build a token from a resolved metadata document."""
        raw_attributes = document.get("attributes")
        if raw_attributes is None:
            raw_attributes = []
        if not isinstance(raw_attributes, list):
            raise ValueError(
                f"Token {token_id}: expected a list of attributes, got {type(raw_attributes).__name__}"
            )
        return cls(
            id=int(token_id),
            name=document.get("name", ""),
            display_uri=document.get("displayUri", ""),
            attributes=[Attribute.from_dict(attr) for attr in raw_attributes],
        )


@dataclass(frozen=True)
class RankedToken:
    """A token paired with its 1-based position in the score ordering."""

    rank: int
    token: Token
