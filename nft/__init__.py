"""Rarity scoring and ranking for a token collection."""
