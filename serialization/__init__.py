"""Compact JSON encode/decode helpers for plain objects and models."""

from serialization.json_codec import from_json, get_json

__all__ = ["from_json", "get_json"]
