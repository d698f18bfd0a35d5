"""Postman Collection v2.1 reader.

Parses Postman exported JSON into a ``Collection`` model.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from .base import Collection


class CollectionError(Exception):
    """The input is not a readable Postman collection."""


def load_collection(file_path: Path) -> Collection:
    """Read a Postman Collection v2.1 file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CollectionError(f"Collection is not UTF-8 text: {e.reason} at byte {e.start}") from e
    return parse_collection(text)


def parse_collection(text: str) -> Collection:
    """Parse Postman Collection v2.1 JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CollectionError(f"Collection is not valid JSON: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict) or "info" not in data:
        raise CollectionError("Collection must be a JSON object with an 'info' section")

    try:
        return Collection.model_validate(data)
    except ValidationError as e:
        raise CollectionError(f"Malformed collection: {e.error_count()} invalid field(s)\n{e}") from e
