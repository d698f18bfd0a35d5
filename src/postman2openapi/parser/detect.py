"""Auto-detect API documentation format."""

import json
from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of an API documentation file.

    Returns: 'postman', 'openapi', or 'unknown'.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return "unknown"

    # JSON first: collections are always exported as JSON
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        # Fall back to YAML for hand-written OpenAPI documents
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            return "unknown"

    if isinstance(data, dict):
        if "openapi" in data or "swagger" in data:
            return "openapi"
        info = data.get("info")
        if isinstance(info, dict) and ("_postman_id" in info or "postman" in str(info.get("schema", ""))):
            return "postman"
    return "unknown"
