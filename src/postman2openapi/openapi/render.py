"""Render an ``OpenApiSpec`` to YAML or JSON text."""

import json

import yaml

from .models import OpenApiSpec

OUTPUT_FORMATS = ("yaml", "json")


def to_dict(spec: OpenApiSpec) -> dict:
    """Dump the document with OpenAPI field names and without unset fields."""
    return spec.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_yaml(spec: OpenApiSpec) -> str:
    return yaml.safe_dump(to_dict(spec), sort_keys=False, allow_unicode=True)


def to_json(spec: OpenApiSpec) -> str:
    return json.dumps(to_dict(spec), indent=2, ensure_ascii=False) + "\n"


def render(spec: OpenApiSpec, fmt: str = "yaml") -> str:
    """Render the document in one of ``OUTPUT_FORMATS``."""
    if fmt == "yaml":
        return to_yaml(spec)
    if fmt == "json":
        return to_json(spec)
    raise ValueError(f"Unsupported output format: {fmt!r} (expected one of {', '.join(OUTPUT_FORMATS)})")
