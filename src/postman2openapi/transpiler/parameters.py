"""Path and query parameter generation."""

import re
from collections.abc import Sequence

from postman2openapi.openapi.models import Parameter, Schema
from postman2openapi.parser.base import QueryParam, Variable

from .variables import VariableResolver

URI_TEMPLATE_VARIABLE_RE = re.compile(r"\{([^{}]*?)\}")


def generate_path_parameters(
    resolver: VariableResolver,
    resolved_segments: Sequence[str],
    hints: Sequence[Variable] | None,
) -> list[Parameter] | None:
    """One required string parameter per ``{name}`` occurrence in the segments.

    Repeated names are not collapsed. Returns None when the path has no
    template variables.
    """
    params = []
    for segment in resolved_segments:
        for match in URI_TEMPLATE_VARIABLE_RE.finditer(segment):
            name = match.group(1)
            schema = Schema(type="string")
            description = None
            hint = _find_hint(hints, name)
            if hint is not None:
                description = hint.description
                if isinstance(hint.value, str):
                    schema.example = resolver.resolve(hint.value)
            params.append(
                Parameter(name=name, location="path", required=True, description=description, schema_=schema)
            )
    return params or None


def generate_query_parameters(
    resolver: VariableResolver,
    query: Sequence[QueryParam],
) -> list[Parameter] | None:
    """One string query parameter per entry, or None when there are none."""
    params = []
    for qp in query:
        schema = Schema(type="string")
        if qp.value is not None:
            schema.example = resolver.resolve(qp.value)
        params.append(
            Parameter(name=qp.key or "", location="query", description=qp.description, schema_=schema)
        )
    return params or None


def _find_hint(hints: Sequence[Variable] | None, name: str) -> Variable | None:
    for hint in hints or []:
        if hint.key == name:
            return hint
    return None
