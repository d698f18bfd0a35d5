"""``{{name}}`` placeholder substitution.

Each pass resolves only the first placeholder in the text (all of its literal
occurrences) and then re-scans, spending one credit. The credit budget is the
only guard against self-referencing or mutually-referencing variables.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from postman2openapi.parser.base import Variable

VAR_REPLACE_CREDITS = 20

VARIABLE_RE = re.compile(r"\{\{([^{}]*?)\}\}")


def build_variable_table(variables: Iterable[Variable] | None) -> Mapping[str, Any]:
    """Build the read-only name -> value table from collection variables.

    Variables without a key or value, or whose value is the empty string,
    are dropped. A later duplicate key replaces an earlier one.
    """
    table: dict[str, Any] = {}
    for v in variables or []:
        if v.key is None or v.value is None or v.value == "":
            continue
        table[v.key] = v.value
    return MappingProxyType(table)


def to_path_template(text: str) -> str:
    """Turn surviving ``{{name}}`` placeholders into ``{name}``."""
    return VARIABLE_RE.sub(r"{\1}", text)


class VariableResolver:
    """Inlines variable values into URLs, bodies and examples."""

    def __init__(self, variables: Mapping[str, Any]):
        self.variables = variables

    def resolve(
        self,
        text: str,
        credits: int = VAR_REPLACE_CREDITS,
        replace_fn: Callable[[str], str] | None = None,
    ) -> str:
        """Resolve placeholders in ``text``, spending at most ``credits`` passes.

        Resolution stops at the first placeholder that names an unknown
        variable or a variable whose value is not a string. ``replace_fn`` is
        applied once, to the text left when resolution stops.
        """
        while credits > 0:
            match = VARIABLE_RE.search(text)
            if match is None:
                break
            value = self.variables.get(match.group(1))
            if not isinstance(value, str):
                break
            text = text.replace(match.group(0), value)
            credits -= 1

        if replace_fn is not None:
            return replace_fn(text)
        return text

    def resolve_path_segment(self, segment: str, credits: int = VAR_REPLACE_CREDITS) -> str:
        """Resolve a URL path segment, leaving unresolved variables as ``{name}``."""
        return self.resolve(segment, credits, replace_fn=to_path_template)
