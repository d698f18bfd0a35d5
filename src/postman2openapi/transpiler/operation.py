"""Builds one OpenAPI operation from a Postman request leaf."""

import json
import logging
import re
from collections.abc import Sequence
from typing import Any

from postman2openapi.openapi.models import (
    HTTP_METHODS,
    Example,
    MediaType,
    Operation,
    PathItem,
    RequestBody,
    Response,
    Schema,
)
from postman2openapi.parser.base import Body, Header, Item, PathSegment, Url

from .context import WalkContext
from .parameters import generate_path_parameters, generate_query_parameters
from .schema import generate_schema
from .variables import VariableResolver

logger = logging.getLogger(__name__)

JSON = "application/json"
TEXT_PLAIN = "text/plain"
FORM_URLENCODED = "application/form-urlencoded"
OCTET_STREAM = "application/octet-stream"

SUCCESS_CODES = {"200", "201", "202", "203", "204", "205", "206", "207", "208", "226"}

_WORD_SPLIT_RE = re.compile(r"[\W_]+")
_CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_camel_case(name: str) -> str:
    """Convert a request name to a camelCase identifier.

    >>> to_camel_case("Get User")
    'getUser'
    >>> to_camel_case("get-user")
    'getUser'
    """
    words = []
    for chunk in _WORD_SPLIT_RE.split(name):
        words.extend(w for w in _CASE_BOUNDARY_RE.split(chunk) if w)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)


class OperationBuilder:
    """Turns request leaves into path items, operations and servers."""

    def __init__(self, resolver: VariableResolver):
        self.resolver = resolver

    def build(self, item: Item, context: WalkContext, tags: Sequence[str]) -> None:
        """Add the operation for ``item`` to the document in ``context``.

        Requests without a structured URL, a path or a supported method
        contribute nothing beyond their server entry.
        """
        name = item.name or "<request>"
        request = item.request
        if request is None or request.url is None:
            return
        url = request.url

        if url.host is not None:
            self._register_server(url, context)

        if url.path is None:
            return

        resolved_segments = [self._resolve_segment(segment) for segment in url.path]
        path_key = "/" + "/".join(resolved_segments)

        # Differently named variables in the same positions produce
        # different keys for what is the same route.
        path_item = context.spec.paths.setdefault(path_key, PathItem())
        path_item.parameters = generate_path_parameters(self.resolver, resolved_segments, url.variable)

        op = Operation(
            summary=name,
            description=request.description if request.description is not None else name,
        )
        if url.query:
            op.parameters = generate_query_parameters(self.resolver, url.query)

        if request.body is not None:
            op.request_body = self._build_request_body(request.body, _header_content_type(request.header))

        if tags:
            op.tags = list(tags)

        op.responses = self._build_responses(item)

        if request.method is None:
            return

        method = request.method.lower()
        op.operation_id = context.issue_operation_id(to_camel_case(name))
        if method not in HTTP_METHODS:
            logger.warning("Dropping request %r: unsupported HTTP method %r", name, request.method)
            return
        if getattr(path_item, method) is not None:
            logger.debug("Replacing %s %s with request %r", method.upper(), path_key, name)
        setattr(path_item, method, op)

    def _register_server(self, url: Url, context: WalkContext) -> None:
        host = ".".join(url.host)
        proto = f"{url.protocol}://" if url.protocol else ""
        server_url = self.resolver.resolve(f"{proto}{host}")
        if context.add_server(server_url):
            logger.debug("Registered server %s", server_url)

    def _resolve_segment(self, segment: str | PathSegment) -> str:
        if isinstance(segment, PathSegment):
            segment = segment.value or ""
        seg = self.resolver.resolve_path_segment(segment)
        if seg.startswith(":"):
            return f"{{{seg[1:]}}}"
        return seg

    def _build_request_body(self, body: Body, header_type: str | None) -> RequestBody:
        content_type = None
        media = MediaType()

        if body.mode == "raw":
            if body.raw is not None:
                content_type, media.schema_, media.example = self._infer_content(body.raw)
        elif body.mode == "urlencoded":
            content_type = FORM_URLENCODED
            if body.urlencoded is not None:
                data = {p.key: p.value for p in body.urlencoded if p.value is not None}
                media.schema_ = generate_schema(data)
                media.example = data

        content_type = header_type or content_type or OCTET_STREAM
        return RequestBody(content={content_type: media})

    def _build_responses(self, item: Item) -> dict[str, Response]:
        responses: dict[str, Response] = {}
        for res in item.response or []:
            if res is None or res.code is None:
                continue
            response = Response(description=res.name)
            if res.body is not None:
                content_type, schema, example = self._infer_content(res.body)
                response.content = {
                    content_type: MediaType(schema_=schema, examples={res.name or "": Example(value=example)})
                }
            responses[str(res.code)] = response

        if not SUCCESS_CODES & responses.keys():
            responses["200"] = Response(description="")
        return responses

    def _infer_content(self, raw: str) -> tuple[str, Schema | None, Any]:
        """Resolve and type a raw body: (content type, schema, example)."""
        resolved = self.resolver.resolve(raw)
        try:
            value = json.loads(resolved, parse_constant=_reject_constant)
        except ValueError:
            return TEXT_PLAIN, None, resolved
        if isinstance(value, (dict, list)):
            return JSON, generate_schema(value), value
        return OCTET_STREAM, None, resolved


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _header_content_type(headers: list[Header] | None) -> str | None:
    for h in headers or []:
        if h.key.lower() == "content-type":
            return (h.value or "").split(";")[0].strip()
    return None
