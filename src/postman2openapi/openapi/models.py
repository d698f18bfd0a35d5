"""OpenAPI 3.0 document models.

The transpiler builds these incrementally; ``openapi.render`` dumps them
with aliases applied and unset optional fields left out.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer

OPENAPI_VERSION = "3.0.3"
DEFAULT_API_VERSION = "1.0.0"

SchemaType = Literal["object", "array", "string", "number", "boolean"]


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Schema(_Model):
    """Structural schema inferred from example JSON.

    ``type`` is the variant tag; a schema inferred from ``null`` has no type
    and is ``nullable``. An explicitly assigned ``None`` example is kept in
    the output, an unset one is dropped.
    """

    type: SchemaType | None = None
    properties: dict[str, "Schema"] | None = None
    items: "Schema | None" = None
    example: Any = None
    nullable: bool | None = None

    @model_serializer(mode="wrap")
    def _keep_null_example(self, handler):
        data = handler(self)
        if "example" in self.model_fields_set and self.example is None:
            data["example"] = None
        return data


class Parameter(_Model):
    name: str
    location: Literal["query", "path", "header", "cookie"] = Field(alias="in")
    description: str | None = None
    required: bool | None = None
    schema_: Schema | None = Field(default=None, alias="schema")


class Example(_Model):
    value: Any = None


class MediaType(_Model):
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example] | None = None


class RequestBody(_Model):
    content: dict[str, MediaType] = {}


class Response(_Model):
    description: str | None = None
    content: dict[str, MediaType] | None = None


class Operation(_Model):
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = {}
    operation_id: str | None = Field(default=None, alias="operationId")


HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "trace")


class PathItem(_Model):
    parameters: list[Parameter] | None = None
    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None
    patch: Operation | None = None
    options: Operation | None = None
    trace: Operation | None = None


class Server(_Model):
    url: str
    description: str | None = None


class Tag(_Model):
    name: str
    description: str | None = None


class Info(_Model):
    title: str
    description: str | None = None
    version: str = DEFAULT_API_VERSION


class OpenApiSpec(_Model):
    openapi: str = OPENAPI_VERSION
    info: Info
    servers: list[Server] = []
    tags: list[Tag] = []
    paths: dict[str, PathItem] = {}
