"""Postman Collection v2.1 data models.

The reader in ``parser.postman`` converts collection JSON into these models.
Only the fields the transpiler reads are declared; everything else in the
document is ignored.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, field_validator


def _collapse_description(value: Any) -> str | None:
    """Descriptions are either a plain string or an object with ``content``."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, dict):
        return value.get("content")
    return None


Description = Annotated[str | None, BeforeValidator(_collapse_description)]


class Variable(BaseModel):
    """A collection variable or a URL path-variable hint."""

    key: str | None = None
    value: Any = None
    description: Description = None


class QueryParam(BaseModel):
    key: str | None = None
    value: str | None = None
    description: Description = None
    disabled: bool = False


class Header(BaseModel):
    key: str = ""
    value: str | None = None
    disabled: bool = False


class UrlEncodedParam(BaseModel):
    key: str = ""
    value: str | None = None


class Body(BaseModel):
    mode: str | None = None  # raw / urlencoded / formdata / file / graphql
    raw: str | None = None
    urlencoded: list[UrlEncodedParam] | None = None


class PathSegment(BaseModel):
    type: str | None = None
    value: str | None = None


class Url(BaseModel):
    raw: str | None = None
    protocol: str | None = None
    host: list[str] | None = None
    path: list[str | PathSegment] | None = None
    query: list[QueryParam] | None = None
    variable: list[Variable] | None = None

    @field_validator("host", mode="before")
    @classmethod
    def _host_parts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("path", mode="before")
    @classmethod
    def _path_segments(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lstrip("/").split("/")
        return value


class Request(BaseModel):
    method: str | None = None
    url: Url | None = None
    header: list[Header] | None = None
    body: Body | None = None
    description: Description = None

    @field_validator("url", mode="before")
    @classmethod
    def _url_object(cls, value: Any) -> Any:
        # A bare string URL carries neither host parts nor path segments.
        if isinstance(value, str):
            return {"raw": value}
        return value

    @field_validator("header", mode="before")
    @classmethod
    def _header_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return None
        return value


class Response(BaseModel):
    name: str | None = None
    code: int | None = None
    body: str | None = None


class Item(BaseModel):
    """A folder (``item`` is set) or a request leaf."""

    name: str | None = None
    description: Description = None
    item: list["Item"] | None = None
    request: Request | None = None
    response: list[Response | None] | None = None

    @field_validator("request", mode="before")
    @classmethod
    def _request_object(cls, value: Any) -> Any:
        # A request given as a bare URL string has no usable structure.
        if isinstance(value, str):
            return None
        return value

    @property
    def is_folder(self) -> bool:
        return self.item is not None


class Info(BaseModel):
    name: str = ""
    description: Description = None


class Collection(BaseModel):
    """A parsed Postman collection."""

    info: Info
    item: list[Item] = []
    variable: list[Variable] | None = None
