"""Native apidoc data model.

This is the language-agnostic documentation model produced by the
documentation parser. The OpenAPI converter and the native apidoc
output formats both read from it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Contact(BaseModel):
    name: str = ""
    url: str | None = None
    email: str | None = None


class License(BaseModel):
    name: str
    url: str | None = None


class Server(BaseModel):
    url: str
    description: str = ""


class Tag(BaseModel):
    name: str
    description: str = ""


class Schema(BaseModel):
    """A type descriptor for a parameter, header or body.

    Unknown JSON-Schema keywords are kept as-is so they pass through
    the converters untouched.
    """

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    format: str | None = None
    description: str | None = None
    properties: dict[str, Schema] | None = None
    items: Schema | None = None
    required: list[str] | None = None
    enum: list | None = None
    default: object | None = None


class Example(BaseModel):
    mimetype: str
    summary: str = ""
    value: str = ""


class Header(BaseModel):
    name: str
    summary: str = ""
    optional: bool = False


class Param(BaseModel):
    """A path or query parameter."""

    name: str
    type: Schema = Schema(type="string")
    summary: str = ""
    optional: bool = False


class Request(BaseModel):
    """One accepted content type of a request body."""

    mimetype: str
    type: Schema = Schema()
    headers: list[Header] = []
    examples: list[Example] = []


class Response(BaseModel):
    """One (status, content type) combination of a response."""

    status: int
    mimetype: str
    type: Schema = Schema()
    summary: str = ""
    headers: list[Header] = []
    examples: list[Example] = []


class Endpoint(BaseModel):
    """A single documented HTTP method + path."""

    method: str  # GET / POST / ... compared case-insensitively
    path: str  # /users/{id}
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    group: str = ""
    deprecated: bool = False
    params: list[Param] = []
    queries: list[Param] = []
    requests: list[Request] = []
    responses: list[Response] = []


class Document(BaseModel):
    apidoc: str = ""
    title: str
    description: str = ""
    version: str = ""
    contact: Contact | None = None
    license: License | None = None
    servers: list[Server] = []
    tags: list[Tag] = []
    apis: list[Endpoint] = []
