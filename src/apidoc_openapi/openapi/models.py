"""OpenAPI 3.x document model.

Only the subset of the OpenAPI object graph that the converter fills in
is modelled. Attribute names are snake_case; the names written to JSON and
YAML are the OpenAPI ones (``in``, ``requestBody``), set through aliases.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from apidoc_openapi.doc import base

OPENAPI_VERSION = "3.0.3"

METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

PARAMETER_IN_PATH = "path"
PARAMETER_IN_QUERY = "query"
PARAMETER_IN_HEADER = "header"


class OpenApiModel(BaseModel):
    """Base for all OpenAPI objects.

    Empty maps and lists are left out of the serialized form, apart from
    the fields named in ``keep_empty`` which OpenAPI requires.
    """

    model_config = ConfigDict(populate_by_name=True)

    keep_empty: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty(self, handler):
        data = handler(self)
        return {
            k: v for k, v in data.items()
            if k in self.keep_empty or (v is not None and v != {} and v != [])
        }


class Schema(base.Schema):
    """Output schema node; same shape as the source type descriptor."""


class Contact(OpenApiModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(OpenApiModel):
    name: str
    url: str | None = None


class Info(OpenApiModel):
    title: str
    description: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str


class Server(OpenApiModel):
    url: str
    description: str | None = None


class Tag(OpenApiModel):
    name: str
    description: str | None = None


class Example(OpenApiModel):
    summary: str | None = None
    value: str | None = None


class MediaType(OpenApiModel):
    schema_: Schema | None = Field(default=None, alias="schema")
    examples: dict[str, Example] = {}


class Header(OpenApiModel):
    description: str | None = None


class Parameter(OpenApiModel):
    name: str
    in_: str = Field(alias="in")
    description: str | None = None
    required: bool = False
    schema_: Schema | None = Field(default=None, alias="schema")


class RequestBody(OpenApiModel):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"content"})

    description: str | None = None
    content: dict[str, MediaType] = {}


class Response(OpenApiModel):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"description"})

    description: str = ""
    headers: dict[str, Header] = {}
    content: dict[str, MediaType] = {}


class Operation(OpenApiModel):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"responses"})

    tags: list[str] = []
    summary: str | None = None
    description: str | None = None
    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = {}
    deprecated: bool | None = None


class PathItem(OpenApiModel):
    """Holds at most one operation per HTTP method."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None


class OpenAPI(OpenApiModel):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"paths"})

    openapi: str = OPENAPI_VERSION
    info: Info
    servers: list[Server] = []
    tags: list[Tag] = []
    paths: dict[str, PathItem] = {}

    def dump(self) -> dict:
        """Return the plain OpenAPI tree, ready for a JSON or YAML encoder."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
