"""Convert a native apidoc document into an OpenAPI document.

The source lists one endpoint per (method, path). OpenAPI nests them as
paths -> methods -> operation, so endpoints sharing a path are grouped
into one PathItem, and repeated response declarations for one status
code are merged into a single Response.
"""

import logging

import yaml

from apidoc_openapi.doc import base
from apidoc_openapi.errors import DuplicateOperationError
from apidoc_openapi.openapi.models import (
    METHODS,
    PARAMETER_IN_HEADER,
    PARAMETER_IN_PATH,
    PARAMETER_IN_QUERY,
    Contact,
    Example,
    Header,
    Info,
    License,
    MediaType,
    OpenAPI,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Schema,
    Server,
    Tag,
)

logger = logging.getLogger(__name__)


# -- metadata -----------------------------------------------------------------

def new_contact(contact: base.Contact | None) -> Contact | None:
    if contact is None:
        return None
    return Contact(name=contact.name or None, url=contact.url, email=contact.email)


def new_license(lic: base.License | None) -> License | None:
    if lic is None:
        return None
    return License(name=lic.name, url=lic.url)


def new_server(server: base.Server) -> Server:
    return Server(url=server.url, description=server.description or None)


def new_tag(tag: base.Tag) -> Tag:
    return Tag(name=tag.name, description=tag.description or None)


def new_info(doc: base.Document) -> Info:
    return Info(
        title=doc.title,
        description=doc.description or None,
        contact=new_contact(doc.contact),
        license=new_license(doc.license),
        version=doc.version,
    )


# -- schemas and examples -----------------------------------------------------

def new_schema(schema: base.Schema) -> Schema:
    """Wrap a source type descriptor in an output schema node.

    The result is a deep copy; the source document may be rendered into
    other formats afterwards and must not be shared with the output.
    """
    return Schema.model_validate(schema.model_dump(exclude_none=True))


def new_examples(examples: list[base.Example]) -> dict[str, Example]:
    """Index examples by their MIME type; a repeated MIME type keeps the last one."""
    result: dict[str, Example] = {}
    for exp in examples:
        if exp.mimetype in result:
            logger.warning("example for %s declared more than once, keeping the last one", exp.mimetype)
        result[exp.mimetype] = Example(summary=exp.summary or None, value=exp.value)
    return result


def new_media_type(type_: base.Schema, examples: list[base.Example]) -> MediaType:
    return MediaType(schema_=new_schema(type_), examples=new_examples(examples))


# -- operations ---------------------------------------------------------------

def set_operation(path: PathItem, method: str, path_name: str = "") -> Operation:
    """Allocate the operation for ``method`` on ``path`` and return it.

    Raises DuplicateOperationError if the method slot is already taken.
    A method outside the eight OpenAPI ones gets an operation that is
    never attached to the path.
    """
    operation = Operation()
    name = method.lower()

    if name not in METHODS:
        logger.warning("unrecognized HTTP method %r on %s, endpoint dropped", method, path_name or "path")
        return operation

    if getattr(path, name) is not None:
        raise DuplicateOperationError(name, path_name)

    setattr(path, name, operation)
    return operation


def set_operation_params(operation: Operation, api: base.Endpoint) -> None:
    """Fill the parameter list: path params, then queries, then request headers.

    Only the headers of the first request variant become parameters.
    """
    params: list[Parameter] = []

    for param in api.params:
        params.append(Parameter(
            name=param.name,
            in_=PARAMETER_IN_PATH,
            description=param.summary or None,
            required=True,
            schema_=new_schema(param.type),
        ))

    for param in api.queries:
        params.append(Parameter(
            name=param.name,
            in_=PARAMETER_IN_QUERY,
            description=param.summary or None,
            required=not param.optional,
            schema_=new_schema(param.type),
        ))

    if api.requests:
        for header in api.requests[0].headers:
            params.append(Parameter(
                name=header.name,
                in_=PARAMETER_IN_HEADER,
                description=header.summary or None,
                required=not header.optional,
            ))

    operation.parameters = params


def new_request_body(requests: list[base.Request]) -> RequestBody | None:
    """Build one request body with a content entry per MIME type."""
    if not requests:
        return None

    content: dict[str, MediaType] = {}
    for r in requests:
        content[r.mimetype] = new_media_type(r.type, r.examples)
    return RequestBody(content=content)


def merge_response(responses: dict[str, Response], resp: base.Response) -> Response:
    """Fold one response variant into ``responses``.

    Variants sharing a status code accumulate into the same Response:
    headers are merged by name and content by MIME type, later ones
    replacing earlier ones with the same key.
    """
    status = str(resp.status)
    r = responses.get(status)
    if r is None:
        r = Response()
        responses[status] = r
    else:
        logger.debug("merging %s response for status %s", resp.mimetype, status)

    if resp.summary:
        r.description = resp.summary

    for h in resp.headers:
        r.headers[h.name] = Header(description=h.summary or None)

    r.content[resp.mimetype] = new_media_type(resp.type, resp.examples)
    return r


# -- document -----------------------------------------------------------------

def parse(doc: base.Document) -> OpenAPI:
    """Build the OpenAPI document for ``doc``.

    Raises DuplicateOperationError on the first (path, method) pair seen
    twice; nothing is returned in that case.
    """
    openapi = OpenAPI(
        info=new_info(doc),
        servers=[new_server(srv) for srv in doc.servers],
        tags=[new_tag(tag) for tag in doc.tags],
    )
    parse_paths(openapi, doc)
    return openapi


def parse_paths(openapi: OpenAPI, doc: base.Document) -> None:
    for api in doc.apis:
        item = openapi.paths.get(api.path)
        if item is None:
            item = PathItem()

        operation = set_operation(item, api.method, api.path)
        # a path only appears once one of its methods is actually attached
        if api.method.lower() in METHODS:
            openapi.paths.setdefault(api.path, item)
        logger.debug("mapping %s %s", api.method.upper(), api.path)

        operation.tags = list(api.tags)
        operation.summary = api.summary or None
        operation.description = api.description or None
        operation.deprecated = True if api.deprecated else None
        set_operation_params(operation, api)
        operation.request_body = new_request_body(api.requests)

        for resp in api.responses:
            merge_response(operation.responses, resp)


def to_json(doc: base.Document) -> bytes:
    """Render ``doc`` as an OpenAPI JSON document."""
    openapi = parse(doc)
    return openapi.model_dump_json(by_alias=True, exclude_none=True, indent=2).encode("utf-8")


def to_yaml(doc: base.Document) -> bytes:
    """Render ``doc`` as an OpenAPI YAML document."""
    openapi = parse(doc)
    return yaml.safe_dump(openapi.dump(), sort_keys=False, allow_unicode=True).encode("utf-8")
