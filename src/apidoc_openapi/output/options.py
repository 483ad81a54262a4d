"""Output options: which format to write, where, and for which groups."""

from collections.abc import Callable

import yaml
from pydantic import BaseModel

from apidoc_openapi.doc.base import Document
from apidoc_openapi.errors import FieldError
from apidoc_openapi.openapi import convert

Marshaler = Callable[[Document], bytes]

APIDOC_JSON = "apidoc+json"
APIDOC_YAML = "apidoc+yaml"
OPENAPI_JSON = "openapi+json"
OPENAPI_YAML = "openapi+yaml"
RAML_JSON = "raml+json"

TYPES = (APIDOC_JSON, APIDOC_YAML, OPENAPI_JSON, OPENAPI_YAML, RAML_JSON)

FILENAMES = {
    APIDOC_JSON: "apidoc.json",
    APIDOC_YAML: "apidoc.yaml",
    OPENAPI_JSON: "openapi.json",
    OPENAPI_YAML: "openapi.yaml",
    RAML_JSON: "raml.json",
}


def apidoc_json_marshal(doc: Document) -> bytes:
    return doc.model_dump_json(indent=2).encode("utf-8")


def apidoc_yaml_marshal(doc: Document) -> bytes:
    data = doc.model_dump(mode="json")
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")


# RAML has no marshaler yet; the type is recognized but rejected.
MARSHALERS: dict[str, Marshaler | None] = {
    APIDOC_JSON: apidoc_json_marshal,
    APIDOC_YAML: apidoc_yaml_marshal,
    OPENAPI_JSON: convert.to_json,
    OPENAPI_YAML: convert.to_yaml,
    RAML_JSON: None,
}


class Options(BaseModel):
    """Output settings, usually read from the ``output`` section of a config file."""

    path: str = ""
    groups: list[str] = []  # empty means every group
    type: str = APIDOC_JSON

    def sanitize(self) -> None:
        """Check the options, filling in defaults.

        Raises FieldError naming the offending field.
        """
        if not self.path:
            raise FieldError("path", "required")

        if not self.type:
            self.type = APIDOC_JSON

        if self.type not in MARSHALERS:
            raise FieldError("type", f"invalid value {self.type!r}")

        if MARSHALERS[self.type] is None:
            raise FieldError("type", f"{self.type} output is not supported")

    def contains(self, group: str) -> bool:
        """Whether ``group`` is selected for output."""
        return not self.groups or group in self.groups

    def marshal(self, doc: Document) -> bytes:
        marshaler = MARSHALERS.get(self.type)
        if marshaler is None:
            raise FieldError("type", f"{self.type} output is not supported")
        return marshaler(doc)
