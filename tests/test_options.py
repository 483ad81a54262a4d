import json
from pathlib import Path

import pytest
import yaml

from apidoc_openapi.doc.loader import load_doc
from apidoc_openapi.errors import FieldError
from apidoc_openapi.output.options import (
    APIDOC_JSON,
    APIDOC_YAML,
    OPENAPI_JSON,
    OPENAPI_YAML,
    RAML_JSON,
    Options,
)

FIXTURES = Path(__file__).parent / "fixtures"


class TestSanitize:
    def test_path_required(self):
        with pytest.raises(FieldError) as exc_info:
            Options().sanitize()
        assert exc_info.value.field == "path"

    def test_default_type(self):
        o = Options(path="out", type="")
        o.sanitize()
        assert o.type == APIDOC_JSON

    def test_invalid_type(self):
        with pytest.raises(FieldError) as exc_info:
            Options(path="out", type="swagger+json").sanitize()
        assert exc_info.value.field == "type"

    def test_raml_not_supported(self):
        with pytest.raises(FieldError, match="not supported"):
            Options(path="out", type=RAML_JSON).sanitize()

    @pytest.mark.parametrize("type_", [APIDOC_JSON, APIDOC_YAML, OPENAPI_JSON, OPENAPI_YAML])
    def test_supported_types(self, type_):
        Options(path="out", type=type_).sanitize()


class TestContains:
    def test_empty_groups_contain_all(self):
        assert Options().contains("anything")

    def test_listed_groups(self):
        o = Options(groups=["public"])
        assert o.contains("public")
        assert not o.contains("admin")


class TestMarshal:
    def test_apidoc_json_is_native(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        data = json.loads(Options(path="x", type=APIDOC_JSON).marshal(doc))
        assert data["title"] == "Petstore"
        assert len(data["apis"]) == 3
        assert "paths" not in data

    def test_apidoc_yaml_is_native(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        data = yaml.safe_load(Options(path="x", type=APIDOC_YAML).marshal(doc))
        assert data["apis"][0]["path"] == "/pets"

    def test_openapi_json(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        data = json.loads(Options(path="x", type=OPENAPI_JSON).marshal(doc))
        assert "/pets" in data["paths"]

    def test_openapi_yaml(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        data = yaml.safe_load(Options(path="x", type=OPENAPI_YAML).marshal(doc))
        assert data["info"]["title"] == "Petstore"

    def test_marshal_raml_fails(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        with pytest.raises(FieldError):
            Options(path="x", type=RAML_JSON).marshal(doc)
