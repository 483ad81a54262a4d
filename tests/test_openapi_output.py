import json
from pathlib import Path

import yaml

from apidoc_openapi.doc.loader import load_doc
from apidoc_openapi.openapi import convert

FIXTURES = Path(__file__).parent / "fixtures"


class TestSerialization:
    def test_json_and_yaml_trees_match(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        from_json = json.loads(convert.to_json(doc))
        from_yaml = yaml.safe_load(convert.to_yaml(doc))
        assert from_json == from_yaml

    def test_openapi_field_names(self):
        data = json.loads(convert.to_json(load_doc(FIXTURES / "petstore.yaml")))
        assert data["openapi"].startswith("3.")
        post = data["paths"]["/pets"]["post"]
        assert "requestBody" in post
        assert "request_body" not in post
        assert post["parameters"][0]["in"] == "header"
        assert "schema" not in post["parameters"][0]
        media = post["requestBody"]["content"]["application/json"]
        assert media["schema"]["required"] == ["name"]
        assert media["examples"]["application/json"]["value"] == '{"name": "rex"}'

    def test_status_codes_are_string_keys(self):
        data = yaml.safe_load(convert.to_yaml(load_doc(FIXTURES / "petstore.yaml")))
        responses = data["paths"]["/pets/{petId}"]["get"]["responses"]
        assert set(responses) == {"200", "404"}
        assert responses["404"]["description"] == "Not found"

    def test_optional_fields_omitted(self):
        data = json.loads(convert.to_json(load_doc(FIXTURES / "petstore.yaml")))
        get_pets = data["paths"]["/pets"]["get"]
        assert "requestBody" not in get_pets
        assert "deprecated" not in get_pets
        assert data["servers"][1] == {"url": "https://staging.example.com/v1"}
        assert data["tags"][1] == {"name": "admin"}

    def test_output_is_bytes(self):
        doc = load_doc(FIXTURES / "petstore.yaml")
        assert isinstance(convert.to_json(doc), bytes)
        assert isinstance(convert.to_yaml(doc), bytes)
