from pathlib import Path

import pytest

from postman2openapi.parser.detect import detect_format
from postman2openapi.parser.postman import CollectionError, load_collection, parse_collection

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectFormat:
    def test_detect_postman_format(self):
        assert detect_format(FIXTURES / "sample.postman.json") == "postman"

    def test_detect_openapi_yaml(self):
        assert detect_format(FIXTURES / "petstore.yaml") == "openapi"

    def test_detect_postman_by_schema_url(self, tmp_path):
        f = tmp_path / "c.json"
        f.write_text('{"info": {"name": "x", "schema": "https://schema.getpostman.com/json/collection/v2.1.0/"}}')
        assert detect_format(f) == "postman"

    def test_detect_non_utf8_file(self, tmp_path):
        f = tmp_path / "c.json"
        f.write_bytes(b"\xff\xfe{\"info\": {}}")
        assert detect_format(f) == "unknown"

    def test_detect_unknown_format(self, tmp_path):
        f = tmp_path / "doc.md"
        f.write_text("# API Docs\n- [broken")
        assert detect_format(f) == "unknown"


class TestLoadCollection:
    def test_parse_top_level_items(self):
        collection = load_collection(FIXTURES / "sample.postman.json")
        assert collection.info.name == "Pet Store"
        assert collection.info.description == "Pets and their owners"
        assert [i.name for i in collection.item] == ["Pets", "Health"]

    def test_parse_nested_folder(self):
        collection = load_collection(FIXTURES / "sample.postman.json")
        pets = collection.item[0]
        assert pets.is_folder
        owners = pets.item[3]
        assert owners.is_folder
        assert owners.item[0].request.method == "PUT"

    def test_parse_variables(self):
        collection = load_collection(FIXTURES / "sample.postman.json")
        keys = [v.key for v in collection.variable]
        assert "baseUrl" in keys
        assert "token" in keys

    def test_parse_responses(self):
        collection = load_collection(FIXTURES / "sample.postman.json")
        create = collection.item[0].item[1]
        assert [r.code for r in create.response] == [201, 400]


class TestParseErrors:
    def test_non_utf8_file(self, tmp_path):
        f = tmp_path / "c.json"
        f.write_bytes(b"{\"info\": {\"name\": \"\xe9t\xe9\"}}")
        with pytest.raises(CollectionError, match="not UTF-8"):
            load_collection(f)

    def test_invalid_json(self):
        with pytest.raises(CollectionError, match="not valid JSON"):
            parse_collection("{not json")

    def test_missing_info(self):
        with pytest.raises(CollectionError, match="'info'"):
            parse_collection('{"item": []}')

    def test_not_an_object(self):
        with pytest.raises(CollectionError):
            parse_collection("[1, 2, 3]")

    def test_malformed_item(self):
        with pytest.raises(CollectionError, match="Malformed collection"):
            parse_collection('{"info": {"name": "x"}, "item": [{"name": "a", "item": "oops"}]}')
