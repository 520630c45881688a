import json
from pathlib import Path

import pytest
import yaml

from openapi_upgrade.errors import DocumentNotFoundError, MalformedDocumentError, OutputWriteError
from openapi_upgrade.parser.detect import detect_version
from openapi_upgrade.parser.loader import (
    dump_document,
    load_document,
    output_format,
    parse_document,
    write_document,
)

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectVersion:
    @pytest.mark.parametrize(
        "doc, expected",
        [
            ({"swagger": "2.0"}, "swagger-2.0"),
            ({"swagger": 2.0}, "swagger-2.0"),
            ({"openapi": "3.0.3"}, "openapi-3.0"),
            ({"openapi": "3.1.0"}, "openapi-3.1"),
            ({"openapi": "4.0.0"}, "unknown"),
            ({"info": {}}, "unknown"),
        ],
    )
    def test_versions(self, doc, expected):
        assert detect_version(doc) == expected

    def test_fixtures(self):
        assert detect_version(load_document(FIXTURES / "users_swagger.json")) == "swagger-2.0"
        assert detect_version(load_document(FIXTURES / "petstore.yaml")) == "openapi-3.0"


class TestLoadDocument:
    def test_load_json(self):
        doc = load_document(FIXTURES / "users_swagger.json")
        assert doc["info"]["title"] == "Users API"

    def test_load_yaml(self):
        doc = load_document(FIXTURES / "petstore.yaml")
        assert "/pets/{petId}" in doc["paths"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentNotFoundError, match="not found"):
            load_document(tmp_path / "nope.json")

    def test_malformed(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text('{"swagger": [2.0', encoding="utf-8")
        with pytest.raises(MalformedDocumentError):
            load_document(f)

    def test_top_level_must_be_mapping(self):
        with pytest.raises(MalformedDocumentError, match="mapping"):
            parse_document("- a\n- b\n")

    def test_empty_document(self):
        with pytest.raises(MalformedDocumentError):
            parse_document("")

    def test_tab_indented_json(self):
        text = "{\n\t\"swagger\": \"2.0\",\n\t\"paths\": {}\n}"
        assert parse_document(text) == {"swagger": "2.0", "paths": {}}

    def test_json_surrogate_pair_escape(self):
        doc = parse_document(r'{"info": {"title": "Party \uD83D\uDE00"}}')
        assert doc["info"]["title"] == "Party \U0001F600"

    def test_yaml_dates_stay_strings(self):
        doc = parse_document("example: 2024-01-01\nstamp: 2001-12-14t21:59:43.10-05:00\n")
        assert doc == {"example": "2024-01-01", "stamp": "2001-12-14t21:59:43.10-05:00"}

    def test_yaml_implicit_types_still_resolved(self):
        doc = parse_document("count: 3\nflag: true\nnothing: null\n")
        assert doc == {"count": 3, "flag": True, "nothing": None}


class TestWriteDocument:
    def test_output_format_by_suffix(self):
        assert output_format(Path("out.json")) == "json"
        assert output_format(Path("out.YML")) == "yaml"
        assert output_format(Path("out.yaml"), "json") == "json"

    def test_write_json_creates_directories(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "openapi.json"
        write_document({"openapi": "3.1.0", "paths": {}}, target)
        assert json.loads(target.read_text(encoding="utf-8")) == {"openapi": "3.1.0", "paths": {}}

    def test_write_yaml_keeps_key_order(self, tmp_path):
        target = tmp_path / "openapi.yaml"
        write_document({"openapi": "3.1.0", "info": {"title": "T"}, "paths": {}}, target)
        text = target.read_text(encoding="utf-8")
        assert text.startswith("openapi: 3.1.0")
        assert yaml.safe_load(text)["info"] == {"title": "T"}

    def test_indent(self):
        assert dump_document({"a": 1}, indent=4) == '{\n    "a": 1\n}\n'

    def test_unwritable_path(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(OutputWriteError):
            write_document({}, blocker / "out.json")

    def test_yaml_date_example_written_as_json(self, tmp_path):
        doc = parse_document("openapi: 3.0.3\ncomponents:\n  schemas:\n    Day:\n      type: string\n      example: 2024-01-01\n")
        target = tmp_path / "openapi.json"
        write_document(doc, target)
        written = json.loads(target.read_text(encoding="utf-8"))
        assert written["components"]["schemas"]["Day"]["example"] == "2024-01-01"

    def test_unserializable_document_writes_nothing(self, tmp_path):
        target = tmp_path / "openapi.json"
        with pytest.raises(OutputWriteError, match="serialize"):
            write_document({"bad": {1, 2}}, target)
        assert not target.exists()
