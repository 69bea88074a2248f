"""Tests for document and selector file I/O."""

import json

import pytest
import yaml

from openapi_filter.exceptions import DocumentError, SelectorsFileError
from openapi_filter.loader import (
    dump_document,
    load_document,
    parse_selectors,
    read_selectors_file,
)


class TestLoadDocument:
    def test_json(self, tmp_path):
        path = tmp_path / "api.json"
        path.write_text(json.dumps({"openapi": "3.0.0", "paths": {}}))
        assert load_document(path) == {"openapi": "3.0.0", "paths": {}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path, suffix):
        path = tmp_path / f"api{suffix}"
        path.write_text("swagger: '2.0'\npaths:\n  /pets: {}\n")
        assert load_document(path) == {"swagger": "2.0", "paths": {"/pets": {}}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError, match="Could not read"):
            load_document(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "api.json"
        path.write_text("{not json")
        with pytest.raises(DocumentError, match="Could not parse"):
            load_document(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "api.yaml"
        path.write_text("paths: [unclosed\n")
        with pytest.raises(DocumentError, match="Could not parse"):
            load_document(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "api.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(DocumentError, match="Expected a mapping"):
            load_document(path)


class TestDumpDocument:
    def test_json_keeps_order_and_unicode(self, tmp_path):
        path = tmp_path / "out.json"
        dump_document({"z": "é", "a": 1}, path, indent=2)
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "z": "é",\n  "a": 1\n}\n'

    def test_json_compact(self, tmp_path):
        path = tmp_path / "out.json"
        dump_document({"a": [1, 2]}, path, indent=0)
        assert path.read_text() == '{"a": [1, 2]}\n'

    def test_yaml(self, tmp_path):
        path = tmp_path / "out.yaml"
        dump_document({"paths": {"/b": {}, "/a": {}}}, path)
        text = path.read_text()
        assert text.index("/b") < text.index("/a")
        assert yaml.safe_load(text) == {"paths": {"/b": {}, "/a": {}}}

    def test_recursive_document_leaves_no_file(self, tmp_path):
        document = yaml.safe_load("get: &node\n  x-self: *node\n")
        path = tmp_path / "out.json"
        with pytest.raises(DocumentError, match="Could not serialize"):
            dump_document(document, path)
        assert not path.exists()

    def test_recursive_document_keeps_existing_file(self, tmp_path):
        document = yaml.safe_load("get: &node\n  x-self: *node\n")
        path = tmp_path / "out.json"
        path.write_text("previous")
        with pytest.raises(DocumentError):
            dump_document(document, path)
        assert path.read_text() == "previous"

    def test_unwritable_location(self, tmp_path):
        with pytest.raises(DocumentError, match="Could not write"):
            dump_document({}, tmp_path / "missing-dir" / "out.json")


class TestSelectors:
    def test_parse_skips_blanks_and_comments(self):
        text = "# users\n/users\n\n  /users/{id}  \n#/ignored\n/products\n"
        assert parse_selectors(text) == ["/users", "/users/{id}", "/products"]

    def test_read_file(self, tmp_path):
        path = tmp_path / "paths.txt"
        path.write_text("/a\n/b\n")
        assert read_selectors_file(path) == ["/a", "/b"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SelectorsFileError):
            read_selectors_file(tmp_path / "missing.txt")
