"""
Unit tests for schema loading and output writing.
"""

import pytest

from viewconfig_gen.codegen.core.errors import UnknownTypeAnnotation
from viewconfig_gen.utils import (
    JSONLoaderError,
    load_json_from_file,
    load_schema,
    write_files,
)


class TestLoadJson:
    def test_load(self, schema_file, simple_schema):
        source, data = load_json_from_file(schema_file)

        assert source == "📄 schema.json"
        assert data == simple_schema

    def test_missing_file(self, tmp_path):
        with pytest.raises(JSONLoaderError, match="File not found"):
            load_json_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(JSONLoaderError, match="Invalid JSON"):
            load_json_from_file(path)


class TestLoadSchema:
    def test_load_schema(self, schema_file):
        schema = load_schema(schema_file)

        assert list(schema.modules) == ["MyComponent"]

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(JSONLoaderError, match="JSON object"):
            load_schema(path)

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(
            '{"modules": {"M": {"type": "Component", "components": {"C": '
            '{"props": [{"name": "p", "typeAnnotation": {"type": "MixedTypeAnnotation"}}]}}}}}',
            encoding="utf-8",
        )

        with pytest.raises(UnknownTypeAnnotation):
            load_schema(path)


class TestWriteFiles:
    def test_creates_directory_and_appends_extension(self, tmp_path):
        out_dir = tmp_path / "nested" / "out"

        written = write_files({"LibNativeViewConfig": "x\n"}, out_dir)

        assert written == [out_dir / "LibNativeViewConfig.js"]
        assert written[0].read_text(encoding="utf-8") == "x\n"

    def test_custom_extension(self, tmp_path):
        (path,) = write_files({"Lib": ""}, tmp_path, ".flow.js")

        assert path.name == "Lib.flow.js"
