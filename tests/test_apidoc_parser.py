from pathlib import Path

import pytest

from apidoc2openapi.parser.apidoc import (
    ConfigurationError,
    load_description,
    parse_description_source,
    realize_description,
)
from apidoc2openapi.parser.base import ApiDescription
from apidoc2openapi.parser.detect import detect_format

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectFormat:
    def test_detect_script(self):
        assert detect_format('define({ "api": [] });') == "script"

    def test_detect_script_after_comment(self):
        assert detect_format('// generated\ndefine({"api": []});') == "script"

    def test_detect_json(self):
        assert detect_format('[{"url": "/a"}]') == "structured"

    def test_json_mentioning_define_is_structured(self):
        assert detect_format('{"api": [{"description": "calls define(x)"}]}') == "structured"

    def test_detect_yaml(self):
        assert detect_format("api:\n  - url: /a\n") == "structured"


class TestLoadDescription:
    def test_load_api_data_js(self):
        description = load_description(FIXTURES / "api_data.js")
        assert isinstance(description, ApiDescription)
        assert len(description.api) == 3
        first = description.api[0]
        assert first.type == "get"
        assert first.url == "/users/:id"
        assert first.parameter.fields["Parameter"][0].optional is True
        assert first.success.examples[0].content.startswith("HTTP/1.1 200 OK\n")

    def test_load_api_data_json_list(self):
        description = load_description(FIXTURES / "api_data.json")
        assert [e.name for e in description.api] == ["DeleteOrder"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_description(tmp_path / "nope.js")


class TestParseScript:
    def test_bytes_with_bom(self):
        source = b'\xef\xbb\xbfdefine({"api": [{"url": "/a"}]});'
        assert parse_description_source(source).api[0].url == "/a"

    def test_last_registration_wins(self):
        source = 'define({"api": [{"url": "/old"}]});\ndefine({"api": [{"url": "/new"}]});'
        assert parse_description_source(source).api[0].url == "/new"

    def test_define_text_inside_description(self):
        source = 'define({"api": [{"url": "/a", "description": "<p>Wrap modules in define(1) calls</p>"}]});'
        description = parse_description_source(source)
        assert description.api[0].url == "/a"
        assert "define(1)" in description.api[0].description

    def test_unclosed_define_text_inside_description(self):
        source = 'define({"api": [{"url": "/a", "description": "see define(module"}]});'
        assert parse_description_source(source).api[0].url == "/a"

    def test_non_mapping_define_is_not_a_registration(self):
        source = 'define(1);\ndefine({"api": [{"url": "/a"}]});\ndefine("x");'
        assert parse_description_source(source).api[0].url == "/a"

    def test_non_utf8_bytes(self):
        with pytest.raises(ConfigurationError, match="UTF-8"):
            parse_description_source(b'define({"api": [{"url": "/\xff"}]});')

    def test_relaxed_object_literal(self):
        source = "define({ api: [ { url: /a, type: get } ] });"
        description = parse_description_source(source)
        assert description.api[0].url == "/a"
        assert description.api[0].type == "get"

    def test_no_registration_call(self):
        with pytest.raises(ConfigurationError, match="define"):
            parse_description_source("window.apiData = {};\ndefine(")

    def test_registration_without_api(self):
        with pytest.raises(ConfigurationError, match="api array"):
            parse_description_source('define({"project": {}});')

    def test_script_is_not_executed(self, tmp_path):
        marker = tmp_path / "pwned"
        source = f'require("fs").writeFileSync("{marker}", "x");\ndefine({{"api": []}});'
        assert parse_description_source(source).api == []
        assert not marker.exists()


class TestParseStructured:
    def test_json_object(self):
        assert parse_description_source('{"api": [{"url": "/a"}]}').api[0].url == "/a"

    def test_yaml(self):
        description = parse_description_source("api:\n  - type: post\n    url: /orders\n")
        assert description.api[0].type == "post"

    def test_unparsable(self):
        with pytest.raises(ConfigurationError):
            parse_description_source("api: [unclosed\n  - : :")

    def test_scalar_document(self):
        with pytest.raises(ConfigurationError):
            parse_description_source("just some text")


class TestRealizeDescription:
    def test_passthrough(self):
        description = ApiDescription(api=[])
        assert realize_description(description) is description

    def test_api_not_a_list(self):
        with pytest.raises(ConfigurationError):
            realize_description({"api": {"url": "/a"}})

    def test_invalid_entry(self):
        with pytest.raises(ConfigurationError, match="Invalid apiDoc entry"):
            realize_description({"api": [{"parameter": {"fields": {"Parameter": [{"type": "String"}]}}}]})

    def test_unknown_keys_ignored(self):
        description = realize_description({"api": [{"url": "/a", "filename": "x.js", "groupTitle": "X"}]})
        assert description.api[0].url == "/a"
