import json
from pathlib import Path

from click.testing import CliRunner

from apidoc2openapi.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliStdout:
    def test_writes_json_to_stdout(self):
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "api_data.js")])

        assert result.exit_code == 0
        document = json.loads(result.output)
        assert document["info"]["version"] == "1.10.0"
        assert "/users/{id}" in document["paths"]

    def test_json_list_source(self):
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "api_data.json")])

        assert result.exit_code == 0
        assert "delete" in json.loads(result.output)["paths"]["/orders/{orderId}"]


class TestCliDestination:
    def test_creates_parent_directories(self, tmp_path):
        output_file = tmp_path / "build" / "nested" / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "api_data.js"), str(output_file)])

        assert result.exit_code == 0
        assert output_file.exists()
        assert "OpenAPI spec written to" in result.output
        document = json.loads(output_file.read_text(encoding="utf-8"))
        assert document["openapi"] == "3.0.3"


class TestCliInfoOverrides:
    def test_info_file_then_flags(self, tmp_path):
        output_file = tmp_path / "openapi.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            str(FIXTURES / "api_data.js"), str(output_file),
            "--info", str(FIXTURES / "info.yaml"),
            "--title", "Flag Title",
        ])

        assert result.exit_code == 0
        info = json.loads(output_file.read_text(encoding="utf-8"))["info"]
        assert info["title"] == "Flag Title"
        assert info["version"] == "3.1"
        assert info["contact"] == {"email": "api@example.com"}

    def test_api_version_flag(self):
        runner = CliRunner()
        result = runner.invoke(main, [str(FIXTURES / "api_data.js"), "--api-version", "5.0.0"])

        assert result.exit_code == 0
        assert json.loads(result.output)["info"]["version"] == "5.0.0"


class TestCliErrors:
    def test_missing_registration_call(self, tmp_path):
        source = tmp_path / "api_data.js"
        source.write_text("var apiData = {};\n", encoding="utf-8")
        output_file = tmp_path / "openapi.json"

        runner = CliRunner()
        result = runner.invoke(main, [str(source), str(output_file)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not output_file.exists()

    def test_missing_api_array(self, tmp_path):
        source = tmp_path / "api_data.js"
        source.write_text('define({"project": {}});', encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == 1
        assert "api array" in result.output

    def test_non_utf8_source(self, tmp_path):
        source = tmp_path / "api_data.js"
        source.write_bytes(b'define({"api": [{"url": "/\xff"}]});')

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == 1
        assert "UTF-8" in result.output

    def test_missing_source_path(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.js")])
        assert result.exit_code != 0

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "apidoc2openapi" in result.output
