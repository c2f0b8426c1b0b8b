"""Tests for the py-dep-licenses command line."""

import json
from unittest.mock import patch

import pytest

from analysis.resolution import DependencyResolver
from args import parse_args
from errors import ManifestFetchTransportFailure
import pydeplicenses


class _Fetcher:
    def __init__(self, files=None, error=None):
        self.files = files or {}
        self.error = error

    def fetch(self, owner, repo, file_name, branch):
        if self.error is not None:
            raise self.error
        return self.files.get((file_name, branch))


class _Lookup:
    def fetch_license(self, package_name):
        return {"requests": "Apache 2.0"}.get(package_name)


def _resolver(files=None, error=None):
    return DependencyResolver(_Fetcher(files, error), _Lookup(), branches=("main", "master"), batch_delay=0)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("PYDEPLICENSES_CONFIG", raising=False)


class TestParseArgs:
    """Argument parsing."""

    def test_scan_defaults(self):
        args = parse_args(["scan", "https://github.com/octo/demo"])
        assert args.command == "scan"
        assert args.github_url == "https://github.com/octo/demo"
        assert args.OUTPUT_FORMAT == "text"
        assert args.OUTPUT is None
        assert args.BRANCH is None

    def test_mcp_options(self):
        args = parse_args(["mcp", "--host", "127.0.0.1", "--port", "8765", "--loglevel", "debug"])
        assert args.command == "mcp"
        assert args.MCP_HOST == "127.0.0.1"
        assert args.MCP_PORT == 8765
        assert args.LOG_LEVEL == "DEBUG"

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestScan:
    """scan subcommand end to end with fake collaborators."""

    def test_text_report(self, capsys):
        files = {("requirements.txt", "main"): "requests\nmystery\n"}
        with patch("cli_mcp.build_resolver", return_value=_resolver(files)):
            with pytest.raises(SystemExit) as exc_info:
                pydeplicenses.main(["scan", "https://github.com/octo/demo"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "**requests** (Apache 2.0)" in out
        assert "**mystery** (License unknown)" in out

    def test_json_report_to_file(self, tmp_path):
        files = {("requirements.txt", "main"): "requests\n"}
        output = tmp_path / "report.json"
        with patch("cli_mcp.build_resolver", return_value=_resolver(files)):
            with pytest.raises(SystemExit) as exc_info:
                pydeplicenses.main([
                    "scan", "https://github.com/octo/demo", "--format", "json", "--output", str(output),
                ])

        assert exc_info.value.code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["dependencies"][0]["name"] == "requests"
        assert data["dependencies"][0]["category"] == "free"

    def test_invalid_url_exit_code(self):
        with patch("cli_mcp.build_resolver", return_value=_resolver()):
            with pytest.raises(SystemExit) as exc_info:
                pydeplicenses.main(["scan", "https://example.com/nope"])
        assert exc_info.value.code == 1

    def test_transport_failure_exit_code(self):
        resolver = _resolver(error=ManifestFetchTransportFailure("github connection error: reset"))
        with patch("cli_mcp.build_resolver", return_value=resolver):
            with pytest.raises(SystemExit) as exc_info:
                pydeplicenses.main(["scan", "https://github.com/octo/demo"])
        assert exc_info.value.code == 2


class TestMcpCommand:
    """mcp subcommand transport selection."""

    def test_stdio_by_default(self):
        with patch("cli_mcp.create_server") as mock_create:
            pydeplicenses.main(["mcp"])
        mock_create.return_value.run.assert_called_once_with()

    def test_streamable_http_with_host_and_port(self):
        with patch("cli_mcp.create_server") as mock_create:
            pydeplicenses.main(["mcp", "--host", "127.0.0.1", "--port", "8765"])
        server = mock_create.return_value
        server.run.assert_called_once_with(transport="streamable-http")
        assert server.settings.host == "127.0.0.1"
        assert server.settings.port == 8765
