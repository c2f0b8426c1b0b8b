"""Tests for raw file access on GitHub."""

from unittest.mock import patch, MagicMock

import pytest

from common.http_client import TransportError
from errors import ManifestFetchTransportFailure
from repository.github import GitHubRawClient


def _response(status_code, text=""):
    res = MagicMock()
    res.status_code = status_code
    res.text = text
    return res


class TestGitHubRawClient:
    """Test GitHubRawClient.fetch."""

    @patch('repository.github.safe_get')
    def test_fetch_returns_body(self, mock_safe_get):
        mock_safe_get.return_value = _response(200, "requests\n")

        client = GitHubRawClient(token="")
        assert client.fetch("octo", "demo", "requirements.txt", "main") == "requests\n"
        assert mock_safe_get.call_args[0][0] == (
            "https://raw.githubusercontent.com/octo/demo/main/requirements.txt"
        )
        assert mock_safe_get.call_args[1]["context"] == "github"

    @patch('repository.github.safe_get')
    def test_not_found_is_none(self, mock_safe_get):
        mock_safe_get.return_value = _response(404, "404: Not Found")

        assert GitHubRawClient(token="").fetch("octo", "demo", "Pipfile", "master") is None

    @patch('repository.github.safe_get')
    def test_unexpected_status_is_fatal(self, mock_safe_get):
        mock_safe_get.return_value = _response(500, "oops")

        with pytest.raises(ManifestFetchTransportFailure) as exc_info:
            GitHubRawClient(token="").fetch("octo", "demo", "setup.py", "main")
        assert exc_info.value.file_name == "setup.py"
        assert exc_info.value.branch == "main"

    @patch('repository.github.safe_get')
    def test_transport_error_is_fatal(self, mock_safe_get):
        mock_safe_get.side_effect = TransportError("github connection error: reset")

        with pytest.raises(ManifestFetchTransportFailure):
            GitHubRawClient(token="").fetch("octo", "demo", "setup.py", "main")

    @patch('repository.github.safe_get')
    def test_token_sent_as_authorization_header(self, mock_safe_get):
        mock_safe_get.return_value = _response(200, "x")

        GitHubRawClient(token="ghp_secret").fetch("octo", "demo", "uv.lock", "main")
        headers = mock_safe_get.call_args[1]["headers"]
        assert headers["Authorization"] == "token ghp_secret"

    @patch('repository.github.safe_get')
    def test_token_from_environment(self, mock_safe_get, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        mock_safe_get.return_value = _response(200, "x")

        GitHubRawClient().fetch("octo", "demo", "uv.lock", "main")
        assert mock_safe_get.call_args[1]["headers"]["Authorization"] == "token env-token"

    @patch('repository.github.safe_get')
    def test_no_token_no_authorization_header(self, mock_safe_get, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        mock_safe_get.return_value = _response(200, "x")

        GitHubRawClient().fetch("octo", "demo", "uv.lock", "main")
        assert "Authorization" not in mock_safe_get.call_args[1]["headers"]

    def test_custom_base_url(self):
        client = GitHubRawClient(base_url="http://localhost:8080/", token="")
        assert client.file_url("o", "r", "Pipfile.lock", "dev") == "http://localhost:8080/o/r/dev/Pipfile.lock"
