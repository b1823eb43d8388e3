"""Tests for the GitHub latest-release lookup (infra/github_releases.py).

``requests.get`` is patched; no network access.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
import requests

from suiup.exceptions import UpdateCheckError
from suiup.infra.github_releases import (
    REQUEST_TIMEOUT_S,
    get_latest_release,
    latest_release_tag,
)


def _response(payload: object, status_error: Exception | None = None) -> MagicMock:
    response = MagicMock(name="response")
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def mock_get() -> Iterator[MagicMock]:
    with patch("suiup.infra.github_releases.requests.get") as mock:
        yield mock


class TestGetLatestRelease:
    def test_requests_latest_release_url(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": "v1.0.0"})

        assert get_latest_release("MystenLabs/walrus") == {"tag_name": "v1.0.0"}
        url = mock_get.call_args.args[0]
        assert url == "https://api.github.com/repos/MystenLabs/walrus/releases/latest"
        assert mock_get.call_args.kwargs["timeout"] == REQUEST_TIMEOUT_S

    def test_anonymous_request_has_no_auth_header(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": "v1"})
        get_latest_release("MystenLabs/sui")
        assert "Authorization" not in mock_get.call_args.kwargs["headers"]

    def test_token_sent_as_bearer(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": "v1"})
        get_latest_release("MystenLabs/sui", github_token="abc")
        assert mock_get.call_args.kwargs["headers"]["Authorization"] == "Bearer abc"

    def test_transport_error(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(UpdateCheckError, match="Could not fetch"):
            get_latest_release("MystenLabs/sui")

    def test_http_error(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({}, requests.HTTPError("403 rate limited"))
        with pytest.raises(UpdateCheckError):
            get_latest_release("MystenLabs/sui")

    def test_invalid_json(self, mock_get: MagicMock) -> None:
        response = _response(None)
        response.json.side_effect = ValueError("not json")
        mock_get.return_value = response
        with pytest.raises(UpdateCheckError, match="Malformed"):
            get_latest_release("MystenLabs/sui")

    def test_non_object_payload(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response(["v1"])
        with pytest.raises(UpdateCheckError, match="Malformed"):
            get_latest_release("MystenLabs/sui")


class TestLatestReleaseTag:
    def test_defaults_to_suiup_repo(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"tag_name": "v0.2.0"})
        assert latest_release_tag() == "v0.2.0"
        assert "/repos/MystenLabs/suiup/" in mock_get.call_args.args[0]

    @pytest.mark.parametrize("payload", [{}, {"tag_name": ""}, {"tag_name": 3}])
    def test_missing_tag(self, mock_get: MagicMock, payload: dict) -> None:
        mock_get.return_value = _response(payload)
        with pytest.raises(UpdateCheckError, match="no tag name"):
            latest_release_tag("MystenLabs/mvr")
