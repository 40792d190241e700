"""
Unit tests for token_metadata.json_metadata module.

Tests cover:
- fetch_json_metadata success through a session and through requests.get
- Empty URIs
- Transport and HTTP status errors
- Invalid and non-object JSON bodies
"""

from unittest.mock import Mock, patch

import pytest
import requests

from token_metadata.errors import JsonMetadataError
from token_metadata.json_metadata import DEFAULT_TIMEOUT, fetch_json_metadata

URI = "https://example.com/my-nft.json"


def _session(resp: Mock) -> Mock:
    session = Mock(spec=requests.Session)
    session.get.return_value = resp
    return session


def _response(body: object = None, *, json_error: Exception | None = None) -> Mock:
    resp = Mock(spec=requests.Response)
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


class TestFetchJsonMetadata:
    """Tests for fetch_json_metadata."""

    def test_with_session(self) -> None:
        """Test a successful download through a session."""
        session = _session(_response({"name": "My NFT", "image": "https://x/1.png"}))

        body = fetch_json_metadata(f"  {URI} ", session=session, timeout=5)

        assert body["name"] == "My NFT"
        session.get.assert_called_once_with(URI, timeout=5)

    def test_default_requests_get(self) -> None:
        """Test that requests.get is used without a session."""
        with patch("token_metadata.json_metadata.requests.get") as get:
            get.return_value = _response({"name": "x"})
            assert fetch_json_metadata(URI) == {"name": "x"}
        get.assert_called_once_with(URI, timeout=DEFAULT_TIMEOUT)

    def test_empty_uri(self) -> None:
        """Test that an empty URI is rejected before any request."""
        session = _session(_response({}))
        with pytest.raises(JsonMetadataError, match="empty"):
            fetch_json_metadata("   ", session=session)
        session.get.assert_not_called()

    def test_connection_error(self) -> None:
        """Test that transport errors are wrapped."""
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(JsonMetadataError, match="Failed to fetch JSON metadata"):
            fetch_json_metadata(URI, session=session)

    def test_http_error(self) -> None:
        """Test that error statuses are wrapped."""
        resp = _response({})
        resp.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        with pytest.raises(JsonMetadataError, match="404"):
            fetch_json_metadata(URI, session=_session(resp))

    def test_invalid_json(self) -> None:
        """Test that an undecodable body is reported as invalid JSON."""
        resp = _response(json_error=requests.JSONDecodeError("Expecting value", "<", 0))
        with pytest.raises(JsonMetadataError, match="Invalid JSON metadata"):
            fetch_json_metadata(URI, session=_session(resp))

    def test_non_object(self) -> None:
        """Test that a JSON array is not metadata."""
        with pytest.raises(JsonMetadataError, match="must be an object, got list"):
            fetch_json_metadata(URI, session=_session(_response([1, 2])))
