from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from pronlex.resources import open_resource


def test_open_path(tmp_path):
    p = tmp_path / "a.dict"
    p.write_bytes(b"A AH\n")
    with open_resource(p) as f:
        assert f.read() == b"A AH\n"
    with open_resource(str(p)) as f:
        assert f.read() == b"A AH\n"


def test_open_file_url(tmp_path):
    p = tmp_path / "a b.dict"
    p.write_bytes(b"B B IY\n")
    with open_resource(p.as_uri()) as f:
        assert f.read() == b"B B IY\n"


def test_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_resource(tmp_path / "nope.dict")


def test_http_url_fetched_with_httpx():
    resp = MagicMock()
    resp.content = b"ONE W AH N\n"
    resp.raise_for_status.return_value = None
    client = MagicMock()
    client.get.return_value = resp
    client.__enter__.return_value = client
    client.__exit__.return_value = None
    with patch("httpx.Client", return_value=client):
        stream = open_resource("https://example.com/cmudict.dict")
    assert stream.read() == b"ONE W AH N\n"
    client.get.assert_called_with("https://example.com/cmudict.dict")
