"""
Tests for MentortoolsClient: session setup, envelope unwrapping, query
encoding and multipart upload.
"""

from unittest.mock import patch

import pytest
import requests

from mentortools_mcp.library.api_client import MentortoolsClient, encode_query
from mentortools_mcp.library.exceptions import (
    ClientNotInitializedError,
    ConfigurationError,
    MentortoolsAPIError,
)

from .conftest import envelope, make_response


class TestInitialization:
    def test_not_initialized_without_key(self):
        client = MentortoolsClient()
        assert client.is_initialized is False
        with pytest.raises(ClientNotInitializedError) as exc:
            client.execute("/courses/v1/")
        assert "MENTORTOOLS_API_KEY" in str(exc.value)

    def test_empty_key_rejected(self):
        with pytest.raises(ConfigurationError):
            MentortoolsClient().initialize("")

    def test_session_headers(self, client):
        headers = client.session.headers
        assert headers["Authorization"] == "Bearer test-key"
        assert headers["Accept"] == "application/json"
        # Content-Type is left to requests so multipart keeps its boundary.
        assert "Content-Type" not in headers

    def test_close_forgets_session(self, client):
        client.close()
        assert client.is_initialized is False

    def test_base_url_trailing_slash_stripped(self):
        client = MentortoolsClient("k", base_url="https://example.test/api/")
        assert client.base_url == "https://example.test/api"


class TestExecute:
    def test_returns_envelope_result(self, client):
        courses = [{"id": 1, "title": "Intro"}]
        with patch.object(client.session, "request", return_value=make_response(200, envelope(courses))) as request:
            result = client.execute("/courses/v1/", "GET", query={"limit": 15, "offset": 0})

        assert result == courses
        method, url = request.call_args.args
        assert method == "GET"
        assert url == "https://app.mentortools.com/public_api/courses/v1/"
        assert request.call_args.kwargs["params"] == {"limit": 15, "offset": 0}
        assert request.call_args.kwargs["json"] is None
        assert request.call_args.kwargs["timeout"] == 30

    def test_sends_json_body(self, client):
        with patch.object(client.session, "request", return_value=make_response(200, envelope(42))) as request:
            result = client.execute("/courses/v1/", "post", body={"title": "Intro"})

        assert result == 42
        assert request.call_args.args[0] == "POST"
        assert request.call_args.kwargs["json"] == {"title": "Intro"}

    def test_done_false_uses_envelope_error(self, client):
        response = make_response(200, envelope(done=False, error="Course is locked"))
        with patch.object(client.session, "request", return_value=response):
            with pytest.raises(MentortoolsAPIError) as exc:
                client.execute("/courses/v1/1", "DELETE")
        assert str(exc.value) == "Course is locked"

    def test_done_false_without_error_uses_fallback(self, client):
        with patch.object(client.session, "request", return_value=make_response(200, {"done": False})):
            with pytest.raises(MentortoolsAPIError) as exc:
                client.execute("/courses/v1/1")
        assert str(exc.value) == "API request failed"

    def test_http_error_raised(self, client):
        response = make_response(404, envelope(done=False, error="not found"))
        with patch.object(client.session, "request", return_value=response):
            with pytest.raises(requests.HTTPError) as exc:
                client.execute("/courses/v1/999")
        assert exc.value.response.status_code == 404

    def test_non_json_body(self, client):
        with patch.object(client.session, "request", return_value=make_response(200, text="<html>oops</html>")):
            with pytest.raises(MentortoolsAPIError):
                client.execute("/courses/v1/")

    def test_body_without_envelope(self, client):
        with patch.object(client.session, "request", return_value=make_response(200, [1, 2, 3])):
            with pytest.raises(MentortoolsAPIError):
                client.execute("/courses/v1/")

    def test_unsupported_method(self, client):
        with pytest.raises(ValueError):
            client.execute("/courses/v1/", "TRACE")


class TestEncodeQuery:
    def test_booleans_lowercase(self):
        assert encode_query({"archived": False}) == {"archived": "false"}
        assert encode_query({"archived": True}) == {"archived": "true"}

    def test_none_values_dropped(self):
        assert encode_query({"limit": 10, "filename": None}) == {"limit": 10}

    def test_empty(self):
        assert encode_query(None) is None
        assert encode_query({"filename": None}) is None


class TestUpload:
    def test_multipart_with_folder(self, client):
        meta = {"id": 5, "name": "a.pdf"}
        with patch.object(client.session, "post", return_value=make_response(200, envelope(meta))) as post:
            result = client.upload_file(b"%PDF", "a.pdf", parent_folder_id=9)

        assert result == meta
        assert post.call_args.args[0] == "https://app.mentortools.com/public_api/mediastorage/v1/files/upload"
        assert post.call_args.kwargs["files"] == {"file": ("a.pdf", b"%PDF")}
        assert post.call_args.kwargs["data"] == {"parent_folder_id": "9"}

    @pytest.mark.parametrize("folder", [None, 0])
    def test_root_folder_not_sent(self, client, folder):
        with patch.object(client.session, "post", return_value=make_response(200, envelope({"id": 1}))) as post:
            client.upload_file(b"x", "x.txt", parent_folder_id=folder)
        assert post.call_args.kwargs["data"] is None

    def test_upload_failure_fallback(self, client):
        with patch.object(client.session, "post", return_value=make_response(200, {"done": False})):
            with pytest.raises(MentortoolsAPIError) as exc:
                client.upload_file(b"x", "x.txt")
        assert str(exc.value) == "File upload failed"
