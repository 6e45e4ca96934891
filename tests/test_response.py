"""Tests for status code classification."""

import pytest
from pydantic import ValidationError

from request_fu.response import STATUS_KINDS, Response, ResponseKind, classify


class TestClassify:
    """Tests for classify."""

    def test_ok(self):
        """200 is OK and keeps the body."""
        resp = classify(200, "<html></html>")
        assert resp.kind is ResponseKind.OK
        assert resp.status == 200
        assert resp.body == "<html></html>"

    def test_not_found(self):
        """404 is NOT_FOUND."""
        resp = classify(404, "nope")
        assert resp.kind is ResponseKind.NOT_FOUND
        assert resp.status == 404

    @pytest.mark.parametrize("status", [0, 199, 226, 418, 599, 999, -1])
    def test_unmapped_codes_are_generic(self, status):
        """Unknown codes fall back to GENERIC with the raw status."""
        resp = classify(status, "")
        assert resp.kind is ResponseKind.GENERIC
        assert resp.status == status

    def test_every_mapped_code(self):
        """Every table entry classifies to its kind."""
        for status, kind in STATUS_KINDS.items():
            assert classify(status).kind is kind

    def test_every_kind_but_generic_has_a_code(self):
        """No kind is unreachable except the fallback."""
        mapped = set(STATUS_KINDS.values())
        assert set(ResponseKind) - mapped == {ResponseKind.GENERIC}

    def test_none_body_becomes_empty(self):
        """None body is stored as empty string."""
        assert classify(204, None).body == ""

    def test_headers_copied(self):
        """Later changes to the caller's dict don't leak in."""
        headers = {"Content-Type": "text/plain"}
        resp = classify(200, "x", headers)
        headers["Content-Type"] = "changed"
        assert resp.headers == {"Content-Type": "text/plain"}


class TestResponse:
    """Tests for the Response model."""

    def test_frozen(self):
        """Responses cannot be mutated."""
        resp = classify(200, "x")
        with pytest.raises(ValidationError):
            resp.status = 500

    @pytest.mark.parametrize(
        "status,success,redirect,client_fail,server_fail",
        [
            (200, True, False, False, False),
            (301, False, True, False, False),
            (404, False, False, True, False),
            (503, False, False, False, True),
            (100, False, False, False, False),
        ],
    )
    def test_predicates(self, status, success, redirect, client_fail, server_fail):
        """Status class predicates follow the hundreds digit."""
        resp = classify(status)
        assert resp.is_success is success
        assert resp.is_redirect is redirect
        assert resp.is_client_fail is client_fail
        assert resp.is_server_fail is server_fail

    def test_content_headers_case_insensitive(self):
        """content_type and content_length ignore header case."""
        resp = classify(200, "abc", {"content-type": "text/html", "CONTENT-LENGTH": "3"})
        assert resp.content_type == "text/html"
        assert resp.content_length == 3

    def test_missing_content_length(self):
        """No Content-Length gives None."""
        assert classify(200, "abc").content_length is None

    def test_to_dict(self):
        """to_dict uses the kind value."""
        resp = classify(404, "gone", {"X-Id": "1"})
        assert resp.to_dict() == {"kind": "not_found", "status": 404, "body": "gone", "headers": {"X-Id": "1"}}

    def test_direct_construction(self):
        """Body and headers have empty defaults."""
        resp = Response(kind=ResponseKind.GENERIC, status=299)
        assert resp.body == ""
        assert resp.headers == {}
