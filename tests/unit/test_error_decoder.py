"""Unit tests for error response decoding."""

import httpx

from honeycomb_client.domain.errors import DetailedError, ErrorTypeDetail
from honeycomb_client.infrastructure.http.error_decoder import decode_error


def test_decode_problem_detail():
    """Test decoding a full problem-detail body."""
    response = httpx.Response(
        422,
        json={
            "status": 422,
            "error": "The provided input is invalid.",
            "request_id": "req-123",
            "type": "https://api.honeycomb.io/problems/validation-failed",
            "title": "The provided input is invalid.",
            "type_detail": [
                {"code": "missing", "field": "name", "description": "cannot be blank"},
            ],
        },
    )

    err = decode_error(response)

    assert isinstance(err, DetailedError)
    assert err.status == 422
    assert err.message == "The provided input is invalid."
    assert err.request_id == "req-123"
    assert err.type == "https://api.honeycomb.io/problems/validation-failed"
    assert err.details == (ErrorTypeDetail(code="missing", field="name", description="cannot be blank"),)
    assert str(err) == "missing name - cannot be blank"


def test_decode_uses_transport_status_when_body_is_silent():
    """Test a missing or zero status is replaced with the HTTP status."""
    response = httpx.Response(404, json={"error": "Dataset not found"})

    err = decode_error(response)

    assert err.status == 404
    assert err.is_not_found
    assert str(err) == "Dataset not found"


def test_decode_keeps_status_from_body():
    """Test a status present in the body is kept."""
    response = httpx.Response(400, json={"status": 409, "error": "conflict"})

    assert decode_error(response).status == 409


def test_decode_falls_back_on_unparsable_body():
    """Test a non-JSON body yields the status line."""
    response = httpx.Response(400, content=b"<html>Bad Request</html>")

    err = decode_error(response)

    assert err.status == 400
    assert err.message == "400 Bad Request"
    assert err.details == ()
    assert err.type == ""
    assert err.title == ""


def test_decode_falls_back_on_empty_body():
    """Test an empty body yields the status line."""
    err = decode_error(httpx.Response(502))

    assert err.status == 502
    assert err.message == "502 Bad Gateway"


def test_decode_falls_back_on_unexpected_json():
    """Test a JSON body of the wrong shape yields the status line."""
    err = decode_error(httpx.Response(500, json=["unexpected"]))

    assert err.status == 500
    assert err.message == "500 Internal Server Error"


def test_decode_reads_request_id_header():
    """Test the request ID falls back to the Request-Id header."""
    response = httpx.Response(400, json={"error": "bad"}, headers={"Request-Id": "hdr-456"})

    assert decode_error(response).request_id == "hdr-456"


def test_decode_jsonapi_single_error():
    """Test decoding a JSON:API body with one error."""
    response = httpx.Response(
        422,
        content=b'{"errors": [{"code": "validation/invalid", "title": "name is too long",'
        b' "source": {"pointer": "/data/attributes/name"}}]}',
        headers={"Content-Type": "application/vnd.api+json"},
    )

    err = decode_error(response)

    assert err.status == 422
    assert err.type == "validation/invalid"
    assert err.title == "name is too long"
    assert err.details == (ErrorTypeDetail(field="/data/attributes/name", description="name is too long"),)


def test_decode_jsonapi_multiple_errors():
    """Test decoding a JSON:API body with several errors."""
    response = httpx.Response(
        400,
        content=(
            b'{"errors": ['
            b'{"title": "Invalid", "detail": "bad page size", "source": {"parameter": "page[size]"}},'
            b'{"title": "Invalid", "detail": "bad header", "source": {"header": "Accept"}}'
            b"]}"
        ),
        headers={"Content-Type": "application/vnd.api+json; charset=utf-8"},
    )

    err = decode_error(response)

    assert err.title == "Invalid"
    assert str(err) == "parameter page[size] - bad page size\nAccept header - bad header"


def test_decode_problem_detail_with_null_members():
    """Test JSON nulls in a problem-detail body decode as empty values."""
    response = httpx.Response(
        400,
        content=b'{"status": null, "error": "bad filter", "request_id": null, "type": null, "title": null}',
        headers={"Request-Id": "hdr-789"},
    )

    err = decode_error(response)

    assert err.status == 400
    assert err.message == "bad filter"
    assert str(err) == "bad filter"
    assert err.request_id == "hdr-789"
    assert err.type == ""
    assert err.title == ""


def test_decode_type_detail_with_null_field():
    """Test a null detail field keeps the remaining detail."""
    response = httpx.Response(
        422,
        content=(
            b'{"status": 422, "error": "invalid", "type_detail": ['
            b'{"code": "missing", "field": null, "description": "name required"}]}'
        ),
    )

    err = decode_error(response)

    assert err.status == 422
    assert err.message == "invalid"
    assert err.details == (ErrorTypeDetail(code="missing", description="name required"),)
    assert str(err) == "missing name required"


def test_decode_jsonapi_with_null_members():
    """Test JSON nulls in a JSON:API error decode as empty values."""
    response = httpx.Response(
        404,
        content=b'{"errors": [{"code": null, "title": "not found", "source": {"pointer": null, "parameter": "id"}}]}',
        headers={"Content-Type": "application/vnd.api+json"},
    )

    err = decode_error(response)

    assert err.type == ""
    assert err.title == "not found"
    assert err.details == (ErrorTypeDetail(field="parameter id", description="not found"),)
