import pytest
import requests

from cloudsigma_client.exceptions import (
    CloudSigmaError,
    EmptyArgumentError,
    EmptyPayloadError,
    ResponseError,
    UnexpectedResponseError,
    ValidationError,
)
from cloudsigma_client.http import check_response
from cloudsigma_client.models import ErrorEntry

URL = "https://zrh.cloudsigma.com/api/2.0/servers/"


def build_raw_response(status_code, content=b"", headers=None):
    request = requests.Request("GET", URL).prepare()
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.headers.update(headers or {})
    response.request = request
    response.url = URL
    return response


def test_response_error_message():
    err = ResponseError(
        method="GET",
        url=URL,
        status_code=400,
        errors=[ErrorEntry(message="error")],
    )

    assert str(err) == f"GET {URL}: 400 [ErrorEntry(message='error', point=None, type=None)]"


def test_response_error_message_with_request_id():
    err = ResponseError(
        method="GET",
        url=URL,
        status_code=500,
        errors=[ErrorEntry(message="error")],
        request_id="long-uuid",
    )

    assert str(err) == (
        f'GET {URL}: 500 (request "long-uuid") '
        "[ErrorEntry(message='error', point=None, type=None)]"
    )


def test_response_error_is_a_cloudsigma_error():
    err = ResponseError(method="DELETE", url=URL, status_code=404)

    assert isinstance(err, CloudSigmaError)
    assert err.errors == []
    assert err.status_code == 404


def test_validation_errors_have_fixed_messages():
    assert str(EmptyArgumentError()) == "argument cannot be empty"
    assert str(EmptyPayloadError()) == "empty payload not allowed"
    assert isinstance(EmptyArgumentError(), ValidationError)
    assert isinstance(EmptyPayloadError(), ValidationError)


def test_error_entry_reads_wire_names():
    entry = ErrorEntry.model_validate(
        {"error_message": "Cannot start guest", "error_point": "drives", "error_type": "permission"}
    )

    assert entry.message == "Cannot start guest"
    assert entry.point == "drives"
    assert entry.type == "permission"


@pytest.mark.parametrize("status_code", [200, 201, 202, 204, 299])
def test_check_response_accepts_success(status_code):
    assert check_response(build_raw_response(status_code)) is None


def test_check_response_decodes_error_entries():
    raw = build_raw_response(
        400,
        b'[{"error_point": null, "error_type": "validation", "error_message": "error"}]',
    )

    with pytest.raises(ResponseError) as excinfo:
        check_response(raw)

    err = excinfo.value
    assert err.method == "GET"
    assert err.url == URL
    assert [e.message for e in err.errors] == ["error"]
    assert err.errors[0].type == "validation"
    assert err.response is raw


def test_check_response_with_empty_body():
    with pytest.raises(ResponseError) as excinfo:
        check_response(build_raw_response(503))

    assert excinfo.value.errors == []
    assert excinfo.value.status_code == 503


def test_check_response_with_object_body():
    raw = build_raw_response(400, b'{"error_message": "not a list"}')

    with pytest.raises(UnexpectedResponseError) as excinfo:
        check_response(raw)

    assert excinfo.value.status_code == 400


def test_check_response_copies_request_id():
    raw = build_raw_response(409, b"[]", {"X-REQUEST-ID": "req-1"})

    with pytest.raises(ResponseError) as excinfo:
        check_response(raw)

    assert excinfo.value.request_id == "req-1"
    assert '(request "req-1")' in str(excinfo.value)


def test_check_response_is_repeatable():
    raw = build_raw_response(400, b'[{"error_message": "error"}]')

    for _ in range(2):
        with pytest.raises(ResponseError) as excinfo:
            check_response(raw)
        assert excinfo.value.errors[0].message == "error"
