import os.path
import re
import sys
from typing import List
from unittest import mock

import pytest
import requests
from requests import Request
from requests_mock.mocker import Mocker

from multipart_sdk.http import client
from multipart_sdk.http.client import (
    MultipartRequest,
    send_multipart_file,
    send_multipart_files,
)
from multipart_sdk.http.errors import SourceReadError

API_URL = "http://some.com/anything"


def _field_names(body: bytes) -> List[bytes]:
    return re.findall(rb'Content-Disposition: form-data; name="([^"]*)"', body)


def test_send_multipart_file(requests_mock: Mocker, sample_text_file: str) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    with open(sample_text_file, "rb") as f:
        file_content = f.read()

    # when
    response = send_multipart_file(
        request=Request("POST", API_URL), name="name", path=sample_text_file
    )

    # then
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert requests_mock.call_count == 1
    sent_request = requests_mock.last_request
    content_type = sent_request.headers["Content-Type"]
    assert content_type.startswith("multipart/form-data; boundary=" + "-" * 27)
    boundary = content_type.split("boundary=", 1)[1].encode("ascii")
    assert sent_request.body.startswith(b"--" + boundary + b"\r\n")
    assert sent_request.body.endswith(b"--" + boundary + b"--\r\n")
    assert file_content in sent_request.body
    assert b'name="name"; filename="sample.txt"' in sent_request.body


def test_send_multipart_files_preserves_order_of_files(
    requests_mock: Mocker, sample_files: List[str]
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})

    # when
    response = send_multipart_files(request=Request("POST", API_URL), files=sample_files)

    # then
    assert response.status_code == 200
    sent_body = requests_mock.last_request.body
    assert _field_names(sent_body) == [b"zeta.txt", b"alpha.bin", b"middle.json"]
    for file_path in sample_files:
        with open(file_path, "rb") as f:
            assert f.read() in sent_body
    assert b"Content-Type: application/json\r\n" in sent_body


def test_send_multipart_files_with_empty_list(requests_mock: Mocker) -> None:
    # given
    requests_mock.put(API_URL, status_code=204)

    # when
    response = send_multipart_files(request=Request("PUT", API_URL), files=[])

    # then
    assert response.status_code == 204
    content_type = requests_mock.last_request.headers["Content-Type"]
    boundary = content_type.split("boundary=", 1)[1].encode("ascii")
    assert requests_mock.last_request.body == b"--" + boundary + b"--\r\n"


def test_send_multipart_file_when_file_is_missing(
    requests_mock: Mocker, sample_text_file: str
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    missing_path = os.path.join(os.path.dirname(sample_text_file), "missing.txt")

    # when
    with pytest.raises(SourceReadError):
        _ = send_multipart_file(
            request=Request("POST", API_URL), name="name", path=missing_path
        )

    # then
    assert requests_mock.call_count == 0


def test_send_multipart_files_when_one_of_files_is_missing(
    requests_mock: Mocker, sample_files: List[str]
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    missing_path = os.path.join(os.path.dirname(sample_files[0]), "missing.txt")

    # when
    with pytest.raises(SourceReadError):
        _ = send_multipart_files(
            request=Request("POST", API_URL),
            files=[sample_files[0], missing_path, sample_files[1]],
        )

    # then
    assert requests_mock.call_count == 0


def test_send_multipart_file_returns_error_responses_unchanged(
    requests_mock: Mocker, sample_text_file: str
) -> None:
    # given
    requests_mock.post(API_URL, json={"message": "Internal error."}, status_code=500)

    # when
    response = send_multipart_file(
        request=Request("POST", API_URL), name="name", path=sample_text_file
    )

    # then
    assert response.status_code == 500
    assert response.json() == {"message": "Internal error."}


def test_send_multipart_file_passes_transport_errors_through(
    requests_mock: Mocker, sample_text_file: str
) -> None:
    # given
    requests_mock.post(API_URL, exc=requests.exceptions.ConnectTimeout)

    # when
    with pytest.raises(requests.exceptions.ConnectTimeout):
        _ = send_multipart_file(
            request=Request("POST", API_URL), name="name", path=sample_text_file
        )


def test_send_multipart_file_overrides_content_type_and_keeps_other_headers(
    requests_mock: Mocker, sample_text_file: str
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    request = Request(
        "POST",
        API_URL,
        headers={"Content-Type": "application/json", "X-Custom": "value"},
        params={"api_key": "my-api-key"},
    )

    # when
    _ = send_multipart_file(request=request, name="name", path=sample_text_file)

    # then
    sent_request = requests_mock.last_request
    assert sent_request.headers["Content-Type"].startswith("multipart/form-data;")
    assert sent_request.headers["X-Custom"] == "value"
    assert sent_request.qs == {"api_key": ["my-api-key"]}


def test_send_multipart_file_uses_given_session(
    requests_mock: Mocker, sample_text_file: str
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    session = requests.Session()
    session.headers["Authorization"] = "Bearer some-token"

    # when
    with mock.patch.object(session, "send", wraps=session.send) as send_mock:
        _ = send_multipart_file(
            request=Request("POST", API_URL),
            name="name",
            path=sample_text_file,
            session=session,
        )

    # then
    send_mock.assert_called_once()
    assert requests_mock.last_request.headers["Authorization"] == "Bearer some-token"


def test_multipart_request_wrapper(
    requests_mock: Mocker, sample_text_file: str, sample_files: List[str]
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    multipart_request = MultipartRequest(Request("POST", API_URL))

    # when
    single_response = multipart_request.send_multipart_file("name", sample_text_file)
    single_body = requests_mock.last_request.body
    multiple_response = multipart_request.send_multipart_files(sample_files)
    multiple_body = requests_mock.last_request.body

    # then
    assert single_response.status_code == 200
    assert multiple_response.status_code == 200
    assert _field_names(single_body) == [b"name"]
    assert _field_names(multiple_body) == [b"zeta.txt", b"alpha.bin", b"middle.json"]
    assert requests_mock.call_count == 2


def test_send_multipart_files_uses_empty_field_name_for_path_without_file_name(
    requests_mock: Mocker,
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    builder = client.MultipartBuilder()

    # when
    with mock.patch.object(
        client, "MultipartBuilder", return_value=builder
    ), mock.patch.object(builder, "add_file", return_value=builder) as add_file_mock:
        _ = send_multipart_files(
            request=Request("POST", API_URL), files=["some/dir/"]
        )

    # then
    add_file_mock.assert_called_once_with("", "some/dir/")


@pytest.mark.skipif(
    sys.platform != "linux", reason="file system must accept non UTF-8 file names"
)
def test_send_multipart_files_with_non_utf8_file_name(
    requests_mock: Mocker, sample_files: List[str]
) -> None:
    # given
    requests_mock.post(API_URL, json={"status": "ok"})
    raw_path = os.path.join(os.fsencode(os.path.dirname(sample_files[0])), b"caf\xe9.txt")
    with open(raw_path, "wb") as f:
        f.write(b"coffee")

    # when
    response = send_multipart_files(
        request=Request("POST", API_URL),
        files=[sample_files[0], os.fsdecode(raw_path)],
    )

    # then
    assert response.status_code == 200
    sent_body = requests_mock.last_request.body
    assert _field_names(sent_body) == [b"zeta.txt", b""]
    assert (
        b'Content-Disposition: form-data; name=""\r\n'
        b"Content-Type: text/plain\r\n\r\n"
        b"coffee\r\n" in sent_body
    )
