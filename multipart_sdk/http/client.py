import os
from typing import Optional, Sequence, Union

import requests
from requests import Request, Response, Session

from multipart_sdk.config import CONTENT_TYPE_HEADER
from multipart_sdk.http.encoder import MultipartBuilder
from multipart_sdk.http.entities import MultipartBody
from multipart_sdk.http.utils.mime import file_name_of
from multipart_sdk.http.utils.urls import redact_url_for_logs
from multipart_sdk.utils.logging import get_logger

PathLike = Union[str, "os.PathLike[str]"]

logger = get_logger("http.client")


def send_multipart_file(
    request: Request,
    name: str,
    path: PathLike,
    session: Optional[Session] = None,
) -> Response:
    """Send a single file as a `multipart/form-data` body.

    Args:
        request: The outbound request. Its `Content-Type` header and body are
            overwritten.
        name: The form field name of the file.
        path: Path of the file to send.
        session: Session used to send the request. A short-lived one is created
            when not given.

    Returns:
        The response of the server, whatever its status code.

    Raises:
        SourceReadError: If the file cannot be read. Nothing is sent then.
        requests.RequestException: Transport errors, passed through unchanged.
    """
    body = MultipartBuilder().add_file(name, path).finish()
    return _send_body(request=request, body=body, session=session)


def send_multipart_files(
    request: Request,
    files: Sequence[PathLike],
    session: Optional[Session] = None,
) -> Response:
    """Send several files as a single `multipart/form-data` body.

    Every file becomes a field named after the file itself. Fields follow the
    order of `files`.

    Args:
        request: The outbound request. Its `Content-Type` header and body are
            overwritten.
        files: Paths of the files to send.
        session: Session used to send the request. A short-lived one is created
            when not given.

    Returns:
        The response of the server, whatever its status code.

    Raises:
        SourceReadError: If any file cannot be read. Nothing is sent then.
        requests.RequestException: Transport errors, passed through unchanged.
    """
    builder = MultipartBuilder()
    for file_path in files:
        builder = builder.add_file(file_name_of(file_path) or "", file_path)
    body = builder.finish()
    return _send_body(request=request, body=body, session=session)


class MultipartRequest:
    """Outbound request with multipart upload methods attached.

    Example:
        >>> request = requests.Request("POST", "http://some.service.url")
        >>> response = MultipartRequest(request).send_multipart_file("name", "1.txt")
    """

    def __init__(self, request: Request, session: Optional[Session] = None):
        self.__request = request
        self.__session = session

    @property
    def request(self) -> Request:
        return self.__request

    def send_multipart_file(self, name: str, path: PathLike) -> Response:
        return send_multipart_file(
            request=self.__request,
            name=name,
            path=path,
            session=self.__session,
        )

    def send_multipart_files(self, files: Sequence[PathLike]) -> Response:
        return send_multipart_files(
            request=self.__request,
            files=files,
            session=self.__session,
        )


def _send_body(
    request: Request,
    body: MultipartBody,
    session: Optional[Session],
) -> Response:
    request.headers[CONTENT_TYPE_HEADER] = body.content_type
    request.data = body.data
    request.files = None
    request.json = None
    logger.debug(
        "Sending multipart body of %d bytes: %s %s",
        len(body.data),
        request.method,
        redact_url_for_logs(url=str(request.url)),
    )
    if session is not None:
        return session.send(session.prepare_request(request))
    with requests.Session() as short_lived_session:
        return short_lived_session.send(short_lived_session.prepare_request(request))
