import os
import random
from contextlib import contextmanager
from typing import BinaryIO, Generator, Optional, Union

from multipart_sdk.config import (
    BOUNDARY_LENGTH,
    DEFAULT_CONTENT_TYPE,
    MULTIPART_COPY_CHUNK_SIZE,
)
from multipart_sdk.http.entities import FieldHeaders, MultipartBody
from multipart_sdk.http.errors import (
    BuilderClosedError,
    FieldEncodingError,
    SinkWriteError,
    SourceReadError,
)
from multipart_sdk.http.utils.boundary import (
    boundary_parameter,
    generate_boundary,
    multipart_content_type,
)
from multipart_sdk.http.utils.mime import file_name_of, guess_content_type
from multipart_sdk.http.utils.sinks import InMemorySink
from multipart_sdk.utils.logging import get_logger

LINE_BREAK = b"\r\n"

logger = get_logger("http.encoder")


class MultipartBuilder:
    """Streaming builder of `multipart/form-data` bodies.

    Fields are framed into the sink as soon as they are added, in the order
    they are added. Each `add_*` method returns the builder, so calls can be
    chained:

        content_type, data = (
            MultipartBuilder()
            .add_file("test", "1.txt")
            .add_text("name", "value")
            .finish()
        )

    `finish()` closes the builder. A failing `add_*` call closes it as well,
    the partially written body is dropped. Any operation on a closed builder
    raises `BuilderClosedError`.
    """

    def __init__(
        self,
        random_source: Optional[random.Random] = None,
        sink=None,
        boundary_length: int = BOUNDARY_LENGTH,
    ):
        self.__boundary = generate_boundary(
            length=boundary_length, random_source=random_source
        )
        self.__sink = sink if sink is not None else InMemorySink()
        self.__data_written = False
        self.__fields_count = 0
        self.__closed = False

    @property
    def boundary(self) -> str:
        return self.__boundary

    @property
    def content_type(self) -> str:
        return multipart_content_type(boundary=self.__boundary)

    @property
    def has_fields(self) -> bool:
        return self.__data_written

    @property
    def closed(self) -> bool:
        return self.__closed

    def __enter__(self) -> "MultipartBuilder":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Drop the body and release the sink. Safe to call more than once."""
        if self.__closed:
            return None
        self.__closed = True
        self.__sink.close()

    def add_text(self, name: str, text: str) -> "MultipartBuilder":
        """Add a text field.

        Args:
            name: The field name.
            text: The field value, encoded as UTF-8.

        Returns:
            The builder.

        Raises:
            FieldEncodingError: If the name or the value cannot be encoded as UTF-8.
            SinkWriteError: If the output sink cannot be written.
        """
        self._ensure_open()
        with self._abort_on_error():
            headers = FieldHeaders(name=name)
            payload = _encode_text(value=text, field_name=name)
            self._write_field_headers(headers=headers)
            self._write(payload)
        return self

    def add_file(
        self, name: str, path: Union[str, "os.PathLike[str]"]
    ) -> "MultipartBuilder":
        """Add a file field read from the local file system.

        The content type is guessed from the file extension and the file name is
        taken from the last component of the path.

        Args:
            name: The field name.
            path: Path of the file.

        Returns:
            The builder.

        Raises:
            SourceReadError: If the file cannot be opened or read.
            FieldEncodingError: If the field name cannot be encoded as UTF-8.
            SinkWriteError: If the output sink cannot be written.
        """
        self._ensure_open()
        source_name = os.fsdecode(path)
        try:
            stream = open(path, "rb")
        except OSError as error:
            self.close()
            raise SourceReadError(
                f"Could not open file {source_name}: {error}",
                source_name=source_name,
            ) from error
        with stream:
            return self.add_stream(
                stream,
                name=name,
                filename=file_name_of(path),
                content_type=guess_content_type(path),
            )

    def add_stream(
        self,
        stream: BinaryIO,
        name: str,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> "MultipartBuilder":
        """Add a file field read from a binary stream.

        The stream is read until exhausted and copied verbatim.

        Args:
            stream: Readable binary source.
            name: The field name.
            filename: The file name announced to the server.
            content_type: The content type of the payload. Defaults to
                `application/octet-stream`, a `Content-Type` line is always
                written so that servers treat the field as a file.

        Returns:
            The builder.

        Raises:
            SourceReadError: If reading the stream fails.
            FieldEncodingError: If the field name or file name cannot be encoded
                as UTF-8.
            SinkWriteError: If the output sink cannot be written.
        """
        self._ensure_open()
        if content_type is None:
            content_type = DEFAULT_CONTENT_TYPE
        with self._abort_on_error():
            self._write_field_headers(
                headers=FieldHeaders(
                    name=name, filename=filename, content_type=content_type
                )
            )
            self._copy_stream(stream=stream, source_name=filename or name)
        return self

    def finish(self) -> MultipartBody:
        """Terminate the body.

        The closing boundary is written even if no field was added.

        Returns:
            The finished body together with its `Content-Type` header value.

        Raises:
            SinkWriteError: If the output sink cannot be written.
        """
        self._ensure_open()
        with self._abort_on_error():
            if self.__data_written:
                self._write(LINE_BREAK)
            self._write(
                f"--{boundary_parameter(boundary=self.__boundary)}--".encode("ascii")
                + LINE_BREAK
            )
            data = self._read_sink()
        result = MultipartBody(content_type=self.content_type, data=data)
        self.close()
        logger.debug(
            "Finished multipart body with %d field(s), %d bytes",
            self.__fields_count,
            len(data),
        )
        return result

    def _write_boundary(self) -> None:
        if self.__data_written:
            self._write(LINE_BREAK)
        self._write(
            f"--{boundary_parameter(boundary=self.__boundary)}".encode("ascii")
            + LINE_BREAK
        )

    def _write_field_headers(self, headers: FieldHeaders) -> None:
        rendered_headers = _render_headers(headers=headers)
        self._write_boundary()
        self.__data_written = True
        self.__fields_count += 1
        self._write(rendered_headers)
        logger.debug(
            "Added field name=%s filename=%s content_type=%s",
            headers.name,
            headers.filename,
            headers.content_type,
        )

    def _copy_stream(self, stream: BinaryIO, source_name: str) -> None:
        while True:
            try:
                chunk = stream.read(MULTIPART_COPY_CHUNK_SIZE)
            except (OSError, ValueError) as error:
                raise SourceReadError(
                    f"Could not read source {source_name}: {error}",
                    source_name=source_name,
                ) from error
            if not chunk:
                return None
            if not isinstance(chunk, (bytes, bytearray, memoryview)):
                raise SourceReadError(
                    f"Source {source_name} must be opened in binary mode, "
                    f"got {type(chunk).__name__} chunk",
                    source_name=source_name,
                )
            self._write(chunk)

    def _write(self, payload: bytes) -> None:
        try:
            self.__sink.write(payload)
        except (OSError, ValueError) as error:
            raise SinkWriteError(f"Could not write multipart body: {error}") from error

    def _read_sink(self) -> bytes:
        try:
            return self.__sink.getvalue()
        except (OSError, ValueError) as error:
            raise SinkWriteError(f"Could not read back multipart body: {error}") from error

    def _ensure_open(self) -> None:
        if self.__closed:
            raise BuilderClosedError(
                "Multipart builder is closed - it was already finished or a previous field failed"
            )

    @contextmanager
    def _abort_on_error(self) -> Generator[None, None, None]:
        try:
            yield None
        except BaseException:
            self.close()
            raise


def _render_headers(headers: FieldHeaders) -> bytes:
    try:
        return headers.render()
    except UnicodeEncodeError as error:
        raise FieldEncodingError(
            f"Headers of field {headers.name!r} cannot be encoded as UTF-8: {error}"
        ) from error


def _encode_text(value: str, field_name: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as error:
        raise FieldEncodingError(
            f"Value of field {field_name!r} cannot be encoded as UTF-8: {error}"
        ) from error
