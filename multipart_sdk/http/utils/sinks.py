import io
import tempfile
from typing import Optional

from multipart_sdk.config import MULTIPART_SPOOL_MAX_SIZE


class InMemorySink:
    """Append-only output buffer kept entirely in memory."""

    def __init__(self):
        self._buffer = io.BytesIO()

    def write(self, payload: bytes) -> None:
        self._buffer.write(payload)

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()

    def close(self) -> None:
        self._buffer.close()

    @property
    def closed(self) -> bool:
        return self._buffer.closed


class SpooledSink:
    """Append-only output buffer that rolls over to a temporary file.

    Bodies up to `max_size` bytes stay in memory; larger ones are moved to
    disk, so I/O errors of the temporary file may surface on `write`.
    """

    def __init__(self, max_size: Optional[int] = None):
        if max_size is None:
            max_size = MULTIPART_SPOOL_MAX_SIZE
        self._file = tempfile.SpooledTemporaryFile(max_size=max_size, mode="w+b")

    def write(self, payload: bytes) -> None:
        self._file.write(payload)

    def getvalue(self) -> bytes:
        self._file.flush()
        position = self._file.tell()
        self._file.seek(0)
        try:
            return self._file.read()
        finally:
            self._file.seek(position)

    def close(self) -> None:
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed
