import mimetypes
import os
from typing import Optional, Union

from multipart_sdk.config import DEFAULT_CONTENT_TYPE

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

# `mimetypes` reports compression as an encoding of the inner type; the bytes we
# send are the compressed ones, so the encoding decides the media type.
ENCODING_CONTENT_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
    "br": "application/x-brotli",
}


def guess_content_type(path: PathLike) -> str:
    """Guess the content type of a file from its extension.

    Args:
        path: Path of the file. The file does not need to exist.

    Returns:
        The guessed content type, `application/octet-stream` if unknown.
    """
    content_type, encoding = mimetypes.guess_type(os.fsdecode(path), strict=False)
    if encoding is not None:
        return ENCODING_CONTENT_TYPES.get(encoding, DEFAULT_CONTENT_TYPE)
    if content_type is None:
        return DEFAULT_CONTENT_TYPE
    return content_type


def file_name_of(path: PathLike) -> Optional[str]:
    """Get the final component of a path.

    Args:
        path: The path.

    Returns:
        The file name, or None when the path has no final component
        (e.g. `/`, `..` or a path ending with a separator) or when the
        name is not valid UTF-8.
    """
    file_name = os.path.basename(os.fsdecode(path))
    if file_name in {"", ".", ".."}:
        return None
    try:
        file_name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return file_name
