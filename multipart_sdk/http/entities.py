from dataclasses import dataclass
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class FieldHeaders:
    """Dataclass for the header block of a single form field.

    Attributes:
        name: The form field name.
        filename: The file name announced to the server, if any.
        content_type: The declared content type, if any. Text fields carry none.
    """

    name: str
    filename: Optional[str] = None
    content_type: Optional[str] = None

    def render(self) -> bytes:
        """Render the header lines, including the blank line that ends them."""
        disposition = f'Content-Disposition: form-data; name="{self.name}"'
        if self.filename is not None:
            disposition = f'{disposition}; filename="{self.filename}"'
        lines = [disposition]
        if self.content_type is not None:
            lines.append(f"Content-Type: {self.content_type}")
        return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")


@dataclass(frozen=True)
class MultipartBody:
    """Dataclass for a finished multipart body.

    Unpacks as `(content_type, data)`.

    Attributes:
        content_type: Value of the `Content-Type` header, boundary included.
        data: The encoded body.
    """

    content_type: str
    data: bytes

    def __iter__(self) -> Iterator[Union[str, bytes]]:
        yield self.content_type
        yield self.data
