from typing import Optional


class MultipartSDKError(Exception):
    """Base class for multipart SDK errors."""

    pass


class MultipartEncodingError(MultipartSDKError):
    """Error raised while building a multipart body.

    Attributes:
        description: The description of the error.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.__description = description

    @property
    def description(self) -> str:
        """The description of the error."""
        return self.__description

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(description='{self.description}')"


class SourceReadError(MultipartEncodingError):
    """Error for failures while opening or reading a field source.

    Attributes:
        description: The description of the error.
        source_name: Path or name of the source that failed, if known.
    """

    def __init__(self, description: str, source_name: Optional[str] = None):
        super().__init__(description)
        self.__source_name = source_name

    @property
    def source_name(self) -> Optional[str]:
        """Path or name of the source that failed, if known."""
        return self.__source_name


class SinkWriteError(MultipartEncodingError):
    """Error for failures while writing into the output sink."""

    pass


class BuilderClosedError(MultipartEncodingError):
    """Error for operations on a builder that was finished or aborted."""

    pass


class FieldEncodingError(MultipartEncodingError):
    """Error for field names, file names or values that cannot be encoded as UTF-8."""

    pass
