from multipart_sdk.http.client import (
    MultipartRequest,
    send_multipart_file,
    send_multipart_files,
)
from multipart_sdk.http.encoder import MultipartBuilder
from multipart_sdk.http.entities import MultipartBody
from multipart_sdk.http.errors import (
    BuilderClosedError,
    FieldEncodingError,
    MultipartEncodingError,
    MultipartSDKError,
    SinkWriteError,
    SourceReadError,
)
from multipart_sdk.http.utils.sinks import InMemorySink, SpooledSink
from multipart_sdk.version import __version__
