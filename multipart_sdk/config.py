import os
import string

from multipart_sdk.utils.environment import positive_int_from_env

# Length of the random part of the boundary.
BOUNDARY_LENGTH = positive_int_from_env("MULTIPART_BOUNDARY_LENGTH", 29)
BOUNDARY_ALPHABET = string.digits
# Hyphen run placed in front of the random token. Delimiter lines in the body
# add two more hyphens on top of this prefix.
BOUNDARY_PREFIX = "-" * 27

MULTIPART_COPY_CHUNK_SIZE = positive_int_from_env("MULTIPART_COPY_CHUNK_SIZE", 65536)
MULTIPART_SPOOL_MAX_SIZE = positive_int_from_env(
    "MULTIPART_SPOOL_MAX_SIZE", 10 * 1024 * 1024
)

MULTIPART_SDK_LOG_LEVEL = os.getenv("MULTIPART_SDK_LOG_LEVEL", "INFO").upper()

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_TYPE_HEADER = "Content-Type"
