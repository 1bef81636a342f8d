import random
from typing import Optional

from multipart_sdk.config import BOUNDARY_ALPHABET, BOUNDARY_LENGTH, BOUNDARY_PREFIX

# Seeded once per process, shared by every builder that does not bring its own source.
_PROCESS_RANDOM_SOURCE = random.SystemRandom()


def generate_boundary(
    length: int = BOUNDARY_LENGTH,
    random_source: Optional[random.Random] = None,
    alphabet: str = BOUNDARY_ALPHABET,
) -> str:
    """Generate a random boundary token.

    Args:
        length: Number of characters in the token.
        random_source: Source of randomness. Defaults to the process-wide
            `random.SystemRandom` instance. Pass a seeded `random.Random` to get
            reproducible tokens.
        alphabet: Characters the token is drawn from.

    Returns:
        The boundary token.

    Raises:
        ValueError: If `length` is not positive or `alphabet` is empty.
    """
    if length <= 0:
        raise ValueError(f"Boundary length must be positive, got {length}")
    if not alphabet:
        raise ValueError("Boundary alphabet must not be empty")
    source = random_source if random_source is not None else _PROCESS_RANDOM_SOURCE
    return "".join(source.choice(alphabet) for _ in range(length))


def boundary_parameter(boundary: str) -> str:
    """Build the value of the `boundary=` parameter of the `Content-Type` header.

    Args:
        boundary: The boundary token.

    Returns:
        The hyphen-prefixed boundary.
    """
    return f"{BOUNDARY_PREFIX}{boundary}"


def multipart_content_type(boundary: str) -> str:
    """Build the `Content-Type` header value for a body using `boundary`.

    Args:
        boundary: The boundary token.

    Returns:
        The header value.
    """
    return f"multipart/form-data; boundary={boundary_parameter(boundary=boundary)}"
