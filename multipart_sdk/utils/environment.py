import os


def positive_int_from_env(variable_name: str, default: int) -> int:
    """Read a positive integer from the environment.

    Args:
        variable_name: Name of the environment variable.
        default: Value used when the variable is not set.

    Returns:
        int: The parsed value.

    Raises:
        ValueError: If the variable is set to something that is not a positive integer.
    """
    raw_value = os.getenv(variable_name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ValueError(
            f"Expected an integer environment variable {variable_name} but got '{raw_value}'"
        ) from error
    if value <= 0:
        raise ValueError(
            f"Expected a positive environment variable {variable_name} but got {value}"
        )
    return value
