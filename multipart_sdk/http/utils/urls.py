import re
from urllib.parse import urlsplit, urlunsplit

SECRET_QUERY_PARAM_PATTERN = re.compile(
    r"(?:^|(?<=[?&]))(?P<key>(?:api_key|access_token|token)=)(?P<value>[^&]*)"
)
MIN_SECRET_LENGTH_TO_REVEAL_AFFIXES = 8


def redact_url_for_logs(url: str) -> str:
    """Remove secrets from an URL before it is logged.

    Passwords from the userinfo part are replaced with `***`, values of
    `api_key`, `access_token` and `token` query parameters are shortened to
    their first and last two characters (or fully hidden when short).

    Args:
        url: The URL to redact.

    Returns:
        The redacted URL.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return SECRET_QUERY_PARAM_PATTERN.sub(_redact_secret, url)
    netloc = parts.netloc
    if parts.password is not None:
        userinfo, _, host = netloc.rpartition("@")
        username = userinfo.split(":", 1)[0]
        netloc = f"{username}:***@{host}"
    query = SECRET_QUERY_PARAM_PATTERN.sub(_redact_secret, parts.query)
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


def _redact_secret(match: re.Match) -> str:
    key = match.group("key")
    value = match.group("value")
    if len(value) < MIN_SECRET_LENGTH_TO_REVEAL_AFFIXES:
        return f"{key}***"
    return f"{key}{value[:2]}***{value[-2:]}"
