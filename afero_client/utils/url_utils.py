"""
URL helpers for building Afero REST paths.

Path segments taken from user input are percent-encoded with the RFC 3986
path character set; expansions and additional parameters are appended with
standard query encoding.
"""

from typing import Iterable, Mapping, Optional
from urllib.parse import quote, urlencode

from ..errors import EncodingFailureError

# RFC 3986 "pchar" sub-delims plus ':' and '@', minus '/'
_PATH_SAFE = "!$&'()*+,;=:@"


def encode_path_component(value: str, name: str = "value") -> str:
    """
    Encode a string for use as a single path segment.

    Args:
        value: Raw segment value (an id, email address, short code...)
        name: Parameter name used in the error message

    Returns:
        Percent-encoded segment

    Raises:
        EncodingFailureError: If value is not a non-empty string

    Examples:
        >>> encode_path_component("foo@bar.com")
        'foo@bar.com'
        >>> encode_path_component("a/b c")
        'a%2Fb%20c'
    """
    if not isinstance(value, str) or not value:
        raise EncodingFailureError(f"Unable to encode {name}: {value!r}")
    try:
        return quote(value, safe=_PATH_SAFE)
    except (TypeError, UnicodeEncodeError) as e:
        raise EncodingFailureError(f"Unable to encode {name}: {value!r}", e) from e


def with_expansions(
    path: str,
    expansions: Optional[Iterable[str]] = None,
    additional_params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Append expansions and additional query parameters to a path.

    Expansions are joined with commas into a single ``expansions`` parameter.
    Parameters are appended with ``?`` when the path has no query string yet,
    otherwise with ``&``.

    Args:
        path: Path relative to the API host
        expansions: Names of fields the server should expand in the response
        additional_params: Extra query parameters

    Returns:
        Path with the query string appended

    Examples:
        >>> with_expansions("/v1/accounts/a1/devices", ["state", "tags"])
        '/v1/accounts/a1/devices?expansions=state,tags'
        >>> with_expansions("/v1/x?a=1", None, {"verified": "true"})
        '/v1/x?a=1&verified=true'
    """
    params: list[tuple[str, str]] = []

    expansion_list = [e for e in (expansions or []) if e]
    if expansion_list:
        params.append(("expansions", ",".join(expansion_list)))

    if additional_params:
        params.extend((str(k), str(v)) for k, v in additional_params.items())

    if not params:
        return path

    query = urlencode(params, safe=",", quote_via=quote)
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


def build_path(template: str, **params: str) -> str:
    """
    Fill ``{name}`` placeholders of an endpoint template with encoded values.

    Raises:
        EncodingFailureError: If any value cannot be encoded

    Examples:
        >>> build_path("/v1/accounts/{account_id}/devices/{device_id}", account_id="a1", device_id="d 1")
        '/v1/accounts/a1/devices/d%201'
    """
    path = template
    for name, value in params.items():
        path = path.replace("{" + name + "}", encode_path_component(value, name))
    return path
