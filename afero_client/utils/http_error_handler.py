"""HTTP error handler utilities for InternalHttpClient.

Turns non-2xx httpx responses into AferoClientError instances tagged with the
status code, so callers can branch on it.
"""

from typing import Any, Dict, Optional

import httpx

from ..errors import AferoClientError

# Header names the Afero edge uses to correlate a request with server logs
REQUEST_ID_HEADERS = ("x-request-id", "x-correlation-id", "request-id")


def extract_request_id_from_response(
    response: Optional[httpx.Response] = None,
) -> Optional[str]:
    """Extract a request/correlation id from response headers, if present."""
    if response is None:
        return None
    for header_name in REQUEST_ID_HEADERS:
        value = response.headers.get(header_name)
        if value:
            return str(value)
    return None


def parse_error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    """Parse the JSON error body of a response.

    Returns:
        The decoded object, or None if the body is empty, not JSON, or not an object

    """
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def create_error_from_response(response: httpx.Response, url: str) -> AferoClientError:
    """Create an AferoClientError describing a failed HTTP exchange.

    Args:
        response: The non-2xx response
        url: Request URL (used in the message)

    Returns:
        AferoClientError carrying status_code and the parsed error body

    """
    error_body = parse_error_body(response)
    detail = None
    if error_body:
        detail = error_body.get("error_description") or error_body.get("message") or error_body.get("error")
    if not detail:
        detail = response.reason_phrase or response.text

    message = f"HTTP {response.status_code} for {url}: {detail}"
    request_id = extract_request_id_from_response(response)
    if request_id:
        message = f"{message} (request id {request_id})"

    return AferoClientError(
        message,
        status_code=response.status_code,
        error_body=error_body,
    )
