"""
HTTP client logging utilities.

This module keeps the request logging of HttpClient out of the client class
itself. Every request produces one INFO (or WARNING, on failure) summary line;
with ``log_level="debug"`` the masked request and response bodies follow at
DEBUG. Sensitive data is masked with DataMasker before it reaches a handler.
"""

import json
import logging
import time
from typing import Any, Dict, Optional

from .data_masker import DataMasker

# Bodies longer than this are truncated in debug output
MAX_DEBUG_BODY_LENGTH = 1000


def calculate_request_metrics(
    start_time: float, response: Optional[Any] = None, error: Optional[Exception] = None
) -> tuple[int, Optional[int]]:
    """
    Calculate request duration and, for failures, the status code.

    Success statuses are not surfaced past the transport, so a successful
    request reports None rather than a guessed code.

    Args:
        start_time: Request start time from time.perf_counter()
        response: Response data (if successful)
        error: Exception (if request failed)

    Returns:
        Tuple of (duration_ms, status_code)
    """
    duration_ms = int((time.perf_counter() - start_time) * 1000)

    status_code: Optional[int] = None
    if error is not None:
        status_code = getattr(error, "status_code", None)

    return duration_ms, status_code


def calculate_request_sizes(
    request_data: Optional[Any], response: Optional[Any]
) -> tuple[Optional[int], Optional[int]]:
    """
    Calculate request and response sizes in bytes of their JSON rendering.

    Returns:
        Tuple of (request_size, response_size) in bytes, None if unavailable
    """
    return _json_size(request_data), _json_size(response)


def _json_size(value: Optional[Any]) -> Optional[int]:
    if value is None:
        return None
    try:
        return len(json.dumps(value, default=str).encode("utf-8"))
    except (TypeError, ValueError):
        return None


def truncate_for_log(value: Any, max_length: int = MAX_DEBUG_BODY_LENGTH) -> str:
    """Render a masked value as JSON text, truncated to max_length characters."""
    try:
        text = json.dumps(DataMasker.mask_sensitive_data(value), default=str)
    except (TypeError, ValueError):
        text = repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}...(truncated)"
    return text


def mask_error_message(error: Optional[Exception]) -> Optional[str]:
    """Error text with any bearer token masked."""
    if error is None:
        return None
    message = str(error)
    if "Bearer " in message:
        head, _, tail = message.partition("Bearer ")
        token, _, rest = tail.partition(" ")
        message = f"{head}Bearer {DataMasker.mask_value(token, show_last=4)} {rest}".rstrip()
    return message


def log_http_request(
    logger: logging.Logger,
    method: str,
    url: str,
    start_time: float,
    response: Optional[Any] = None,
    error: Optional[Exception] = None,
    request_data: Optional[Any] = None,
    request_headers: Optional[Dict[str, Any]] = None,
    debug: bool = False,
) -> None:
    """
    Log one HTTP exchange.

    Args:
        logger: Logger to write to
        method: HTTP method
        url: Request path
        start_time: Request start time from time.perf_counter()
        response: Decoded response (if successful)
        error: Exception (if request failed)
        request_data: Request payload
        request_headers: Extra request headers
        debug: Also log masked payloads at DEBUG level
    """
    duration_ms, status_code = calculate_request_metrics(start_time, response, error)

    if error is not None:
        logger.warning(
            "%s %s failed status=%s duration=%dms error=%s",
            method,
            url,
            status_code,
            duration_ms,
            mask_error_message(error),
        )
    else:
        logger.info("%s %s ok duration=%dms", method, url, duration_ms)

    if not debug or not logger.isEnabledFor(logging.DEBUG):
        return

    request_size, response_size = calculate_request_sizes(request_data, response)
    context: Dict[str, Any] = {
        "method": method,
        "url": url,
        "duration": duration_ms,
        "requestSize": request_size,
        "responseSize": response_size,
    }
    if status_code is not None:
        context["statusCode"] = status_code
    if request_headers:
        context["requestHeaders"] = DataMasker.mask_headers(request_headers)
    if request_data is not None:
        context["requestBody"] = truncate_for_log(request_data)
    if response is not None:
        context["responseBody"] = truncate_for_log(response)
    logger.debug("HTTP %s %s details: %s", method, url, context)
