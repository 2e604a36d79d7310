"""Request dispatcher for the apimanager networking layer.

Stateless functions that turn (config, method, endpoint, body) into one
transport call and return the decoded JSON response. Nothing is retried,
wrapped, or recovered here; transport and decode errors reach the caller as
``requests`` raised them.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable

import requests

from .config import ConfigReader, HttpHeaders
from .errors import MissingArgumentError

logger = logging.getLogger(__name__)

Transport = Callable[..., requests.Response]


class HttpMethod(str, Enum):
    """HTTP verbs supported by the dispatcher."""

    GET = "GET"
    PUT = "PUT"
    PATCH = "PATCH"
    POST = "POST"
    DELETE = "DELETE"


def _build_url(base_url: str | None, endpoint: str) -> str:
    """Concatenate base URL and endpoint without any normalization.

    A missing base URL renders as the literal text ``"null"``.
    """
    prefix = "null" if base_url is None else str(base_url)
    return prefix + endpoint


def _encode_body(body: Any) -> str | bytes:
    """Serialize ``body`` unless it already is a request payload."""
    if isinstance(body, (str, bytes)):
        return body
    return json.dumps(body, separators=(",", ":"))


def _wire_headers(headers: HttpHeaders | None) -> HttpHeaders | None:
    """Join multi-value headers with ``","`` for the transport.

    The mapping is returned as-is when it holds no list values.
    """
    if headers is None:
        return None
    if not any(isinstance(value, list) for value in headers.values()):
        return headers
    return {
        name: ",".join(value) if isinstance(value, list) else value
        for name, value in headers.items()
    }


def _require(endpoint: str | None, config: ConfigReader | None) -> None:
    if endpoint is None or config is None:
        raise MissingArgumentError("endpoint or config cannot be undefined")


def api_request(
    config: ConfigReader,
    method: HttpMethod | str,
    endpoint: str,
    body: Any = None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Send one request and return the decoded JSON response.

    Args:
        config: Source of the base URL and headers, read at call time.
            List header values are joined with ",", others pass through.
        method: HTTP verb; free text must match a HttpMethod value exactly.
        endpoint: Path appended verbatim to the base URL.
        body: None sends no body. Strings and bytes are sent as-is; any other
            value is serialized to compact JSON text.
        transport: Callable with the ``requests.request`` signature. Defaults
            to ``requests.request``.

    Returns:
        The parsed JSON body of the response.

    Raises:
        ValueError: If ``method`` is not a supported verb.
        requests.exceptions.RequestException: If the transport fails.
        requests.exceptions.JSONDecodeError: If the response is not JSON.
    """
    verb = HttpMethod(method)
    url = _build_url(config.get_base_url(), endpoint)
    headers = _wire_headers(config.get_headers())

    kwargs: dict[str, Any] = {"headers": headers}
    if body is not None:
        kwargs["data"] = _encode_body(body)

    send = transport if transport is not None else requests.request
    logger.debug("Dispatching %s %s", verb.value, url)
    response = send(verb.value, url, **kwargs)
    return response.json()


def get_handler(
    endpoint: str | None,
    config: ConfigReader | None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Perform a GET request without a body.

    Args:
        endpoint: Path appended verbatim to the base URL.
        config: Source of the base URL and headers.
        transport: Optional replacement for ``requests.request``.

    Returns:
        The parsed JSON body of the response.
    """
    _require(endpoint, config)
    return api_request(config, HttpMethod.GET, endpoint, transport=transport)


def put_handler(
    endpoint: str | None,
    data: Any,
    config: ConfigReader | None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Perform a PUT request.

    Args:
        endpoint: Path appended verbatim to the base URL.
        data: Request body; see ``api_request`` for the encoding rules.
        config: Source of the base URL and headers.
        transport: Optional replacement for ``requests.request``.

    Returns:
        The parsed JSON body of the response.
    """
    _require(endpoint, config)
    return api_request(
        config, HttpMethod.PUT, endpoint, data, transport=transport
    )


def post_handler(
    endpoint: str | None,
    data: Any,
    config: ConfigReader | None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Perform a POST request.

    Args:
        endpoint: Path appended verbatim to the base URL.
        data: Request body; see ``api_request`` for the encoding rules.
        config: Source of the base URL and headers.
        transport: Optional replacement for ``requests.request``.

    Returns:
        The parsed JSON body of the response.
    """
    _require(endpoint, config)
    return api_request(
        config, HttpMethod.POST, endpoint, data, transport=transport
    )


def patch_handler(
    endpoint: str | None,
    data: Any,
    config: ConfigReader | None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Perform a PATCH request.

    Args:
        endpoint: Path appended verbatim to the base URL.
        data: Request body; see ``api_request`` for the encoding rules.
        config: Source of the base URL and headers.
        transport: Optional replacement for ``requests.request``.

    Returns:
        The parsed JSON body of the response.
    """
    _require(endpoint, config)
    return api_request(
        config, HttpMethod.PATCH, endpoint, data, transport=transport
    )


def delete_handler(
    endpoint: str | None,
    config: ConfigReader | None,
    *,
    transport: Transport | None = None,
) -> Any:
    """Perform a DELETE request without a body.

    Args:
        endpoint: Path appended verbatim to the base URL.
        config: Source of the base URL and headers.
        transport: Optional replacement for ``requests.request``.

    Returns:
        The parsed JSON body of the response.
    """
    _require(endpoint, config)
    return api_request(config, HttpMethod.DELETE, endpoint, transport=transport)
