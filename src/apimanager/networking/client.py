"""ApiManager facade for the apimanager networking layer.

The facade owns one ApiConfig and one ``requests.Session``. Every verb call
reads the config at the moment it starts, so updates made between calls
apply to the next request only. No locking is done; sharing one manager
across threads means sharing its mutable config.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import requests

from . import methods
from .config import ApiConfig, HttpHeaders

logger = logging.getLogger(__name__)


class ApiManager:
    """Verb-named JSON API client bound to one ApiConfig.

    Methods return the decoded JSON body. Transport and decode errors from
    ``requests`` are not caught.
    """

    def __init__(
        self,
        base_url: str | None = None,
        headers: HttpHeaders | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        """Create a new ApiManager.

        Args:
            base_url: Prefix prepended verbatim to every endpoint.
            headers: Headers sent with every request.
            session: Session used as the transport. A new one is created
                when omitted.
        """
        self._config = ApiConfig(base_url=base_url, headers=headers)
        if session is None:
            session = requests.Session()
            logger.debug("Created requests session for base_url=%s", base_url)
        self._session = session

    def __enter__(self) -> ApiManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def get_config(self) -> ApiConfig:
        return self._config

    def set_config(self, config: ApiConfig) -> None:
        """Replace the owned config wholesale."""
        if not isinstance(config, ApiConfig):
            raise TypeError("config must be an ApiConfig")
        logger.debug("Replacing config with %r", config)
        self._config = config

    def update_header(self, headers: HttpHeaders | None) -> None:
        self._config.set_headers(headers)

    def update_base_url(self, base_url: str | None) -> None:
        self._config.set_base_url(base_url)

    def instance(self) -> ApiManager:
        return self

    def get(self, endpoint: str) -> Any:
        """Perform a GET request against the owned config.

        Args:
            endpoint: Path appended verbatim to the base URL.

        Returns:
            The parsed JSON body of the response.
        """
        return methods.get_handler(
            endpoint, self._config, transport=self._session.request
        )

    def put(self, endpoint: str, data: Any = None) -> Any:
        """Perform a PUT request against the owned config.

        Args:
            endpoint: Path appended verbatim to the base URL.
            data: Optional body; strings pass through, other values are
                sent as JSON text.

        Returns:
            The parsed JSON body of the response.
        """
        return methods.put_handler(
            endpoint, data, self._config, transport=self._session.request
        )

    def patch(self, endpoint: str, data: Any = None) -> Any:
        """Perform a PATCH request against the owned config.

        Args:
            endpoint: Path appended verbatim to the base URL.
            data: Optional body; strings pass through, other values are
                sent as JSON text.

        Returns:
            The parsed JSON body of the response.
        """
        return methods.patch_handler(
            endpoint, data, self._config, transport=self._session.request
        )

    def post(self, endpoint: str, data: Any = None) -> Any:
        """Perform a POST request against the owned config.

        Args:
            endpoint: Path appended verbatim to the base URL.
            data: Optional body; strings pass through, other values are
                sent as JSON text.

        Returns:
            The parsed JSON body of the response.
        """
        return methods.post_handler(
            endpoint, data, self._config, transport=self._session.request
        )

    def delete(self, endpoint: str) -> Any:
        """Perform a DELETE request against the owned config.

        Args:
            endpoint: Path appended verbatim to the base URL.

        Returns:
            The parsed JSON body of the response.
        """
        return methods.delete_handler(
            endpoint, self._config, transport=self._session.request
        )
