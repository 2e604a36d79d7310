"""Configuration holder for the ApiManager facade."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Protocol

from .errors import ConfigTypeError

HeaderValue = str | list[str] | None
HttpHeaders = Mapping[str, HeaderValue]

DEFAULT_HEADERS: HttpHeaders = MappingProxyType(
    {
        "Content-Type": "application/json",
        "Accept-Language": ["en-US", "en"],
    }
)


class ConfigReader(Protocol):
    """Read-only capability consumed by the request dispatcher."""

    def get_base_url(self) -> str | None: ...

    def get_headers(self) -> HttpHeaders | None: ...


class ApiConfig:
    """Mutable connection defaults for one logical API target.

    Values are stored by reference. ``instance()`` and ``get_headers()`` hand
    back the same headers mapping that was set, so changes made through the
    returned mapping show up on later reads.
    """

    def __init__(
        self,
        base_url: str | None = None,
        headers: HttpHeaders | None = None,
    ) -> None:
        """Create a new ApiConfig.

        Args:
            base_url: Prefix prepended verbatim to every endpoint.
            headers: Headers sent with every request.
        """
        self._base_url = base_url
        self._headers = headers

    def __repr__(self) -> str:
        header_names = None
        if self._headers is not None:
            header_names = list(self._headers)
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"headers={header_names!r})"
        )

    def set_base_url(self, url: Any) -> None:
        """Replace the base URL.

        Raises:
            ConfigTypeError: If ``url`` is neither a string nor None.
        """
        if url is not None and not isinstance(url, str):
            raise ConfigTypeError("url must be a string or null")
        self._base_url = url

    def get_base_url(self) -> str | None:
        return self._base_url

    def set_headers(self, headers: HttpHeaders | None) -> None:
        self._headers = headers

    def get_headers(self) -> HttpHeaders | None:
        return self._headers

    def instance(self) -> dict[str, Any]:
        """Return the current base URL and headers as a plain dict."""
        return {"base_url": self._base_url, "headers": self._headers}
