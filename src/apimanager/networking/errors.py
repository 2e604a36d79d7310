"""Error taxonomy for the apimanager networking layer.

Only validation errors are raised by this package. Transport and decode
failures come straight from ``requests`` and are exposed here under their
taxonomy names so callers can catch them without importing ``requests``.
"""

from __future__ import annotations

import requests


class ApiManagerError(Exception):
    """Base class for errors raised by apimanager itself."""


class ConfigTypeError(ApiManagerError, TypeError):
    """Raised when a base URL is neither a string nor None."""


class MissingArgumentError(ApiManagerError, TypeError):
    """Raised when a verb helper is called without an endpoint or config."""


TransportError = requests.exceptions.RequestException
DecodeError = requests.exceptions.JSONDecodeError
