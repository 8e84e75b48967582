"""
Errors raised by the LLM client layer.

Clients translate SDK and transport failures into these types so callers can
react to the kind of failure without knowing which provider is configured.
"""

from typing import Optional


class LLMError(Exception):
    """Base class for every failure of an outbound completion call."""


class LLMConfigurationError(LLMError):
    """The provider cannot be used as configured (missing key, unknown name)."""


class LLMConnectionError(LLMError):
    """The provider could not be reached (DNS, refused connection, timeout)."""


class LLMUpstreamStatusError(LLMError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMInvalidResponseError(LLMError):
    """The provider answered with a body that could not be decoded."""
