"""
Base Service Interface

Every dashboard service (market data, indicators, chat, reports)
implements this contract, and reports failures through the
ServiceError hierarchy below. Endpoints map those errors to HTTP
status codes.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for request-scoped services.

    A service:
    - Declares its input and output types
    - Rejects bad input with ValidationError before doing any I/O
    - Reports whether its upstream provider is reachable
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in errors and logs."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service for one request.

        Raises:
            ServiceError: subclass describing why the request failed
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """True when the service can currently answer requests."""
        pass

    async def validate_input(self, input_data: InputT) -> InputT:
        """
        Validate (and optionally normalize) input.
        Default implementation returns input as-is.
        """
        return input_data


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Input validation error (HTTP 400)."""
    pass


class NotFoundError(ServiceError):
    """Requested resource does not exist (HTTP 404)."""
    pass


class ConflictError(ServiceError):
    """Resource already exists (HTTP 409)."""
    pass


class ConfigurationError(ServiceError):
    """Required configuration such as an API key is missing (HTTP 500)."""
    pass


class ExternalAPIError(ServiceError):
    """Upstream provider call failed (HTTP 500)."""
    pass
