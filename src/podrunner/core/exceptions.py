"""Custom exceptions for podrunner."""

from typing import Optional, Dict, Any


class PodRunnerException(Exception):
    """Base exception for podrunner."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(PodRunnerException):
    """Raised when no usable cluster access configuration can be resolved."""
    pass


class ClientConnectionException(PodRunnerException):
    """Raised when client construction or connection fails."""

    def __init__(self, client_type: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.client_type = client_type
        super().__init__(f"{client_type} connection failed: {message}", details)


class PodOperationException(PodRunnerException):
    """Raised when a pod API call fails."""

    def __init__(self, operation: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.operation = operation
        super().__init__(f"Pod {operation} failed: {message}", details)
