from .exceptions import *
from .base_client import BaseClient
from .utils import *

__all__ = [
    "BaseClient",
    "PodRunnerException",
    "ConfigurationException",
    "ClientConnectionException",
    "PodOperationException",
    "pretty_string",
    "setup_logging",
]
