from .client_factory import KubernetesClientFactory
from .credentials import CredentialResolver, ResolutionResult
from .k8s_client import KubernetesClient

__all__ = ["KubernetesClientFactory", "KubernetesClient", "CredentialResolver", "ResolutionResult"]
