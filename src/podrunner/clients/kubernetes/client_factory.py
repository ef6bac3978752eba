# src/podrunner/clients/kubernetes/client_factory.py
"""Kubernetes client factory."""

from typing import Dict, Any, Optional
import structlog
from kubernetes import client

from podrunner.core.exceptions import ClientConnectionException
from .credentials import CredentialResolver
from .k8s_client import KubernetesClient

logger = structlog.get_logger(__name__)


class KubernetesClientFactory:
    """Factory for creating Kubernetes clients."""

    def __init__(self, config: Dict[str, Any], resolver: Optional[CredentialResolver] = None):
        self.config = config
        self.kubeconfig_path = config.get("kubeconfig_path")
        self.context = config.get("context")
        self.namespace = config.get("namespace", "default")
        self.resolver = resolver or CredentialResolver(
            kubeconfig_path=self.kubeconfig_path,
            context=self.context
        )

        self.logger = logger.bind(factory="kubernetes")

    def resolve_configuration(self) -> client.Configuration:
        """Resolve cluster access configuration, raising ConfigurationException if no source works."""
        return self.resolver.resolve_or_raise()

    def create_client(self, configuration: Optional[client.Configuration] = None) -> KubernetesClient:
        """Create and connect a Kubernetes client."""
        if configuration is None:
            configuration = self.resolve_configuration()

        k8s = KubernetesClient(configuration=configuration, config_dict=self.config)
        try:
            k8s.connect()
        except ClientConnectionException:
            raise
        except Exception as e:
            raise ClientConnectionException("Kubernetes", f"Failed creating client: {e}")

        self.logger.info("Created Kubernetes client", namespace=self.namespace)
        return k8s
