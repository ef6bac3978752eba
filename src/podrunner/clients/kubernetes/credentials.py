# src/podrunner/clients/kubernetes/credentials.py
"""Cluster access configuration resolution.

The service account Kubernetes mounts into pods is tried first. When that is
unavailable (running outside a cluster), the kubeconfig file is loaded
instead. Both outcomes are reported through a ``ResolutionResult`` rather
than exceptions so callers can see which source failed and why.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import structlog
from kubernetes import client, config

from podrunner.config.settings import default_kubeconfig_path
from podrunner.core.exceptions import ConfigurationException

logger = structlog.get_logger(__name__)

IN_CLUSTER = "in-cluster"
KUBECONFIG = "kubeconfig"


@dataclass
class CredentialAttempt:
    source: str
    error: str


@dataclass
class ResolutionResult:
    configuration: Optional[client.Configuration] = None
    source: Optional[str] = None
    failures: List[CredentialAttempt] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.configuration is not None

    @property
    def error_message(self) -> Optional[str]:
        if self.ok:
            return None
        errors = {attempt.source: attempt.error for attempt in self.failures}
        return (
            "In-cluster config as well as kubeconfig loading failed. "
            f"Error in in-cluster config: {errors.get(IN_CLUSTER)}\n"
            f"Error in kubeconfig: {errors.get(KUBECONFIG)}"
        )


class CredentialResolver:
    """Resolve a ``kubernetes.client.Configuration`` with a single fallback."""

    def __init__(self,
                 kubeconfig_path: Optional[str] = None,
                 context: Optional[str] = None,
                 in_cluster_loader: Callable = config.load_incluster_config,
                 kubeconfig_loader: Callable = config.load_kube_config):
        self.kubeconfig_path = kubeconfig_path or default_kubeconfig_path()
        self.context = context
        self._in_cluster_loader = in_cluster_loader
        self._kubeconfig_loader = kubeconfig_loader
        self.logger = logger.bind(kubeconfig=self.kubeconfig_path)

    def resolve(self) -> ResolutionResult:
        result = ResolutionResult()

        configuration = client.Configuration()
        try:
            self._in_cluster_loader(client_configuration=configuration)
            self.logger.info("Loaded in-cluster config")
            result.configuration = configuration
            result.source = IN_CLUSTER
            return result
        except Exception as e:
            self.logger.info("Unable to load in-cluster config", error=str(e))
            result.failures.append(CredentialAttempt(IN_CLUSTER, str(e)))

        configuration = client.Configuration()
        try:
            self._kubeconfig_loader(
                config_file=self.kubeconfig_path,
                context=self.context,
                client_configuration=configuration
            )
            self.logger.info(f"Loaded kubeconfig from {self.kubeconfig_path}")
            result.configuration = configuration
            result.source = KUBECONFIG
        except Exception as e:
            self.logger.error("Unable to load kubeconfig", error=str(e))
            result.failures.append(CredentialAttempt(KUBECONFIG, f"({self.kubeconfig_path}) {e}"))

        return result

    def resolve_or_raise(self) -> client.Configuration:
        result = self.resolve()
        if not result.ok:
            raise ConfigurationException(
                result.error_message,
                details={attempt.source: attempt.error for attempt in result.failures}
            )
        return result.configuration
