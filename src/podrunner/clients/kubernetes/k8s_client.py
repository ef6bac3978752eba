# src/podrunner/clients/kubernetes/k8s_client.py
"""Kubernetes client for namespaced pod operations."""

from typing import Dict, Any, List, Optional
from urllib3.exceptions import HTTPError
from kubernetes import client
from kubernetes.client.rest import ApiException

from podrunner.core.base_client import BaseClient
from podrunner.core.exceptions import ClientConnectionException, PodOperationException


def _api_error_details(e: ApiException) -> Dict[str, Any]:
    return {'status': e.status, 'reason': e.reason}


class KubernetesClient(BaseClient):
    """CoreV1 pod client bound to one resolved cluster configuration."""

    def __init__(self,
                 configuration: client.Configuration,
                 config_dict: Optional[Dict[str, Any]] = None):
        config_dict = config_dict or {}
        super().__init__(config_dict, "KubernetesClient")
        self.configuration = configuration

        self.api_client = None
        self.v1 = None

    def connect(self) -> None:
        """Build the API client from the resolved configuration."""
        try:
            self.api_client = client.ApiClient(self.configuration)
            self.v1 = client.CoreV1Api(self.api_client)
            self._connected = True
            self.logger.info("Kubernetes client connected", host=self.configuration.host)
        except Exception as e:
            raise ClientConnectionException("Kubernetes", f"Failed creating client: {e}")

    def disconnect(self) -> None:
        if self.api_client is not None:
            self.api_client.close()
        self._connected = False
        self.logger.info("Kubernetes client disconnected")

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise ClientConnectionException("Kubernetes", "Client not connected")

    def create_pod(self, body: client.V1Pod, namespace: str) -> client.V1Pod:
        self._ensure_connected()
        try:
            pod = self.v1.create_namespaced_pod(namespace=namespace, body=body)
            self.logger.info("Created pod", pod=pod.metadata.name, namespace=namespace)
            return pod
        except ApiException as e:
            raise PodOperationException("create", f"{e.status} {e.reason}", _api_error_details(e))
        except HTTPError as e:
            raise PodOperationException("create", str(e))
        except Exception as e:
            raise PodOperationException("create", f"{type(e).__name__}: {e}")

    def list_pods(self, namespace: str) -> List[client.V1Pod]:
        self._ensure_connected()
        try:
            pods = self.v1.list_namespaced_pod(namespace=namespace).items or []
            self.logger.info(f"Listed {len(pods)} pods", namespace=namespace)
            return pods
        except ApiException as e:
            raise PodOperationException("list", f"{e.status} {e.reason}", _api_error_details(e))
        except HTTPError as e:
            raise PodOperationException("list", str(e))
        except Exception as e:
            raise PodOperationException("list", f"{type(e).__name__}: {e}")

    def serialize(self, obj: Any) -> Any:
        """Convert API model objects to plain JSON-compatible data."""
        if self.api_client is None:
            return client.ApiClient().sanitize_for_serialization(obj)
        return self.api_client.sanitize_for_serialization(obj)
