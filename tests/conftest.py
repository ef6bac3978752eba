"""
Shared pytest fixtures for podrunner tests.

The cluster API is never contacted: ``KubernetesClient.v1`` is swapped for a
MagicMock after connecting, so tests only configure CoreV1Api responses.
"""

from typing import Dict, Optional
from unittest.mock import MagicMock

import pytest
from kubernetes import client

from podrunner.clients.kubernetes.k8s_client import KubernetesClient


def make_pod(name: str, namespace: str = "default", labels: Optional[Dict[str, str]] = None,
             phase: str = "Running") -> client.V1Pod:
    """Build a pod record the way the API server returns it."""
    return client.V1Pod(
        api_version="v1",
        kind="Pod",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels=labels or {},
            uid=f"uid-{name}",
        ),
        spec=client.V1PodSpec(
            containers=[client.V1Container(name="main", image="nginx")]
        ),
        status=client.V1PodStatus(phase=phase),
    )


def echo_created(namespace, body):
    """create_namespaced_pod side effect returning the submitted pod as accepted."""
    return client.V1Pod(
        api_version=body.api_version,
        kind=body.kind,
        metadata=client.V1ObjectMeta(
            name=body.metadata.name,
            namespace=namespace,
            labels=body.metadata.labels,
            uid=f"uid-{body.metadata.name}",
        ),
        spec=body.spec,
        status=client.V1PodStatus(phase="Pending"),
    )


@pytest.fixture
def core_v1():
    api = MagicMock(spec=client.CoreV1Api)
    api.create_namespaced_pod.side_effect = echo_created
    api.list_namespaced_pod.return_value = client.V1PodList(items=[
        make_pod("web-0"),
        make_pod("my-test-pod", labels={"app": "demo"}, phase="Pending"),
    ])
    return api


@pytest.fixture
def k8s_client(core_v1):
    configuration = client.Configuration()
    configuration.host = "https://cluster.test:6443"
    k8s = KubernetesClient(configuration=configuration, config_dict={"namespace": "default"})
    k8s.connect()
    k8s.v1 = core_v1
    yield k8s
    k8s.disconnect()


@pytest.fixture
def kubeconfig_file(tmp_path):
    """A token-authenticated kubeconfig that can be loaded without a live server."""
    path = tmp_path / "config"
    path.write_text(
        """
apiVersion: v1
kind: Config
clusters:
- name: test-cluster
  cluster:
    server: https://cluster.test:6443
    insecure-skip-tls-verify: true
users:
- name: test-user
  user:
    token: test-token
contexts:
- name: test-context
  context:
    cluster: test-cluster
    user: test-user
    namespace: default
current-context: test-context
"""
    )
    return path
