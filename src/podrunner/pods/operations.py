# src/podrunner/pods/operations.py
"""Create the demo pod and list pods in its namespace."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import click
import structlog
from kubernetes import client

from podrunner.clients.kubernetes.k8s_client import KubernetesClient
from podrunner.core.exceptions import PodOperationException
from podrunner.core.utils import pretty_string
from podrunner.models.pod import ContainerSpec, ImagePullPolicy, PodDescriptor

logger = structlog.get_logger(__name__)

DEFAULT_NAMESPACE = "default"
SEPARATOR = "*" * 80


@dataclass
class WorkflowResult:
    created: Optional[client.V1Pod] = None
    create_error: Optional[str] = None
    pods: List[client.V1Pod] = field(default_factory=list)


def build_pod_descriptor(namespace: str = DEFAULT_NAMESPACE) -> PodDescriptor:
    """Build the pod definition we want to deploy."""
    return PodDescriptor(
        name="my-test-pod",
        namespace=namespace,
        labels={"app": "demo"},
        container=ContainerSpec(
            name="busybox",
            image="busybox",
            image_pull_policy=ImagePullPolicy.IF_NOT_PRESENT,
            command=("sleep", "3600")
        )
    )


def create_pod(k8s: KubernetesClient, descriptor: PodDescriptor) -> client.V1Pod:
    return k8s.create_pod(descriptor.to_v1_pod(), namespace=descriptor.namespace)


def list_pods(k8s: KubernetesClient, namespace: str) -> List[client.V1Pod]:
    return k8s.list_pods(namespace)


def render_pod(pod: client.V1Pod, serializer: Optional[Callable] = None) -> str:
    """Name line, indented record, blank line and separator for one pod."""
    return "\n".join([
        f"Pod Name:  {pod.metadata.name}",
        pretty_string(pod, serializer),
        "",
        SEPARATOR,
    ])


def run_pod_workflow(k8s: KubernetesClient,
                     descriptor: PodDescriptor,
                     echo: Callable[[str], None] = click.echo) -> WorkflowResult:
    """Create the pod, then list every pod in the same namespace.

    A failed create is reported and the listing still runs. A failed list
    raises PodOperationException.
    """
    result = WorkflowResult()
    log = logger.bind(pod=descriptor.name, namespace=descriptor.namespace)

    try:
        result.created = create_pod(k8s, descriptor)
        echo(f"Pod  {result.created.metadata.name} created successfully...")
    except PodOperationException as e:
        log.error("Cannot create pod", error=e.message, **e.details)
        result.create_error = e.message
        echo(f"Cannot create pod {descriptor.name}: {e.message}")

    echo("Listing pods..")
    result.pods = list_pods(k8s, descriptor.namespace)
    for pod in result.pods:
        echo(render_pod(pod, k8s.serialize))

    echo("Pods listed")
    log.info("Pod workflow finished", listed=len(result.pods), created=result.created is not None)
    return result
