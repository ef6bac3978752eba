import pytest
from pydantic import ValidationError

from podrunner.models.pod import ContainerSpec, ImagePullPolicy, PodDescriptor
from podrunner.pods.operations import build_pod_descriptor


def test_descriptor_is_deterministic():
    first = build_pod_descriptor()
    second = build_pod_descriptor()

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_descriptor_contents():
    descriptor = build_pod_descriptor()

    assert descriptor.name == "my-test-pod"
    assert descriptor.namespace == "default"
    assert descriptor.label_map == {"app": "demo"}
    assert descriptor.labels == (("app", "demo"),)
    assert descriptor.container.name == "busybox"
    assert descriptor.container.image == "busybox"
    assert descriptor.container.image_pull_policy == ImagePullPolicy.IF_NOT_PRESENT
    assert descriptor.container.command == ("sleep", "3600")


def test_descriptor_is_frozen():
    descriptor = build_pod_descriptor()

    with pytest.raises(ValidationError):
        descriptor.name = "other"


def test_namespace_is_shared_parameter():
    descriptor = build_pod_descriptor(namespace="team-a")

    assert descriptor.namespace == "team-a"
    assert descriptor.to_v1_pod().metadata.namespace == "team-a"


def test_to_v1_pod():
    pod = build_pod_descriptor().to_v1_pod()

    assert pod.api_version == "v1"
    assert pod.kind == "Pod"
    assert pod.metadata.name == "my-test-pod"
    assert pod.metadata.labels == {"app": "demo"}
    container = pod.spec.containers[0]
    assert container.image == "busybox"
    assert container.image_pull_policy == "IfNotPresent"
    assert container.command == ["sleep", "3600"]


def test_labels_cannot_be_mutated():
    descriptor = build_pod_descriptor()

    with pytest.raises(TypeError):
        descriptor.labels["team"] = "platform"
    descriptor.label_map["team"] = "platform"

    assert descriptor.label_map == {"app": "demo"}
    assert descriptor.to_v1_pod().metadata.labels == {"app": "demo"}


def test_labels_accept_mapping_in_sorted_order():
    descriptor = PodDescriptor(
        name="web",
        labels={"tier": "frontend", "app": "shop"},
        container=ContainerSpec(name="web", image="nginx"),
    )

    assert descriptor.labels == (("app", "shop"), ("tier", "frontend"))
