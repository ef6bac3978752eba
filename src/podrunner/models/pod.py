"""Pod descriptor models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Tuple
from enum import Enum
from kubernetes import client


class ImagePullPolicy(str, Enum):
    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


class ContainerSpec(BaseModel):
    """Single container of a pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    image_pull_policy: ImagePullPolicy = ImagePullPolicy.IF_NOT_PRESENT
    command: Tuple[str, ...] = Field(default_factory=tuple)

    def to_v1_container(self) -> client.V1Container:
        return client.V1Container(
            name=self.name,
            image=self.image,
            image_pull_policy=self.image_pull_policy.value,
            command=list(self.command)
        )


class PodDescriptor(BaseModel):
    """Immutable description of the pod to create.

    Converted to a ``V1Pod`` request body only at the API boundary, so the
    descriptor itself never carries server-assigned fields.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = "default"
    # sorted (key, value) pairs; a mapping is accepted on input
    labels: Tuple[Tuple[str, str], ...] = Field(default_factory=tuple)
    container: ContainerSpec

    @field_validator("labels", mode="before")
    @classmethod
    def freeze_labels(cls, v):
        if isinstance(v, dict):
            return tuple(sorted(v.items()))
        return v

    @property
    def label_map(self) -> Dict[str, str]:
        return dict(self.labels)

    def to_v1_pod(self) -> client.V1Pod:
        """Build the create request body."""
        return client.V1Pod(
            api_version="v1",
            kind="Pod",
            metadata=client.V1ObjectMeta(
                name=self.name,
                namespace=self.namespace,
                labels=self.label_map
            ),
            spec=client.V1PodSpec(
                containers=[self.container.to_v1_container()]
            )
        )
