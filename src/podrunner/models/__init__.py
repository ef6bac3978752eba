from .pod import *

__all__ = [
    "ImagePullPolicy",
    "ContainerSpec",
    "PodDescriptor",
]
