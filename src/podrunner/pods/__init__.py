from .operations import (
    WorkflowResult,
    build_pod_descriptor,
    create_pod,
    list_pods,
    render_pod,
    run_pod_workflow,
)

__all__ = [
    "WorkflowResult",
    "build_pod_descriptor",
    "create_pod",
    "list_pods",
    "render_pod",
    "run_pod_workflow",
]
