# src/podrunner/cli.py
"""Create a demo pod and list the pods in its namespace."""

import click
import structlog

from podrunner.clients.kubernetes.client_factory import KubernetesClientFactory
from podrunner.config.settings import LogLevel, Settings
from podrunner.core.exceptions import PodRunnerException
from podrunner.core.utils import setup_logging
from podrunner.pods.operations import build_pod_descriptor, run_pod_workflow

logger = structlog.get_logger(__name__)


@click.command()
@click.option('--kubeconfig', default=None, help='Kubeconfig path used when in-cluster config is unavailable (default: $HOME/.kube/config)')
@click.option('--context', default=None, help='Kubeconfig context to use')
@click.option('--namespace', '-n', default=None, help='Namespace to create the pod in and list (default: default)')
@click.option('--log-config', default=None, help='YAML logging config file (enables JSON logs)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def main(kubeconfig, context, namespace, log_config, debug):
    """
    Create the my-test-pod pod and list every pod in its namespace.

    Credentials come from the pod's service account when running inside a
    cluster, otherwise from the kubeconfig file.

    Example:
        podrunner --kubeconfig ~/.kube/config --namespace default
    """
    settings = Settings.create_from_env()
    if debug:
        settings.log_level = LogLevel.DEBUG
    if log_config:
        settings.log_config_path = log_config
    if kubeconfig:
        settings.kubernetes.kubeconfig_path = kubeconfig
    if context:
        settings.kubernetes.context = context
    if namespace:
        settings.kubernetes.namespace = namespace

    setup_logging(config_path=settings.log_config_path, log_level=settings.log_level.value)

    factory = KubernetesClientFactory(settings.kubernetes.model_dump())
    try:
        with factory.create_client() as k8s:
            descriptor = build_pod_descriptor(namespace=settings.kubernetes.namespace)
            run_pod_workflow(k8s, descriptor)
    except PodRunnerException as e:
        logger.error("podrunner failed", error=e.message, **e.details)
        raise click.ClickException(e.message)


if __name__ == '__main__':
    main()
