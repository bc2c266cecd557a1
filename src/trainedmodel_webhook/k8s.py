"""Kubernetes client helpers."""

import logging
from kubernetes import client, config

logger = logging.getLogger(__name__)


def load_config():
    """Load ambient cluster credentials.

    The in-cluster service account is preferred; outside a pod the local
    kubeconfig is used. A ConfigException from the fallback propagates.
    """
    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except config.ConfigException:
        config.load_kube_config()
        logger.info("Loaded kubeconfig")


def create_core_v1():
    """Load credentials and return a CoreV1Api client."""
    load_config()
    return client.CoreV1Api()


def list_service_names(v1, namespace, timeout=None):
    """List the names of all Services in a namespace."""
    kwargs = {}
    if timeout is not None:
        kwargs["_request_timeout"] = timeout
    services = v1.list_namespaced_service(namespace=namespace, **kwargs)
    return [svc.metadata.name for svc in (services.items or [])]
