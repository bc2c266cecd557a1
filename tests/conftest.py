"""Shared test fixtures for the TrainedModel webhook."""

from unittest.mock import MagicMock

import pytest
from kubernetes import client

from trainedmodel_webhook.config import WebhookConfig
from trainedmodel_webhook.validation import PredictorResolver, TrainedModelValidator


def make_service_list(*names):
    return client.V1ServiceList(
        items=[client.V1Service(metadata=client.V1ObjectMeta(name=name)) for name in names]
    )


def make_body(name="model1", namespace="default", isvc="svc1",
              storage_uri="s3://bucket/m", memory="1Gi", framework="sklearn"):
    return {
        "apiVersion": "serving.kserve.io/v1alpha1",
        "kind": "TrainedModel",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "inferenceService": isvc,
            "model": {"storageUri": storage_uri, "framework": framework, "memory": memory},
        },
    }


@pytest.fixture
def config():
    return WebhookConfig(storage_protocols=("s3://", "gs://"))


@pytest.fixture
def v1():
    """CoreV1Api double returning a namespace with svc1's predictor."""
    api = MagicMock()
    api.list_namespaced_service.return_value = make_service_list(
        "svc1-predictor-00001", "other-svc"
    )
    return api


@pytest.fixture
def resolver(v1):
    return PredictorResolver(v1, request_timeout=2.0)


@pytest.fixture
def validator(config, resolver):
    return TrainedModelValidator(config, resolver)
