"""TrainedModel admission rules and the validator composing them."""

import logging
import re
from decimal import Decimal
from typing import Iterable, Optional

import urllib3
from kubernetes.client.rest import ApiException

from . import crd
from .config import WebhookConfig
from .errors import (
    ImmutableFieldViolationError,
    NameFormatError,
    ReferenceLookupError,
    ReferenceNotFoundError,
    StorageURIFormatError,
)
from .k8s import list_service_names
from .models import ModelSpec, TrainedModel

logger = logging.getLogger("trainedmodel-alpha1-validator")

TM_REGEXP = re.compile("^" + crd.TM_NAME_FMT + "$")


def is_prefix_supported(uri: str, prefixes: Iterable[str]) -> bool:
    """Return True if ``uri`` starts with any of ``prefixes``."""
    return any(uri.startswith(prefix) for prefix in prefixes)


def is_valid_name(name: Optional[str]) -> bool:
    if not name:
        return False
    return TM_REGEXP.fullmatch(name) is not None


def memory_unchanged(old: ModelSpec, new: ModelSpec) -> bool:
    """Compare memory quantities by value, so "2Gi" equals "2048Mi"."""
    try:
        old_memory: Decimal = old.memory_quantity
        new_memory: Decimal = new.memory_quantity
    except ValueError:
        return old.memory_display == new.memory_display
    return old_memory == new_memory


class PredictorResolver:
    """Looks up the predictor Service of an InferenceService.

    Every call lists the namespace's Services again; nothing is cached and
    failures are not retried.
    """

    def __init__(self, v1, request_timeout: Optional[float] = None):
        self.v1 = v1
        self.request_timeout = request_timeout

    def parent_predictor_exists(self, namespace: str, isvc_name: str, tm_name: str = "") -> bool:
        """Return True if a Service named ``<isvc_name>-predictor*`` exists.

        A failed listing (API error, transport error or timeout) raises
        ReferenceLookupError chained to the cause; it is never reported as
        "not found".
        """
        prefix = isvc_name + crd.PREDICTOR_SUFFIX
        try:
            names = list_service_names(self.v1, namespace, timeout=self.request_timeout)
        except (ApiException, urllib3.exceptions.HTTPError, OSError) as e:
            logger.error(f"Error listing services in namespace {namespace}: {e}")
            raise ReferenceLookupError(isvc_name, tm_name, e) from e
        return any(name.startswith(prefix) for name in names)


class TrainedModelValidator:
    """Runs the TrainedModel rules in order and raises the first failure."""

    def __init__(self, config: WebhookConfig, resolver: PredictorResolver):
        self.config = config
        self.resolver = resolver

    def validate_create(self, tm: TrainedModel) -> None:
        logger.info(f"validate create: {tm.namespace}/{tm.name}")
        self.validate_trained_model(tm)

    def validate_update(self, tm: TrainedModel, old: TrainedModel) -> None:
        logger.info(f"validate update: {tm.namespace}/{tm.name}")
        self.validate_trained_model(tm)
        self.validate_memory_not_modified(tm, old)

    def validate_delete(self, tm: TrainedModel) -> None:
        logger.info(f"validate delete: {tm.namespace}/{tm.name}")

    def validate_trained_model(self, tm: TrainedModel) -> None:
        # Format checks run before the Service lookup.
        self.validate_name(tm)
        self.validate_storage_uri(tm)
        self.validate_isvc_name(tm)

    def validate_name(self, tm: TrainedModel) -> None:
        if not is_valid_name(tm.name):
            raise NameFormatError(tm.name, TM_REGEXP.pattern)

    def validate_storage_uri(self, tm: TrainedModel) -> None:
        if not is_prefix_supported(tm.model.storage_uri, self.config.storage_protocols):
            raise StorageURIFormatError(tm.name, tm.model.storage_uri, self.config.storage_protocols)

    def validate_isvc_name(self, tm: TrainedModel) -> None:
        found = self.resolver.parent_predictor_exists(tm.namespace, tm.inference_service, tm.name)
        if not found:
            raise ReferenceNotFoundError(tm.inference_service, tm.name)

    def validate_memory_not_modified(self, tm: TrainedModel, old: TrainedModel) -> None:
        if not memory_unchanged(old.model, tm.model):
            raise ImmutableFieldViolationError(tm.name, old.model.memory_display, tm.model.memory_display)
