"""Main operator entrypoint using Kopf."""

import logging
import kopf

from . import crd
from .config import WebhookConfig
from .errors import TrainedModelValidationError
from .k8s import create_core_v1
from .models import TrainedModel
from .validation import PredictorResolver, TrainedModelValidator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_validator(config):
    """Create the validator with a CoreV1Api client using ambient credentials."""
    resolver = PredictorResolver(create_core_v1(), request_timeout=config.lookup_timeout)
    return TrainedModelValidator(config, resolver)


def configure_webhook_server(settings, config):
    """Point kopf's admission server at the configured address and certificates."""
    settings.admission.server = kopf.WebhookServer(
        addr=config.addr,
        port=config.port,
        host=config.host,
        certfile=config.certfile,
        pkeyfile=config.pkeyfile,
    )
    if config.managed_name:
        settings.admission.managed = config.managed_name


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, memo: kopf.Memo, **kwargs):
    """Load configuration and build the shared validator."""
    config = WebhookConfig.from_env()
    logging.getLogger().setLevel(config.log_level)
    configure_webhook_server(settings, config)
    memo.validator = build_validator(config)
    logger.info(
        f"TrainedModel validator ready on {config.addr}:{config.port} "
        f"(storage protocols: {config.storage_protocols_display})"
    )


@kopf.on.validate(
    crd.GROUP,
    crd.VERSION,
    crd.PLURAL,
    id="trainedmodel",
    operations=[crd.OPERATION_CREATE, crd.OPERATION_UPDATE],
    ignore_failures=False,
)
def validate_trainedmodel(body, old, operation, memo, **kwargs):
    """Admit or deny TrainedModel create/update/delete requests."""
    validator = memo.validator
    try:
        if operation == crd.OPERATION_CREATE:
            validator.validate_create(TrainedModel.from_body(body))
        elif operation == crd.OPERATION_UPDATE:
            validator.validate_update(TrainedModel.from_body(body), TrainedModel.from_body(old or {}))
        elif operation == crd.OPERATION_DELETE:
            validator.validate_delete(TrainedModel.from_body(old or body or {}))
    except TrainedModelValidationError as e:
        logger.warning(f"Denied {operation} of TrainedModel: {e}")
        raise kopf.AdmissionError(str(e), code=e.code)


def run():
    """Run the operator with the handlers registered in this module."""
    kopf.run()


if __name__ == "__main__":
    run()
